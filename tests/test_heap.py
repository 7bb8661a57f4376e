from collections import Counter

import pytest

from classic_algorithms.heap import HeapOverflowError, MinHeap


def _filled(values, capacity=None):
    heap = MinHeap(capacity if capacity is not None else len(values))
    for value in values:
        heap.insert_key(value)
    return heap


def _drain(heap):
    return [heap.extract_min() for _ in range(len(heap))]


def test_driver_scenario():
    h = MinHeap(11)
    h.insert_key(3)
    h.insert_key(2)
    h.delete_key(1)
    for key in (15, 5, 4, 45):
        h.insert_key(key)
    assert h.extract_min() == 2
    assert h.get_min() == 4
    h.decrease_key(2, 1)
    assert h.get_min() == 1


@pytest.mark.parametrize(
    "values",
    [[5], [3, 1, 2], [9, 8, 7, 6, 5, 4, 3, 2, 1], [4, 4, 1, 1, 7, 0, 3]],
)
def test_extraction_is_sorted(values):
    assert _drain(_filled(values)) == sorted(values)


def test_len_tracks_size():
    heap = _filled([5, 1, 3], capacity=10)
    assert len(heap) == 3
    heap.extract_min()
    assert len(heap) == 2


def test_overflow_raises():
    heap = _filled([1, 2], capacity=2)
    with pytest.raises(HeapOverflowError):
        heap.insert_key(3)


def test_empty_heap_errors():
    heap = MinHeap(3)
    with pytest.raises(IndexError):
        heap.extract_min()
    with pytest.raises(IndexError):
        heap.get_min()


@pytest.mark.parametrize("index", [0, 1, 2, 3, 4, 5])
def test_delete_key_removes_exactly_one(index):
    values = [10, 4, 15, 20, 0, 8]
    heap = _filled(values)
    heap.delete_key(index)
    remaining = _drain(heap)
    assert remaining == sorted(remaining)
    assert len(remaining) == len(values) - 1
    assert sum((Counter(values) - Counter(remaining)).values()) == 1


def test_decrease_key_to_new_minimum():
    heap = _filled([10, 20, 30, 40])
    heap.decrease_key(3, -5)
    assert heap.get_min() == -5
    assert _drain(heap) == [-5, 10, 20, 30]


def test_decrease_key_rejects_increase():
    heap = _filled([1, 2, 3])
    with pytest.raises(ValueError):
        heap.decrease_key(0, 100)


def test_bad_index_raises():
    heap = _filled([1, 2, 3])
    with pytest.raises(IndexError):
        heap.decrease_key(3, 0)
    with pytest.raises(IndexError):
        heap.delete_key(-1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        MinHeap(-1)