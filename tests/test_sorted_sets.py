import random

import pytest

from classic_algorithms.sorted_sets import sorted_intersection, sorted_union

PAIRS = [
    ([], []),
    ([1, 2, 3], []),
    ([], [4, 5]),
    ([1, 3, 5, 7], [2, 3, 4, 7, 9]),
    ([1, 2], [3, 4]),
    ([10, 20, 30], [10, 20, 30]),
]


@pytest.mark.parametrize("a, b", PAIRS)
def test_intersection_of_distinct_inputs(a, b):
    assert sorted_intersection(a, b) == sorted(set(a) & set(b))


@pytest.mark.parametrize("a, b", PAIRS)
def test_union_of_distinct_inputs(a, b):
    assert sorted_union(a, b) == sorted(set(a) | set(b))


def test_random_distinct_inputs():
    rng = random.Random(3)
    for _ in range(40):
        a = sorted(rng.sample(range(100), rng.randint(0, 20)))
        b = sorted(rng.sample(range(100), rng.randint(0, 20)))
        assert sorted_intersection(a, b) == sorted(set(a) & set(b))
        assert sorted_union(a, b) == sorted(set(a) | set(b))


def test_intersection_keeps_matched_duplicates():
    assert sorted_intersection([1, 2, 2, 3], [2, 2, 4]) == [2, 2]


def test_union_output_is_ascending_and_sized():
    a, b = [1, 1, 2], [1, 3]
    result = sorted_union(a, b)
    assert result == sorted(result)
    assert len(result) == len(a) + len(b) - len(sorted_intersection(a, b))


def test_operations_are_symmetric():
    a, b = [0, 2, 4, 6], [1, 2, 3, 6]
    assert sorted_intersection(a, b) == sorted_intersection(b, a)
    assert sorted_union(a, b) == sorted_union(b, a)