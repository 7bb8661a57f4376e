import copy
import dataclasses

import pytest

from classic_algorithms.records import ClockTime, IntPair, Person, Resident, format_matrix


def test_int_pair_addition_example():
    assert IntPair(1, 2) + IntPair(4, 5) == IntPair(5, 7)


@pytest.mark.parametrize("p,q", [((1, 2), (4, 5)), ((3, 4), (5, 6)), ((-8, 0), (2, -9))])
def test_int_pair_addition_inverse(p, q):
    left, right = IntPair(*p), IntPair(*q)
    assert (left + right) + (-right) == left
    assert left + right == right + left


def test_int_pair_negation():
    pair = IntPair(8, 9)
    assert -pair == IntPair(-8, -9)
    assert -(-pair) == pair


def test_int_pair_rejects_other_types():
    with pytest.raises(TypeError):
        IntPair(1, 2) + 3


def test_int_pair_text():
    assert str(IntPair(8, 9)) == "a=8\nb=9"


@pytest.mark.parametrize(
    "t1,t2",
    [((1, 59, 59), (0, 0, 1)), ((2, 30, 45), (3, 45, 30)), ((0, 0, 0), (0, 0, 0)), ((10, 5, 5), (0, 54, 55))],
)
def test_clock_time_addition_normalises(t1, t2):
    first, second = ClockTime(*t1), ClockTime(*t2)
    total = first + second
    assert total.total_seconds == first.total_seconds + second.total_seconds
    assert 0 <= total.minutes < 60
    assert 0 <= total.seconds < 60


def test_clock_time_carry_into_hours():
    total = ClockTime(1, 59, 59) + ClockTime(0, 0, 1)
    assert (total.hours, total.minutes, total.seconds) == (2, 0, 0)


def test_person_defaults_and_copy():
    default = Person()
    assert (default.name, default.age) == ("XXXXX", 0)
    assert Person("Kate").age == 0
    original = Person("Jon Snow", 20)
    duplicate = copy.copy(original)
    assert duplicate == original
    assert str(duplicate) == "Name is:Jon Snow\nAge is:20"


def test_resident_default_city_and_copy():
    assert Resident("Sonu").city == "Delhi"
    original = Resident("Arya", "Bhopal")
    duplicate = dataclasses.replace(original)
    assert duplicate == original
    assert str(duplicate) == "Name:Arya\nCity:Bhopal"


def test_format_matrix_rows():
    rows = [[1, 2, 3], [4, 5, 6]]
    text = format_matrix(rows)
    assert text == "1 2 3\n4 5 6"
    assert [[int(v) for v in line.split()] for line in text.splitlines()] == rows


def test_format_matrix_empty():
    assert format_matrix([]) == ""