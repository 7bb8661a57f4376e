"""Small numeric and string routines."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Tuple

_DIRECT_LIMIT = 10**1000
_LOG10_2 = 0.30102999566398


def gcd_subtraction(a: int, b: int) -> int:
    """Greatest common divisor by repeated subtraction of the smaller from the larger."""
    if a < 0 or b < 0:
        raise ValueError("gcd_subtraction takes non-negative integers")
    while True:
        if a == 0:
            return b
        if b == 0 or a == b:
            return a
        # Subtract as many times as the one-at-a-time loop would, in one step.
        if a > b:
            a -= b * ((a - 1) // b)
        else:
            b -= a * ((b - 1) // a)


def gcd_euclid(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's remainder loop; b must not be zero."""
    while True:
        remainder = a % b
        a, b = b, remainder
        if remainder == 0:
            return a


def reverse_digits(n: int) -> int:
    """The digits of n in reverse order, keeping its sign; trailing zeros vanish."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def reverse_of_reverse_sum(a: int, b: int) -> int:
    """Reverse both numbers, add them, and reverse the sum."""
    return reverse_digits(reverse_digits(a) + reverse_digits(b))


def reverse_number_text(value: int) -> str:
    """The digits of value reversed as text, keeping the zeros that lead the result."""
    if value == 0:
        return "0"
    reversed_text = str(abs(value))[::-1]
    digits = reversed_text.lstrip("0")
    zeros = len(reversed_text) - len(digits)
    sign = -1 if value < 0 else 1
    return "0" * zeros + str(sign * int(digits))


def _decimal_string(n: int, width: int = 0) -> str:
    if n < _DIRECT_LIMIT:
        return str(n).zfill(width)
    half = max(1, int(n.bit_length() * _LOG10_2) // 2)
    high, low = divmod(n, 10**half)
    return _decimal_string(high, max(width - half, 0)) + _decimal_string(low, half)


def power_digits(base: int, exponent: int) -> str:
    """Decimal digits of base ** exponent, however many there are."""
    if base < 0 or exponent < 0:
        raise ValueError("base and exponent must not be negative")
    return _decimal_string(base**exponent)


def max_of_three(a: Any, b: Any, c: Any) -> Any:
    """The largest of three values."""
    if a > b:
        return a if a > c else c
    return b if b > c else c


def max_and_runner_up(values: Iterable[Any]) -> Tuple[Any, Any]:
    """Largest value and the next largest, found with a knockout tournament."""
    leaves = list(values)
    n = len(leaves)
    if n < 2:
        raise ValueError("at least two values are required")
    tree: List[Any] = [None] * n + leaves
    for parent in range(n - 1, 0, -1):
        tree[parent] = max(tree[2 * parent], tree[2 * parent + 1])

    beaten_by_winner = []
    node = 1
    while node < n:
        left = 2 * node
        if tree[left] == tree[node]:
            beaten_by_winner.append(tree[left + 1])
            node = left
        else:
            beaten_by_winner.append(tree[left])
            node = left + 1
    return tree[1], max(beaten_by_winner)


def reverse_string(text: str) -> str:
    return text[::-1]


def name_fragment(name: str) -> str:
    """Up to seven characters of name, starting from its second character."""
    if not name:
        raise IndexError("name must have at least one character")
    return name[1:8]


def _hanoi(n: int, source: str, target: str, spare: str) -> Iterator[Tuple[str, str]]:
    if n == 1:
        yield source, target
        return
    yield from _hanoi(n - 1, source, spare, target)
    yield source, target
    yield from _hanoi(n - 1, spare, target, source)


def hanoi_moves(n: int, source: str = "A", target: str = "B", spare: str = "C") -> List[Tuple[str, str]]:
    """Moves (from, to) that carry n discs from source to target."""
    if n < 1:
        raise ValueError("there must be at least one disc")
    return list(_hanoi(n, source, target, spare))