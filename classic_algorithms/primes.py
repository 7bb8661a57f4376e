"""Prime sieves and factorisation."""

from __future__ import annotations

from math import isqrt
from typing import List, Tuple


def sieve(limit: int) -> List[bool]:
    """Flags for 0..limit telling which numbers are prime."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    flags = [i >= 2 for i in range(limit + 1)]
    for i in range(2, isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit + 1, i))
    return flags


def primes_up_to(limit: int) -> List[int]:
    """All primes not greater than limit, ascending."""
    return [number for number, is_prime in enumerate(sieve(limit)) if is_prime]


def prime_factorization(n: int) -> List[Tuple[int, int]]:
    """(prime, exponent) pairs of n in ascending prime order; empty for 1."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors = []
    remaining = n
    candidate = 2
    while candidate * candidate <= remaining:
        count = 0
        while remaining % candidate == 0:
            remaining //= candidate
            count += 1
        if count:
            factors.append((candidate, count))
        candidate += 1 if candidate == 2 else 2
    if remaining > 1:
        factors.append((remaining, 1))
    return factors