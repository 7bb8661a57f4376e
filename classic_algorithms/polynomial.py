"""Polynomials as lists of terms, with multiplication."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class Term:
    """One term ``coeff * x**exp``."""

    coeff: float
    exp: int


def multiply(p: Iterable[Term], q: Iterable[Term]) -> List[Term]:
    """Product of two polynomials, like exponents combined, in descending exponent order."""
    p_terms = list(p)
    q_terms = list(q)
    if not p_terms or not q_terms:
        raise ValueError("multiplication not possible: a polynomial has no terms")
    coefficients: dict = {}
    order: list = []  # negated exponents, kept ascending
    for a in p_terms:
        for b in q_terms:
            exp = a.exp + b.exp
            if exp in coefficients:
                coefficients[exp] += a.coeff * b.coeff
            else:
                coefficients[exp] = a.coeff * b.coeff
                bisect.insort(order, -exp)
    return [Term(coefficients[-neg], -neg) for neg in order]


def format_terms(terms: Iterable[Term]) -> str:
    """One 'COEFF: <c>, EXP: <e>' line per term."""
    return "\n".join(f"COEFF: {term.coeff:f}, EXP: {term.exp}" for term in terms)