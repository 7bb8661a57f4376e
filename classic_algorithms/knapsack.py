"""Greedy fractional knapsack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class Item:
    """An item with a positive weight and a profit."""

    weight: float
    profit: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def profit_per_unit(self) -> float:
        return self.profit / self.weight


def fractional_knapsack(
    items: Iterable[Item], capacity: float
) -> Tuple[float, List[Tuple[Item, float, float]]]:
    """Fill capacity best-ratio first, splitting the last item if needed.

    Returns the total profit and (item, weight taken, profit gained) for each item used.
    """
    ranked = sorted(items, key=lambda item: item.profit_per_unit, reverse=True)
    remaining = capacity
    total = 0.0
    taken: List[Tuple[Item, float, float]] = []
    for item in ranked:
        if remaining <= 0:
            break
        if remaining >= item.weight:
            taken.append((item, item.weight, item.profit))
            total += item.profit
            remaining -= item.weight
        else:
            gained = item.profit_per_unit * remaining
            taken.append((item, remaining, gained))
            total += gained
            break
    return total, taken