"""A small shop that records items and totals their cost."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

CAPACITY = 100


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class Item:
    """One line of a shopping list."""

    item_id: int
    price: float
    quantity: int = 1


class Shop:
    """Holds up to ``CAPACITY`` items in the order they were added."""

    def __init__(self) -> None:
        self._items: list[Item] = []

    def add(self, item_id: int, price: float, quantity: int = 1) -> Item:
        """Add an item and return it."""
        if len(self._items) >= CAPACITY:
            raise OverflowError(f"shop holds at most {CAPACITY} items")
        item = Item(item_id, price, quantity)
        self._items.append(item)
        return item

    def total(self) -> int:
        """Return the whole-number total, truncated after each item is added."""
        amount = 0
        for item in self._items:
            amount = math.trunc(amount + item.quantity * item.price)
        return amount

    def lines(self) -> list[str]:
        """Return the price of each item followed by the total."""
        report = [
            f"The price of the item with id {item.item_id} is {_fmt(item.price)}"
            for item in self._items
        ]
        report.append(f"Total amount = {self.total()}")
        return report

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)