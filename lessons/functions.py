"""Functions: recursion, overloading, default arguments and mutable cells."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable


@dataclass
class Cell:
    """A mutable box holding one value."""

    value: Any


class ProductCounter:
    """Callable that returns ``a * b`` plus the number of times it was called."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, a: int, b: int) -> int:
        self.calls += 1
        return a * b + self.calls


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci term; terms up to the second are 1."""
    if n <= 2:
        return 1
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def factorial(n: int) -> int:
    """Return n!; any n of 1 or less gives 1."""
    return math.prod(range(2, n + 1))


def add(*args: int) -> int:
    """Add two or three numbers."""
    if len(args) not in (2, 3):
        raise TypeError(f"add() takes 2 or 3 arguments ({len(args)} given)")
    return sum(args)


def swap(a: Any, b: Any) -> tuple[Any, Any]:
    """Return the two values in exchanged order."""
    return b, a


def swap_cells(first: Cell, second: Cell) -> None:
    """Exchange the contents of two cells in place."""
    first.value, second.value = second.value, first.value


def total(price: float, quantity: int = 1) -> float:
    """Return the price of ``quantity`` items."""
    return float(quantity * price)


def join_marks(marks: Iterable[Any]) -> str:
    """Return the marks separated by single spaces."""
    return " ".join(str(mark) for mark in marks)