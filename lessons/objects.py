"""Objects: shared access, default arguments, copies and lifetimes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Holder:
    """A mutable holder for a single value."""

    value: Any


def combined(first: Holder, second: Holder) -> Any:
    """Return the sum of the values of two holders."""
    return first.value + second.value


def exchange(first: Holder, second: Holder) -> None:
    """Exchange the values of two holders in place."""
    first.value, second.value = second.value, first.value


@dataclass
class Simple:
    """Two data values, the second of which defaults to 9."""

    data1: int
    data2: int = 9

    def __str__(self) -> str:
        return f"The value of data is {self.data1} and {self.data2}"


@dataclass
class Number:
    """A single number that starts at zero."""

    value: int = 0

    def copy(self) -> Number:
        """Return an independent copy."""
        return Number(self.value)


class InstanceTracker:
    """Counts live instances, logging each creation and each release."""

    active = 0

    def __init__(self, log: list[str]) -> None:
        self.log = log
        InstanceTracker.active += 1
        log.append(f"Constructor called !!{InstanceTracker.active}")

    def __enter__(self) -> InstanceTracker:
        return self

    def __exit__(self, *args: Any) -> None:
        self.log.append(f"Destructor called !!{InstanceTracker.active}")
        InstanceTracker.active -= 1