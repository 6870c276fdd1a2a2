"""Sequence and mapping containers, and sorting with a comparator."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Any, Iterable, Mapping

Step = tuple[str, tuple[Any, ...]]


def vector_steps(values: Iterable[Any]) -> list[Step]:
    """Apply pops and inserts to a vector, returning each labelled state."""
    vector = list(values)
    steps: list[Step] = [("Elements of the vector", tuple(vector))]
    vector.pop()
    steps.append(("After popping 1 time", tuple(vector)))
    vector.pop()
    steps.append(("After popping 2 times", tuple(vector)))
    vector.insert(0, 82)
    steps.append(("After inserting 82 at 1 pos", tuple(vector)))
    vector.insert(1, 11)
    steps.append(("After inserting 11 at 2 pos", tuple(vector)))
    vector[2:2] = [50] * 4
    steps.append(("After inserting 4 copies of 50 at 3 pos", tuple(vector)))
    return steps


def list_steps(first: Iterable[Any], second: Iterable[Any]) -> list[Step]:
    """Trim, filter and sort ``second``, merge it into ``first`` and reverse."""
    items = deque(second)
    steps: list[Step] = [("List elements are", tuple(items))]
    items.pop()
    steps.append(("After popping back 1 time", tuple(items)))
    items.popleft()
    steps.append(("After popping front 1 time", tuple(items)))
    items = deque(item for item in items if item != 3)
    steps.append(("After removing 3 from the list", tuple(items)))
    items = deque(sorted(items))
    steps.append(("After sorting the list", tuple(items)))
    merged = list(heapq.merge(first, items))
    steps.append(("Displaying the elements of the merge list1", tuple(merged)))
    merged.reverse()
    steps.append(("After reversing the list1", tuple(merged)))
    return steps


def sorted_marks(marks: Mapping[str, int]) -> list[tuple[str, int]]:
    """Return the name and mark pairs in ascending order of name."""
    return sorted(marks.items())


def sort_steps(values: Iterable[Any]) -> tuple[list[Any], list[Any], list[Any]]:
    """Return the values as given, sorted ascending and sorted descending."""
    original = list(values)
    ascending = sorted(original)
    descending = sorted(ascending, reverse=True)
    return original, ascending, descending


def format_elements(values: Iterable[Any]) -> str:
    """Return each element followed by a single space."""
    return "".join(f"{value} " for value in values)