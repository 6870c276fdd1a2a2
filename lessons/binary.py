"""Checking and inverting strings of binary digits."""

from __future__ import annotations


def is_binary(text: str) -> bool:
    """Return True when every character is '0' or '1'."""
    return all(ch in "01" for ch in text)


def ones_complement(text: str) -> str:
    """Turn every '1' into '0' and every other character into '1'."""
    return "".join("0" if ch == "1" else "1" for ch in text)