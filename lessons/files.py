"""Writing text files and reading them back line by line."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

PathLike = Union[str, Path]


def write_text(path: PathLike, text: str) -> None:
    """Replace the file's contents with ``text``, adding no newline."""
    Path(path).write_text(text)


def read_lines(path: PathLike, limit: Optional[int] = None) -> list[str]:
    """Return the file's lines, reading until end of file.

    A file that ends with a newline yields a final empty line. With
    ``limit`` only the first ``limit`` lines are returned.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must not be negative")
    lines = Path(path).read_text().split("\n")
    return lines if limit is None else lines[:limit]


def write_student_list(path: PathLike, names: Iterable[str]) -> str:
    """Write a numbered student list under a heading and return the text."""
    entries = [f"{number}. {name}\n" for number, name in enumerate(names, 1)]
    text = "STUDENT LIST\n\n" + "".join(entries)
    write_text(path, text)
    return text