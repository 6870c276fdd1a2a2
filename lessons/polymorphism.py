"""Run-time polymorphism: overridden and abstract display methods."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class Shape:
    """A base object with one value and an overridable display."""

    var_base: int = 100

    def display(self) -> list[str]:
        """Return the lines describing the base value."""
        return [f"1 Displaying base class variable {self.var_base}"]


@dataclass
class Extended(Shape):
    """Adds a second value and overrides the display."""

    var_derived: int = 200

    def display(self) -> list[str]:
        """Return the lines describing both values."""
        return [
            f"2 Displaying base class variable {self.var_base}",
            f"2 Displaying derived class variable {self.var_derived}",
        ]


@dataclass
class Tutorial(ABC):
    """A rated tutorial; concrete kinds say how long they are."""

    title: str
    rating: float

    @abstractmethod
    def display(self) -> list[str]:
        """Return the lines shared by every kind of tutorial."""
        return [f"Ratings : {_fmt(self.rating)} out of 5 stars"]


@dataclass
class VideoTutorial(Tutorial):
    """A tutorial given as a video of some minutes."""

    length: int

    def display(self) -> list[str]:
        return [
            f"This is an amazing video with title {self.title}",
            *super().display(),
            f"Length of this video is {self.length} minutes",
        ]


@dataclass
class TextTutorial(Tutorial):
    """A tutorial given as a text of some words."""

    words: int

    def display(self) -> list[str]:
        return [
            f"This is an amazing text with title {self.title}",
            *super().display(),
            f"Length of this text is {self.words} words",
        ]