"""Worked examples of core programming ideas, a login store and a timed quiz game."""

__version__ = "0.1.0"