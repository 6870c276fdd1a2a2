"""Complex numbers built from integer real and imaginary parts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Complex:
    """A complex number with integer parts; missing parts default to zero."""

    real: int = 0
    imag: int = 0

    def __add__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    def __str__(self) -> str:
        return f"{self.real} + {self.imag}i"


def default_complex() -> Complex:
    """Return the number a default-constructed complex starts out as."""
    return Complex(100, 90)


class Calculator:
    """Helper that works on the parts of complex numbers."""

    def add(self, a: int, b: int) -> int:
        """Return the sum of two integers."""
        return a + b

    def sum_real(self, first: Complex, second: Complex) -> int:
        """Return the sum of the real parts."""
        return first.real + second.real

    def sum_imag(self, first: Complex, second: Complex) -> int:
        """Return the sum of the imaginary parts."""
        return first.imag + second.imag