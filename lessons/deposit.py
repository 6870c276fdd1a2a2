"""Bank deposits grown by compound interest."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Deposit:
    """A deposit and the amount it returns after ``years`` years."""

    principal: int
    years: int
    rate: float
    return_amount: float

    def describe(self) -> list[str]:
        """Return the lines that summarise the deposit."""
        return [
            f"Principal amount was {self.principal}",
            f"Return value after {self.years} year is {self.return_amount:g}",
        ]


def compound_percent(principal: int, years: int, rate: int) -> Deposit:
    """Grow ``principal`` by ``rate`` percent per year."""
    amount = float(principal)
    for _ in range(years):
        amount += amount * rate / 100
    return Deposit(principal, years, rate, amount)


def compound_fraction(principal: int, years: int, rate: float) -> Deposit:
    """Grow ``principal`` by the fraction ``rate`` per year."""
    amount = float(principal)
    for _ in range(years):
        amount *= 1 + rate
    return Deposit(principal, years, rate, amount)