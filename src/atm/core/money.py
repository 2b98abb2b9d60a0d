#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer minor units internally.
Prevents floating-point errors and provides type-safe balance operations.
"""

from dataclasses import dataclass

from .currency import (
    MINOR_UNITS,
    format_cents,
    parse_balance_to_cents,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in minor units (NGN kobo).

    Examples:
        >>> balance = Money.from_major(2000)
        >>> str(balance)
        '2000.00 NGN'

        >>> deposit = Money.from_text("150.50")
        >>> str(balance + deposit)
        '2150.50 NGN'

        >>> Money.zero() < deposit
        True
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from minor units."""
        return cls(cents=cents)

    @classmethod
    def from_major(cls, amount: int) -> "Money":
        """Create Money from a whole number of major units."""
        return cls(cents=amount * MINOR_UNITS)

    @classmethod
    def from_text(cls, text: str) -> "Money":
        """
        Parse a non-negative amount string like '5006267.00'.

        Used for configured balances. Transaction amounts go through
        currency.parse_amount, which also rejects zero.
        """
        return cls(cents=parse_balance_to_cents(text))

    @classmethod
    def zero(cls) -> "Money":
        return cls(cents=0)

    def to_cents(self) -> int:
        """Get value in minor units."""
        return self.cents

    def __add__(self, other: "Money") -> "Money":
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        return Money(cents=self.cents - other.cents)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents == other.cents

    def __hash__(self) -> int:
        return hash(self.cents)

    def __lt__(self, other: "Money") -> bool:
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as amount string with currency code."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
