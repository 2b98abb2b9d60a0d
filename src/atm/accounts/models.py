#!/usr/bin/env python3
"""
Account Data Model

A single user's balance and transaction pin. Balances are held as Money so
all arithmetic stays in integer minor units.
"""

from dataclasses import dataclass

from ..core.errors import InsufficientFundsError
from ..core.money import Money


@dataclass
class Account:
    """
    A user bank account.

    The balance never goes negative: withdraw refuses any amount larger than
    the current balance and leaves the account untouched.
    """

    balance: Money
    transaction_pin: str

    def deposit(self, amount: Money) -> Money:
        """Credit the account and return the new balance."""
        self.balance = self.balance + amount
        return self.balance

    def withdraw(self, amount: Money) -> Money:
        """
        Debit the account and return the remaining balance.

        Raises:
            InsufficientFundsError: If amount exceeds the current balance
        """
        if amount > self.balance:
            raise InsufficientFundsError(self.balance, amount)
        self.balance = self.balance - amount
        return self.balance

    def pin_matches(self, pin: str) -> bool:
        """Exact, case-sensitive pin comparison."""
        return self.transaction_pin == pin

    def __repr__(self) -> str:
        return f"Account(balance={self.balance!r}, transaction_pin='***')"
