#!/usr/bin/env python3
"""
Account Directory

In-memory store of every account for the lifetime of the process, keyed by
username. Accounts are only ever added; there is no removal.
"""

import logging

from ..core.config import OPENING_BALANCE
from ..core.errors import DuplicateAccountError, InvalidInputError
from ..core.money import Money
from .models import Account

logger = logging.getLogger(__name__)


class AccountDirectory:
    """
    Mapping from unique username to an exclusively owned Account.

    Example:
        >>> directory = AccountDirectory.seeded("philemon", "1234", Money.from_major(50000))
        >>> directory.create("alice", "0000").balance
        Money(cents=200000)
        >>> "alice" in directory
        True
    """

    def __init__(self, opening_balance: Money | None = None):
        """
        Initialize an empty directory.

        Args:
            opening_balance: Balance given to accounts created through create()
        """
        if opening_balance is None:
            opening_balance = Money.from_text(OPENING_BALANCE)
        self.opening_balance = opening_balance
        self._accounts: dict[str, Account] = {}

    @classmethod
    def seeded(
        cls,
        username: str,
        pin: str,
        balance: Money,
        opening_balance: Money | None = None,
    ) -> "AccountDirectory":
        """Create a directory holding the default account."""
        if not username or not pin:
            raise InvalidInputError("default account username and pin cannot be empty")

        directory = cls(opening_balance=opening_balance)
        directory._accounts[username] = Account(balance=balance, transaction_pin=pin)
        logger.debug(f"Seeded default account {username} with {balance}")
        return directory

    def create(self, username: str, pin: str) -> Account:
        """
        Create a new account with the opening balance.

        Raises:
            InvalidInputError: If username or pin is empty
            DuplicateAccountError: If the username already exists
        """
        if not username or not pin:
            raise InvalidInputError("transaction pin or username cannot be empty")

        if username in self._accounts:
            raise DuplicateAccountError(username)

        account = Account(balance=self.opening_balance, transaction_pin=pin)
        self._accounts[username] = account
        logger.info(f"Created account {username} with opening balance {account.balance}")
        return account

    def lookup(self, username: str) -> Account | None:
        """Return the account for username, or None."""
        return self._accounts.get(username)

    def usernames(self) -> list[str]:
        return sorted(self._accounts)

    def __contains__(self, username: object) -> bool:
        return username in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)
