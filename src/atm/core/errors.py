"""
ATM error taxonomy.

Every error raised by a transaction is recoverable: the dispatcher reports
it and returns to the command prompt.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .money import Money


class ATMError(Exception):
    """Base class for all recoverable ATM errors."""

    pass


class InvalidInputError(ATMError):
    """Raised when a required field is empty or otherwise unusable."""

    pass


class DuplicateAccountError(ATMError):
    """Raised when creating an account whose username is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"account with username {username} already exists")


class AuthenticationError(ATMError):
    """Base class for failures to retrieve and verify an account."""

    pass


class EmptyCredentialError(AuthenticationError, InvalidInputError):
    """Raised when the username or transaction pin is empty."""

    def __init__(self) -> None:
        super().__init__("transaction pin or username cannot be empty")


class UnknownUserError(AuthenticationError):
    """Raised when no account exists for the username."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(
            f"user with username {username} does not exist. Please proceed to create an account"
        )


class PinMismatchError(AuthenticationError):
    """Raised when the supplied pin does not match the stored pin."""

    def __init__(self) -> None:
        super().__init__(
            "unauthorized: provided transaction pin does not match account's transaction pin"
        )


class AmountParseError(ATMError):
    """Raised when an amount token is not a decimal number."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid amount {token!r}: not a number")


class InvalidAmountError(ATMError):
    """Raised when an amount is numeric but not acceptable."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"invalid amount {token!r}: {reason}")


class InsufficientFundsError(ATMError):
    """Raised when a withdrawal exceeds the account balance."""

    def __init__(self, balance: "Money", requested: "Money"):
        self.balance = balance
        self.requested = requested
        super().__init__(
            "sorry, your account balance is insufficient for this withdrawal.\n"
            f"You have {balance} and want to withdraw {requested}"
        )


class UnknownCommandError(ATMError):
    """Raised when input does not name a registered command."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unknown command {token!r}. Enter a valid command")
