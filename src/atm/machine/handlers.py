#!/usr/bin/env python3
"""
Transaction Handlers

One plain function per command. Each receives arguments that have already
been tokenized and arity-checked, performs the transaction against the
application state, and returns a TransactionResult describing what to show.

Handlers never print. Failures are raised as ATMError subclasses so the
dispatcher can report them and return to the prompt.
"""

import logging
from dataclasses import dataclass, field

from ..accounts.auth import authenticate
from ..core.currency import CURRENCY_CODE, parse_amount
from ..core.errors import InvalidInputError
from ..core.money import Money
from .state import AppState

logger = logging.getLogger(__name__)

SEPARATOR = "---------------------------------------"


@dataclass
class TransactionResult:
    """Outcome of a successful command."""

    lines: list[str] = field(default_factory=list)
    balance: Money | None = None
    terminate: bool = False

    @property
    def message(self) -> str:
        return "\n".join(self.lines)


def create_account(state: AppState, username: str, pin: str) -> TransactionResult:
    """Create a new bank account for a user."""
    account = state.directory.create(username, pin)
    return TransactionResult(
        lines=[f"Account with username {username} has been created successfully."],
        balance=account.balance,
    )


def deposit(state: AppState, amount: str, username: str, pin: str) -> TransactionResult:
    """Credit an account with amount."""
    value = parse_amount(amount)
    account = authenticate(state.directory, username, pin)
    balance = account.deposit(value)

    logger.info(f"Deposited {value} to {username}")
    return TransactionResult(
        lines=[
            f"{username.upper()}, the deposit to your account was successful.",
            f"Your new balance is {balance}.",
        ],
        balance=balance,
    )


def withdraw(state: AppState, amount: str, username: str, pin: str) -> TransactionResult:
    """Debit amount from an account, refusing to overdraw it."""
    value = parse_amount(amount)
    account = authenticate(state.directory, username, pin)
    balance = account.withdraw(value)

    logger.info(f"Withdrew {value} from {username}")
    return TransactionResult(
        lines=[
            f"{username.upper()}, your withdrawal of {value} has been concluded successfully.",
            f"Your remaining balance is: {balance}",
        ],
        balance=balance,
    )


def check_balance(state: AppState, username: str, pin: str) -> TransactionResult:
    """Report an account's balance."""
    account = authenticate(state.directory, username, pin)
    return TransactionResult(
        lines=[f"{username.upper()}, your account balance is {account.balance}."],
        balance=account.balance,
    )


def change_pin(state: AppState, username: str, pin: str, newpin: str) -> TransactionResult:
    """
    Replace an account's transaction pin.

    The new pin must be non-empty and different from the current one.
    """
    if not newpin:
        raise InvalidInputError("new transaction pin cannot be empty")

    account = authenticate(state.directory, username, pin)
    if account.pin_matches(newpin):
        raise InvalidInputError("new transaction pin must differ from your current pin")

    account.transaction_pin = newpin
    logger.info(f"Changed transaction pin for {username}")
    return TransactionResult(
        lines=[f"{username.upper()}, your transaction pin has been changed successfully."],
    )


def start(state: AppState, pin: str) -> TransactionResult:
    """Log in to the default account and welcome the user."""
    account = authenticate(state.directory, state.default_username, pin)
    state.session_username = state.default_username

    lines = [
        SEPARATOR,
        f"{state.default_username.upper()}, Welcome to the {state.name}.",
        "",
        f"Your current balance is {account.balance}.",
    ]
    lines.extend(show_help(state).lines)
    return TransactionResult(lines=lines, balance=account.balance)


def logout(state: AppState) -> TransactionResult:
    """End the session."""
    state.session_username = None
    return TransactionResult(lines=[f"Exiting {state.name} ...."], terminate=True)


def show_help(state: AppState) -> TransactionResult:
    """List every registered command with its usage."""
    lines = [
        SEPARATOR,
        f"About the {state.name} and Commands",
        SEPARATOR,
        f"Note all amounts are in {CURRENCY_CODE}.",
        "Command - Usage",
    ]
    for index, command in enumerate(state.registry):
        names = ", ".join(command.names)
        lines.append(f"   {index}   - [{names}] {command.usage}")
        lines.append(f"         {command.example}")
    return TransactionResult(lines=lines)
