#!/usr/bin/env python3
"""
Currency Handling Utilities

Amount handling for the CLI ATM Machine.
All balance calculations use integer arithmetic to avoid floating-point errors.

Currency System:
- The machine supports exactly one currency (NGN)
- Internal calculations use minor units: 100 kobo = 1.00 NGN
- Display uses amount strings: "2000.00 NGN"

Key Principles:
- Never use floating-point arithmetic for balances
- Parse user input with Decimal, then convert to integer minor units
- Reject input that cannot be represented in whole minor units
- Reject amounts too large to keep every balance printable
"""

from decimal import Decimal, DecimalException, Inexact, InvalidOperation, Underflow, localcontext
from typing import TYPE_CHECKING

from .errors import AmountParseError, InvalidAmountError

if TYPE_CHECKING:
    from .money import Money

# The default and only supported currency.
CURRENCY_CODE = "NGN"

MINOR_UNITS = 100

# Amounts must stay below 10**MAX_MAJOR_DIGITS major units.
MAX_MAJOR_DIGITS = 15


def cents_to_amount_str(cents: int) -> str:
    """
    Convert minor units to an amount string using pure integer arithmetic.

    Args:
        cents: Amount in minor units

    Returns:
        Formatted amount string without currency code

    Example:
        cents_to_amount_str(500626700) -> "5006267.00"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    major = abs_cents // MINOR_UNITS
    remainder = abs_cents % MINOR_UNITS

    if is_negative:
        return f"-{major}.{remainder:02d}"
    return f"{major}.{remainder:02d}"


def format_cents(cents: int) -> str:
    """Format minor units with the currency code, e.g. '2000.00 NGN'."""
    return f"{cents_to_amount_str(cents)} {CURRENCY_CODE}"


def decimal_to_cents(value: Decimal, token: str | None = None) -> int:
    """
    Convert a Decimal amount to integer minor units.

    Raises:
        InvalidAmountError: If the value is too large to represent, or has
            more precision than minor units allow
    """
    label = token if token is not None else str(value)
    if value.is_zero():
        return 0
    if value.adjusted() >= MAX_MAJOR_DIGITS:
        raise InvalidAmountError(label, f"amounts must be less than {10 ** MAX_MAJOR_DIGITS} {CURRENCY_CODE}")
    if value.adjusted() < -2:
        raise InvalidAmountError(label, "amounts cannot have more than two decimal places")

    try:
        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            ctx.traps[Underflow] = True
            scaled = value * MINOR_UNITS
    except DecimalException as e:
        raise InvalidAmountError(label, "amounts cannot have more than two decimal places") from e

    if scaled != scaled.to_integral_value():
        raise InvalidAmountError(label, "amounts cannot have more than two decimal places")
    return int(scaled)


def parse_decimal(token: str) -> Decimal:
    """
    Parse a raw amount token into a finite Decimal.

    Args:
        token: Raw text as typed by the user, e.g. "2000" or "150.50"

    Returns:
        Parsed Decimal

    Raises:
        AmountParseError: If the token is not a finite decimal number
    """
    try:
        value = Decimal(token.strip())
    except (InvalidOperation, ValueError, TypeError) as e:
        raise AmountParseError(token) from e

    if not value.is_finite():
        raise AmountParseError(token)
    return value


def parse_amount(token: str) -> "Money":
    """
    Parse a transaction amount token.

    Non-numeric input is a parse error; numeric input that is zero, negative
    or finer than one minor unit is an invalid amount.

    Examples:
        parse_amount("2000") -> Money(cents=200000)
        parse_amount("abc") -> AmountParseError
        parse_amount("-50") -> InvalidAmountError

    Raises:
        AmountParseError: If the token is not numeric
        InvalidAmountError: If the amount is not strictly positive or out of range
    """
    from .money import Money

    value = parse_decimal(token)
    if value <= 0:
        raise InvalidAmountError(token, "amount must be greater than zero")
    cents = decimal_to_cents(value, token)
    if cents <= 0:
        raise InvalidAmountError(token, "amount must be greater than zero")
    return Money.from_cents(cents)


def parse_balance_to_cents(text: str) -> int:
    """
    Parse a configured balance such as '5006267.00' into minor units.

    Zero is allowed here, unlike transaction amounts.

    Raises:
        AmountParseError: If the text is not numeric
        InvalidAmountError: If the balance is negative or too precise
    """
    value = parse_decimal(text)
    if value < 0:
        raise InvalidAmountError(text, "balance cannot be negative")
    return decimal_to_cents(value, text)
