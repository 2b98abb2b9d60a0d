"""
Core Utilities Package

Shared building blocks used by the account store and the command machine.

This package provides:
- Currency handling with integer arithmetic for precision
- The Money value type
- The recoverable error taxonomy
- Configuration management for environment-specific settings
"""

from .config import (
    AccountsConfig,
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    CURRENCY_CODE,
    cents_to_amount_str,
    format_cents,
    parse_amount,
)
from .errors import (
    AmountParseError,
    ATMError,
    AuthenticationError,
    DuplicateAccountError,
    EmptyCredentialError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidInputError,
    PinMismatchError,
    UnknownCommandError,
    UnknownUserError,
)
from .money import Money

__all__ = [
    # Configuration
    "AccountsConfig",
    "Config",
    "Environment",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "reload_config",
    # Currency utilities
    "CURRENCY_CODE",
    "Money",
    "cents_to_amount_str",
    "format_cents",
    "parse_amount",
    # Errors
    "ATMError",
    "AmountParseError",
    "AuthenticationError",
    "DuplicateAccountError",
    "EmptyCredentialError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "InvalidInputError",
    "PinMismatchError",
    "UnknownCommandError",
    "UnknownUserError",
]
