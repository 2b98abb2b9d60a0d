#!/usr/bin/env python3
"""
Configuration Management for the CLI ATM Machine

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production); the
environment only changes logging behaviour, never account semantics.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv

from .errors import ATMError
from .money import Money

# Load environment variables from .env file
load_dotenv()

DEFAULT_USERNAME = "philemon"
DEFAULT_PIN = "1234"
DEFAULT_BALANCE = "5006267.00"
OPENING_BALANCE = "2000.00"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class AccountsConfig:
    """Seeded default account and the balance given to new accounts."""

    default_username: str = DEFAULT_USERNAME
    default_pin: str = DEFAULT_PIN
    default_balance: str = DEFAULT_BALANCE
    opening_balance: str = OPENING_BALANCE

    @property
    def default_balance_money(self) -> Money:
        return Money.from_text(self.default_balance)

    @property
    def opening_balance_money(self) -> Money:
        return Money.from_text(self.opening_balance)


@dataclass
class Config:
    """
    Main configuration class for the ATM application.

    Loads configuration from environment variables with defaults matching
    the classic CLI ATM Machine, and validates them before use.
    """

    environment: Environment
    accounts: AccountsConfig

    # Application settings
    name: str = "CLI ATM Machine"
    debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("ATM_ENV", "development"))

        accounts = AccountsConfig(
            default_username=os.getenv("ATM_DEFAULT_USERNAME", DEFAULT_USERNAME),
            default_pin=os.getenv("ATM_DEFAULT_PIN", DEFAULT_PIN),
            default_balance=os.getenv("ATM_DEFAULT_BALANCE", DEFAULT_BALANCE),
            opening_balance=os.getenv("ATM_OPENING_BALANCE", OPENING_BALANCE),
        )

        return cls(
            environment=env,
            accounts=accounts,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.accounts.default_username.strip():
            errors.append("ATM_DEFAULT_USERNAME cannot be empty")
        if not self.accounts.default_pin:
            errors.append("ATM_DEFAULT_PIN cannot be empty")

        for name, value in [
            ("ATM_DEFAULT_BALANCE", self.accounts.default_balance),
            ("ATM_OPENING_BALANCE", self.accounts.opening_balance),
        ]:
            try:
                Money.from_text(value)
            except ATMError as e:
                errors.append(f"{name} is not a valid balance: {e}")

        if not isinstance(getattr(logging, self.log_level, None), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.WARNING)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        if self.debug:
            logging.getLogger("atm").setLevel(logging.DEBUG)

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return [
            "accounts.default_pin",
        ]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Enum):
                # Nested dataclass
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if not include_sensitive and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***"
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
