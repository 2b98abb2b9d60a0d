"""
CLI ATM Machine - basic bank/ATM transactions from the terminal.

An in-memory ATM simulation driven by a read-eval-prompt loop over standard
input/output. Nothing is persisted; all accounts are discarded on exit.

Key Features:
- Account creation, deposit, withdrawal, balance inquiry and pin change
- A seeded default account so the machine is usable immediately
- Index, name or --flag=value command invocation at the prompt
- Integer minor-unit arithmetic for every balance

Domain Packages:
- core: Money, currency parsing, errors, configuration
- accounts: Account model, AccountDirectory, authenticate()
- machine: Command registry, handlers, Dispatcher loop
- cli: Command-line entry point

Example Usage:
    from atm.core import get_config
    from atm.machine import AppState, Dispatcher

    Dispatcher(AppState.from_config(get_config())).run()
"""

__version__ = "0.1.0"
__author__ = "Philemon Ukane"

from .accounts import Account, AccountDirectory, authenticate
from .core.config import Environment, get_config
from .core.errors import ATMError
from .core.money import Money

__all__ = [
    "ATMError",
    "Account",
    "AccountDirectory",
    "Environment",
    "Money",
    "authenticate",
    "get_config",
]
