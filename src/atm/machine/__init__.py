"""
ATM Machine Package

The command registry, transaction handlers and the dispatcher loop that ties
them to an input stream.
"""

from .commands import (
    DEFAULT_COMMANDS,
    ArityError,
    Command,
    CommandKind,
    CommandRegistry,
    bind_arguments,
    tokenize,
)
from .dispatcher import Dispatcher, ReplState
from .handlers import TransactionResult
from .state import AppState

__all__ = [
    "AppState",
    "ArityError",
    "Command",
    "CommandKind",
    "CommandRegistry",
    "DEFAULT_COMMANDS",
    "Dispatcher",
    "ReplState",
    "TransactionResult",
    "bind_arguments",
    "tokenize",
]
