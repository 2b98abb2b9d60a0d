"""
Accounts Package

In-memory account storage and the shared retrieve-and-verify check.
"""

from .auth import authenticate
from .directory import AccountDirectory
from .models import Account

__all__ = [
    "Account",
    "AccountDirectory",
    "authenticate",
]
