#!/usr/bin/env python3
"""
Account retrieval and verification.

authenticate() is the single authorization check used by every transaction
that touches an account.
"""

import logging

from ..core.errors import EmptyCredentialError, PinMismatchError, UnknownUserError
from .directory import AccountDirectory
from .models import Account

logger = logging.getLogger(__name__)


def authenticate(directory: AccountDirectory, username: str, pin: str) -> Account:
    """
    Retrieve and verify a user account.

    Args:
        directory: Account store to look the user up in
        username: Account username
        pin: Transaction pin to verify

    Returns:
        The live Account, for the calling transaction to read or mutate

    Raises:
        EmptyCredentialError: If username or pin is empty
        UnknownUserError: If no account exists for username
        PinMismatchError: If pin does not exactly match the stored pin
    """
    if not username or not pin:
        raise EmptyCredentialError()

    account = directory.lookup(username)
    if account is None:
        raise UnknownUserError(username)

    if not account.pin_matches(pin):
        logger.info(f"Rejected transaction pin for {username}")
        raise PinMismatchError()

    return account
