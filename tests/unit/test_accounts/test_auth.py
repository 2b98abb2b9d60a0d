#!/usr/bin/env python3
"""Unit tests for authenticate()."""

import pytest

from atm.accounts import authenticate
from atm.core.errors import (
    AuthenticationError,
    EmptyCredentialError,
    InvalidInputError,
    PinMismatchError,
    UnknownUserError,
)


@pytest.mark.accounts
class TestAuthenticate:
    """Test the shared retrieve-and-verify check."""

    def test_returns_live_account(self, directory):
        account = authenticate(directory, "philemon", "1234")
        assert account is directory.lookup("philemon")

    @pytest.mark.parametrize("username,pin", [("", "1234"), ("philemon", ""), ("", "")])
    def test_empty_credentials(self, directory, username, pin):
        with pytest.raises(EmptyCredentialError):
            authenticate(directory, username, pin)

    def test_empty_credential_is_also_invalid_input(self, directory):
        with pytest.raises(InvalidInputError):
            authenticate(directory, "", "")

    def test_unknown_user(self, directory):
        with pytest.raises(UnknownUserError) as exc_info:
            authenticate(directory, "nobody", "1234")
        assert "nobody" in str(exc_info.value)

    @pytest.mark.parametrize("pin", ["4321", "12345", "123", " 1234"])
    def test_pin_mismatch(self, directory, pin):
        with pytest.raises(PinMismatchError):
            authenticate(directory, "philemon", pin)

    def test_pin_comparison_is_case_sensitive(self, directory):
        directory.create("alice", "Secret")

        with pytest.raises(PinMismatchError):
            authenticate(directory, "alice", "secret")
        assert authenticate(directory, "alice", "Secret") is directory.lookup("alice")

    def test_username_is_case_sensitive(self, directory):
        with pytest.raises(UnknownUserError):
            authenticate(directory, "PHILEMON", "1234")

    def test_all_failures_share_a_base_class(self, directory):
        for username, pin in [("", ""), ("nobody", "1"), ("philemon", "0")]:
            with pytest.raises(AuthenticationError):
                authenticate(directory, username, pin)
