"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from collections.abc import Iterable

import pytest

from atm.accounts import AccountDirectory
from atm.core import config as config_module
from atm.core.money import Money
from atm.machine import AppState, Dispatcher

DEFAULT_USERNAME = "philemon"
DEFAULT_PIN = "1234"
DEFAULT_BALANCE_CENTS = 500626700  # 5006267.00 NGN


class ScriptedReader:
    """Line reader that replays a fixed script, then reports end of input."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.calls = 0

    def __call__(self) -> str | None:
        self.calls += 1
        if not self.lines:
            return None
        return self.lines.pop(0) + "\n"

    @property
    def exhausted(self) -> bool:
        return not self.lines


@pytest.fixture
def default_balance() -> Money:
    return Money.from_cents(DEFAULT_BALANCE_CENTS)


@pytest.fixture
def directory(default_balance) -> AccountDirectory:
    """Directory seeded with the default account."""
    return AccountDirectory.seeded(DEFAULT_USERNAME, DEFAULT_PIN, default_balance)


@pytest.fixture
def app_state(directory) -> AppState:
    return AppState(directory=directory, default_username=DEFAULT_USERNAME)


@pytest.fixture
def make_dispatcher(app_state):
    """Build a dispatcher over app_state that reads the given lines."""

    def _make(*lines: str) -> tuple[Dispatcher, ScriptedReader]:
        reader = ScriptedReader(lines)
        return Dispatcher(app_state, reader=reader), reader

    return _make


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("ATM_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    for name in (
        "ATM_DEFAULT_USERNAME",
        "ATM_DEFAULT_PIN",
        "ATM_DEFAULT_BALANCE",
        "ATM_OPENING_BALANCE",
        "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)

    # Never share a cached configuration between tests
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests running the CLI as a subprocess"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "accounts: Tests for account storage and authentication"
    )
    config.addinivalue_line(
        "markers", "dispatcher: Tests for command resolution and the prompt loop"
    )
