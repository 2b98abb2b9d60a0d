#!/usr/bin/env python3
"""
Integration tests for configuration module.

Tests configuration loading from the environment and validation.
"""

import pytest

from atm.core.config import (
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from atm.core.money import Money
from atm.machine import AppState


@pytest.mark.integration
class TestConfigLoading:
    """Test configuration loading and structure."""

    def test_defaults(self):
        config = get_config()

        assert config.environment == Environment.TEST
        assert config.accounts.default_username == "philemon"
        assert config.accounts.default_pin == "1234"
        assert config.accounts.default_balance_money == Money.from_cents(500626700)
        assert config.accounts.opening_balance_money == Money.from_major(2000)
        assert config.log_level == "WARNING"
        assert config.debug is False

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_picks_up_environment_changes(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("ATM_DEFAULT_USERNAME", "ada")

        reloaded = reload_config()

        assert reloaded is not first
        assert reloaded.accounts.default_username == "ada"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ATM_ENV", "production")
        monkeypatch.setenv("ATM_DEFAULT_PIN", "0000")
        monkeypatch.setenv("ATM_DEFAULT_BALANCE", "50000")
        monkeypatch.setenv("ATM_OPENING_BALANCE", "0")
        monkeypatch.setenv("LOG_LEVEL", "info")
        monkeypatch.setenv("DEBUG", "true")

        config = Config.from_environment()

        assert config.environment == Environment.PRODUCTION
        assert config.accounts.default_pin == "0000"
        assert config.accounts.default_balance_money == Money.from_major(50000)
        assert config.accounts.opening_balance_money == Money.zero()
        assert config.log_level == "INFO"
        assert config.debug is True

    def test_unknown_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("ATM_ENV", "staging")
        with pytest.raises(ValueError):
            Config.from_environment()

    def test_environment_detection_functions(self):
        assert is_test() is True
        assert is_development() is False
        assert is_production() is False


@pytest.mark.integration
class TestConfigValidation:
    """Test validation of configured values."""

    def test_valid_config_has_no_errors(self):
        assert Config.from_environment().validate() == []

    @pytest.mark.parametrize(
        "name,value,message",
        [
            ("ATM_DEFAULT_USERNAME", "  ", "ATM_DEFAULT_USERNAME"),
            ("ATM_DEFAULT_PIN", "", "ATM_DEFAULT_PIN"),
            ("ATM_DEFAULT_BALANCE", "-5", "ATM_DEFAULT_BALANCE"),
            ("ATM_OPENING_BALANCE", "plenty", "ATM_OPENING_BALANCE"),
            ("LOG_LEVEL", "loud", "LOG_LEVEL"),
        ],
    )
    def test_invalid_values_reported(self, monkeypatch, name, value, message):
        monkeypatch.setenv(name, value)

        errors = Config.from_environment().validate()

        assert any(message in error for error in errors)

    def test_get_config_raises_on_invalid_config(self, monkeypatch):
        monkeypatch.setenv("ATM_DEFAULT_BALANCE", "-5")
        with pytest.raises(ValueError, match="Configuration validation failed"):
            get_config()


@pytest.mark.integration
class TestConfigSerialization:
    def test_to_dict_redacts_pin(self):
        settings = get_config().to_dict()

        assert settings["environment"] == "test"
        assert settings["accounts"]["default_username"] == "philemon"
        assert settings["accounts"]["default_pin"] == "***REDACTED***"

    def test_to_dict_with_sensitive(self):
        settings = get_config().to_dict(include_sensitive=True)
        assert settings["accounts"]["default_pin"] == "1234"


@pytest.mark.integration
def test_app_state_seeded_from_config(monkeypatch):
    monkeypatch.setenv("ATM_DEFAULT_USERNAME", "ada")
    monkeypatch.setenv("ATM_DEFAULT_PIN", "9876")
    monkeypatch.setenv("ATM_OPENING_BALANCE", "10")

    state = AppState.from_config(Config.from_environment())

    assert state.default_username == "ada"
    assert state.directory.lookup("ada").pin_matches("9876")
    assert state.directory.create("bob", "1").balance == Money.from_major(10)
    assert state.session_username is None
