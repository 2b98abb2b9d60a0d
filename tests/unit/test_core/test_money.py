#!/usr/bin/env python3
"""Tests for Money primitive type."""

import pytest

from atm.core.errors import AmountParseError, InvalidAmountError
from atm.core.money import Money


class TestMoneyConstruction:
    """Test Money class construction."""

    @pytest.mark.currency
    def test_from_cents(self):
        m = Money.from_cents(1234)
        assert m.to_cents() == 1234

    @pytest.mark.currency
    def test_from_major(self):
        m = Money.from_major(2000)
        assert m.to_cents() == 200000

    @pytest.mark.currency
    def test_from_text(self):
        """Test parsing configured balances."""
        assert Money.from_text("5006267.00").to_cents() == 500626700
        assert Money.from_text("12.5").to_cents() == 1250
        assert Money.from_text("0").to_cents() == 0

    @pytest.mark.currency
    def test_from_text_rejects_negative_and_garbage(self):
        with pytest.raises(InvalidAmountError):
            Money.from_text("-1")
        with pytest.raises(AmountParseError):
            Money.from_text("lots")


class TestMoneyArithmetic:
    """Test Money arithmetic operations."""

    @pytest.mark.currency
    def test_addition(self):
        result = Money.from_cents(100) + Money.from_cents(50)
        assert result.to_cents() == 150

    @pytest.mark.currency
    def test_subtraction(self):
        result = Money.from_cents(100) - Money.from_cents(30)
        assert result.to_cents() == 70

    @pytest.mark.currency
    def test_immutable(self):
        m = Money.from_cents(100)
        with pytest.raises(AttributeError):
            m.cents = 5  # type: ignore[misc]


class TestMoneyComparison:
    """Test Money comparison operations."""

    @pytest.mark.currency
    def test_equality(self):
        assert Money.from_cents(100) == Money.from_cents(100)
        assert Money.from_cents(100) != Money.from_cents(50)
        assert Money.from_cents(100) != 100

    @pytest.mark.currency
    def test_ordering(self):
        small = Money.from_cents(50)
        large = Money.from_cents(100)

        assert small < large
        assert small <= large
        assert large > small
        assert large >= Money.from_cents(100)


class TestMoneyFormatting:
    """Test Money string formatting."""

    @pytest.mark.currency
    def test_str_includes_currency(self):
        assert str(Money.from_cents(500626700)) == "5006267.00 NGN"
        assert str(Money.from_cents(5)) == "0.05 NGN"

    @pytest.mark.currency
    def test_repr(self):
        assert repr(Money.from_cents(1234)) == "Money(cents=1234)"
