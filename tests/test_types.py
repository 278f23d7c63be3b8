"""Tests for tenor.core.types and tenor.core.money."""

from __future__ import annotations

from datetime import UTC, date, datetime
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tenor.core.money import Currency, Money
from tenor.core.result import Err, Ok, unwrap
from tenor.core.types import Period, UtcDatetime


class TestUtcDatetime:
    def test_naive_rejected(self) -> None:
        with pytest.raises(TypeError, match="naive"):
            UtcDatetime(value=datetime(2025, 1, 1))

    def test_now_is_aware(self) -> None:
        assert UtcDatetime.now().value.tzinfo == UTC


class TestPeriod:
    def test_parse(self) -> None:
        assert unwrap(Period.parse("3M")) == Period(3, "M")
        assert unwrap(Period.parse(" 1y ")) == Period(1, "Y")

    @pytest.mark.parametrize("raw", ["", "M", "3", "3Q", "-1M", "0M", "1.5M", "\u00b3M", "\u0663M"])
    def test_parse_rejects(self, raw: str) -> None:
        assert isinstance(Period.parse(raw), Err)

    def test_str(self) -> None:
        assert str(Period(6, "M")) == "6M"

    @given(st.integers(min_value=1, max_value=999), st.sampled_from(["D", "W", "M", "Y"]))
    def test_text_round_trip(self, n: int, unit: str) -> None:
        p = Period(n, unit)  # type: ignore[arg-type]
        assert Period.parse(str(p)) == Ok(p)

    def test_invalid_multiplier(self) -> None:
        with pytest.raises(TypeError):
            Period(0, "M")

    def test_months(self) -> None:
        assert Period(3, "M").months == 3
        assert Period(2, "Y").months == 24
        assert Period(1, "W").months is None

    def test_relativedelta(self) -> None:
        assert date(2025, 1, 31) + Period(1, "M").to_relativedelta() == date(2025, 2, 28)
        assert date(2025, 1, 1) + Period(2, "W").to_relativedelta() == date(2025, 1, 15)


class TestCurrency:
    def test_parse_normalizes_case(self) -> None:
        assert unwrap(Currency.parse("gbp")) == Currency("GBP")

    def test_unknown(self) -> None:
        assert isinstance(Currency.parse("XXX"), Err)
        with pytest.raises(TypeError):
            Currency("XXX")


class TestMoney:
    def test_of(self) -> None:
        m = Money.of("USD", "1000000")
        assert m.currency == Currency("USD")
        assert m.amount == Decimal("1000000")

    def test_parse_and_str(self) -> None:
        m = unwrap(Money.parse("EUR 2500.50"))
        assert str(m) == "EUR 2500.50"

    @pytest.mark.parametrize("raw", ["EUR", "EUR 1 2", "XXX 10", "EUR abc", "EUR NaN"])
    def test_parse_rejects(self, raw: str) -> None:
        assert isinstance(Money.parse(raw), Err)

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(TypeError):
            Money(currency=Currency("USD"), amount=Decimal("Infinity"))
