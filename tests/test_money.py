"""Unit tests for money and period helpers."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from exceptions import ValidationError
from utils.money import (
    dollars_to_cents,
    is_positive_cents,
    period_from_date,
    posted_at_from_period,
    validate_period,
)


class TestDollarsToCents:

    @pytest.mark.parametrize(
        "amount, expected",
        [
            ("1350.00", 135000),
            ("800", 80000),
            (800, 80000),
            (12.5, 1250),
            ("12.345", 1235),
            ("0.005", 1),
            (Decimal("19.99"), 1999),
            ("-4.50", -450),
            (" 7.25 ", 725),
        ],
    )
    def test_converts_to_nearest_cent(self, amount, expected):
        assert dollars_to_cents(amount) == expected

    @pytest.mark.parametrize("amount", ["abc", "", None, "NaN", "Infinity", float("inf"), True])
    def test_rejects_non_finite_input(self, amount):
        assert dollars_to_cents(amount) is None

    @pytest.mark.parametrize("amount", ["1e30", "-1e40", Decimal("9" * 40)])
    def test_too_many_digits_is_none(self, amount):
        assert dollars_to_cents(amount) is None

    def test_large_amount_past_integer_column_still_converts(self):
        assert dollars_to_cents("1e17") == 10 ** 19


class TestPeriods:

    def test_period_from_date_zero_pads_month(self):
        assert period_from_date(datetime(2026, 3, 10, 18, 0, tzinfo=timezone.utc)) == "2026-03"

    def test_period_from_date_uses_utc_month(self):
        # 20:00 on Mar 31 at UTC-5 is already April in UTC
        ts = datetime(2026, 3, 31, 20, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert period_from_date(ts) == "2026-04"

    def test_naive_timestamp_is_treated_as_utc(self):
        assert period_from_date(datetime(2025, 12, 31, 23, 59)) == "2025-12"

    def test_posted_at_is_nine_utc(self):
        assert posted_at_from_period("2026-03", 1) == datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "period, day, expected_day",
        [
            ("2026-02", 31, 28),
            ("2024-02", 31, 29),
            ("2026-04", 31, 30),
            ("2026-01", 0, 1),
            ("2026-01", -3, 1),
            ("2026-01", 15, 15),
        ],
    )
    def test_posted_at_clamps_day(self, period, day, expected_day):
        assert posted_at_from_period(period, day).day == expected_day

    @pytest.mark.parametrize("period", ["2026-3", "2026-13", "2026-00", "March", "", None, "2026-03-01"])
    def test_invalid_period_is_rejected(self, period):
        with pytest.raises(ValidationError):
            validate_period(period)
        with pytest.raises(ValidationError):
            posted_at_from_period(period, 1)

    def test_validate_period_strips_whitespace(self):
        assert validate_period(" 2026-03 ") == "2026-03"


def test_is_positive_cents():
    assert is_positive_cents(1)
    assert not is_positive_cents(0)
    assert not is_positive_cents(-5)
    assert not is_positive_cents(10.0)
    assert not is_positive_cents(True)
    assert not is_positive_cents(None)
