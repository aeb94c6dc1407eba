"""
Money and billing-period helpers.

Amounts are carried as integer cents everywhere past the API boundary.
A billing period is a calendar month written "YYYY-MM".
"""
import calendar
import re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Tuple, Union

from exceptions import ValidationError

PERIOD_PATTERN = re.compile(r"^\d{4}-\d{2}$")

# Fixed time of day for entries dated from a period
POSTING_HOUR_UTC = 9

# Largest amount a signed 64-bit INTEGER column holds
MAX_CENTS = 2 ** 63 - 1


def round_half_up(value: Decimal) -> int:
     return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def is_positive_cents(value) -> bool:
     """True for a positive int amount (bools excluded)."""
     return isinstance(value, int) and not isinstance(value, bool) and value > 0


def dollars_to_cents(amount: Union[str, int, float, Decimal, None]) -> Optional[int]:
     """
     Convert a dollar amount ("123.45", 123.45) to integer cents.

     Returns None when the input is not a finite number. Rounds half-up to
     the nearest cent, so "12.345" becomes 1235.
     """
     if amount is None or isinstance(amount, bool):
          return None
     try:
          value = Decimal(str(amount).strip())
     except (InvalidOperation, ValueError):
          return None
     if not value.is_finite():
          return None
     try:
          return round_half_up(value * 100)
     except InvalidOperation:
          # Too many digits for the decimal context
          return None


def ensure_utc(timestamp: datetime) -> datetime:
     """Attach UTC to naive datetimes, convert aware ones to UTC."""
     if timestamp.tzinfo is None:
          return timestamp.replace(tzinfo=timezone.utc)
     return timestamp.astimezone(timezone.utc)


def utc_now() -> datetime:
     return datetime.now(timezone.utc)


def period_from_date(timestamp: datetime) -> str:
     """Return the "YYYY-MM" period of a timestamp (UTC calendar month)."""
     ts = ensure_utc(timestamp)
     return f"{ts.year:04d}-{ts.month:02d}"


def parse_period(period: Optional[str]) -> Tuple[int, int]:
     """
     Validate a "YYYY-MM" string and return (year, month).

     Raises:
          ValidationError: wrong shape or month outside 01-12
     """
     value = str(period or "").strip()
     if not PERIOD_PATTERN.match(value):
          raise ValidationError("period must be in YYYY-MM format")
     year, month = int(value[:4]), int(value[5:])
     if not 1 <= month <= 12 or year < 1:
          raise ValidationError("period must be in YYYY-MM format")
     return year, month


def validate_period(period: Optional[str]) -> str:
     parse_period(period)
     return str(period).strip()


def posted_at_from_period(period: str, day: int = 1) -> datetime:
     """
     Deterministic posting timestamp for a period: 09:00 UTC on `day`.

     `day` is clamped into [1, last day of the month], so day 31 in
     February lands on the 28th or 29th.
     """
     year, month = parse_period(period)
     last_day = calendar.monthrange(year, month)[1]
     try:
          day = int(day)
     except (TypeError, ValueError):
          day = 1
     safe_day = min(max(day, 1), last_day)
     return datetime(year, month, safe_day, POSTING_HOUR_UTC, 0, 0, tzinfo=timezone.utc)
