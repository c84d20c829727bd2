# services/money.py
"""
Decimal helpers for currency amounts and calendar-month arithmetic.

All amounts are carried as ``Decimal``; floats never enter the yield or
price formulas.
"""
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterator, Optional, Tuple, Union

Number = Union[Decimal, int, float, str, None]

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")
ONE = Decimal("1")


def to_decimal(value: Number) -> Decimal:
     """Convert a column value or request field to Decimal; None becomes 0."""
     if value is None:
          return ZERO
     if isinstance(value, Decimal):
          return value
     if isinstance(value, float):
          # Go through str so 0.1 stays 0.1 instead of its binary expansion
          return Decimal(str(value))
     return Decimal(value)


def round_percent(value: Decimal) -> Decimal:
     """Round to 2 decimal places, halves away from zero."""
     return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def round_whole(value: Decimal) -> Decimal:
     """Round to an integral amount, halves away from zero."""
     return to_decimal(value).quantize(ONE, rounding=ROUND_HALF_UP)


def percent_of(numerator: Number, denominator: Number) -> Decimal:
     """
     numerator / denominator * 100, unrounded.

     A non-positive denominator yields 0 instead of raising; callers display
     the figure as a plain 0%.
     """
     denominator = to_decimal(denominator)
     if denominator <= ZERO:
          return ZERO
     return to_decimal(numerator) / denominator * HUNDRED


def iter_months(
     start_year: int,
     start_month: int,
     end_year: int,
     end_month: int,
) -> Iterator[Tuple[int, int]]:
     """
     Yield (year, month) pairs from the start month through the end month inclusive.

     Months roll over to January of the next year after 12. A start that
     sorts after the end yields nothing. Month values are trusted to be 1-12.
     """
     year, month = start_year, start_month
     while year < end_year or (year == end_year and month <= end_month):
          yield year, month
          month += 1
          if month > 12:
               month = 1
               year += 1


def due_date_for(year: int, month: int, day: int) -> date:
     """
     Calendar date for ``day`` of the given month.

     Days past the end of the month roll forward into the next month
     (day 31 of a 30-day month is the 1st of the following month).
     """
     # Normalise out-of-range months the same way days roll over
     extra_years, month_index = divmod(month - 1, 12)
     first = date(year + extra_years, month_index + 1, 1)
     return first + timedelta(days=day - 1)


def year_window(now: Optional[datetime] = None) -> Tuple[date, date]:
     """[Jan 1 of now's year, Jan 1 of the next year) as dates."""
     now = now or datetime.now()
     return date(now.year, 1, 1), date(now.year + 1, 1, 1)
