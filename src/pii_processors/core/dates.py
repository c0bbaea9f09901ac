"""
Date randomizer

Keeps the year of an ISO-8601 date and draws a new month and day, so the
value retains year-level utility without identifying the exact date.
"""

import re

from pii_processors.core.random_source import RandomSource
from pii_processors.errors import DateFormatError


_YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule, valid for any integer year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the last valid day of ``month`` in ``year``.

    Raises:
        ValueError: If month is outside 1..12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def parse_year(value: str) -> int:
    """Extract the year from a ``YYYY-MM-DD`` string.

    Only the component count and the year are checked; month and day are
    discarded by the randomizer.

    Raises:
        DateFormatError: On a wrong component count or a non-integer year.
    """
    parts = value.split("-")
    if len(parts) != 3:
        raise DateFormatError(f"Date format is not ISO-8601: {len(parts)} components", value)
    if not _YEAR_PATTERN.fullmatch(parts[0]):
        raise DateFormatError("Unable to parse year from date", value)
    return int(parts[0])


def randomize_date(value: str, rng: RandomSource) -> str:
    """Return a random date in the same year as ``value``.

    Args:
        value: An ISO-8601 date such as ``2018-08-28``.
        rng: Random source for month and day.

    Returns:
        ``YYYY-MM-DD`` with the original year and a valid random month/day.

    Raises:
        DateFormatError: If ``value`` is not a three-part date with an integer year.
    """
    year = parse_year(value)
    month = rng.randint(1, 12)
    day = rng.randint(1, days_in_month(year, month))
    return f"{year:04d}-{month:02d}-{day:02d}"
