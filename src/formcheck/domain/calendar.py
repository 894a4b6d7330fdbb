"""Gregorian calendar points for week, month and date inputs.

Value strings follow the HTML microsyntaxes: ``YYYY-Www``, ``YYYY-MM``
and ``YYYY-MM-DD`` with a four-digit year of at least 0001.  Points
are frozen and validated at construction; the ``parse_*`` helpers
return ``None`` instead of raising when a string is malformed or names
a week/month/day that does not exist.

Week numbering is ISO-8601: a year has 53 weeks when January 1 falls
on a Thursday, or on a Wednesday in a leap year.
"""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass

from formcheck.domain.errors import InvalidCalendarPoint

WEEK_PATTERN = re.compile(r"([0-9]{4})-W([0-9]{2})")
MONTH_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})")
DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule.

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def has_53_weeks(year: int) -> bool:
    """True when *year* is an ISO long year."""
    weekday = datetime.date(year, 1, 1).weekday()  # Monday == 0
    return weekday == 3 or (weekday == 2 and is_leap_year(year))


def weeks_in_year(year: int) -> int:
    return 53 if has_53_weeks(year) else 52


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


# ---------------------------------------------------------------------------
# Calendar points
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class Week:
    """An ISO week; orders by year then week number."""

    year: int
    week: int

    def __post_init__(self) -> None:
        if self.year < 1:
            raise InvalidCalendarPoint(f"year out of range: {self.year}")
        if not 1 <= self.week <= 53:
            raise InvalidCalendarPoint(f"week out of range: {self.week}")
        if self.week == 53 and not has_53_weeks(self.year):
            raise InvalidCalendarPoint(f"{self.year} has no week 53")

    def __str__(self) -> str:
        return f"{self.year:04d}-W{self.week:02d}"


@dataclass(frozen=True, order=True)
class Month:
    """A calendar month; orders by year then month."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if self.year < 1:
            raise InvalidCalendarPoint(f"year out of range: {self.year}")
        if not 1 <= self.month <= 12:
            raise InvalidCalendarPoint(f"month out of range: {self.month}")

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True, order=True)
class Date:
    """A proleptic Gregorian date."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        Month(self.year, self.month)
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise InvalidCalendarPoint(
                f"day out of range for {self.year}-{self.month:02d}: {self.day}"
            )

    @property
    def ordinal(self) -> int:
        """Day number with 0001-01-01 as day 1."""
        return datetime.date(self.year, self.month, self.day).toordinal()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


EPOCH_WEEK = Week(1970, 1)
EPOCH_MONTH = Month(1970, 1)
EPOCH_DATE = Date(1970, 1, 1)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_week(text: str | None) -> Week | None:
    """Parse ``YYYY-Www``.

    Examples:
        >>> parse_week("2015-W53")
        Week(year=2015, week=53)
        >>> parse_week("2016-W53") is None
        True
    """
    if not text:
        return None
    match = WEEK_PATTERN.fullmatch(text)
    if match is None:
        return None
    try:
        return Week(int(match.group(1)), int(match.group(2)))
    except InvalidCalendarPoint:
        return None


def parse_month(text: str | None) -> Month | None:
    """Parse ``YYYY-MM``."""
    if not text:
        return None
    match = MONTH_PATTERN.fullmatch(text)
    if match is None:
        return None
    try:
        return Month(int(match.group(1)), int(match.group(2)))
    except InvalidCalendarPoint:
        return None


def parse_date(text: str | None) -> Date | None:
    """Parse ``YYYY-MM-DD``."""
    if not text:
        return None
    match = DATE_PATTERN.fullmatch(text)
    if match is None:
        return None
    try:
        return Date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except InvalidCalendarPoint:
        return None


# ---------------------------------------------------------------------------
# Spans
# ---------------------------------------------------------------------------


def weeks_between(base: Week, target: Week) -> int:
    """Number of weeks from *base* to *target* (negative if target is earlier)."""
    if target.year >= base.year:
        full_years = sum(weeks_in_year(y) for y in range(base.year, target.year))
    else:
        full_years = -sum(weeks_in_year(y) for y in range(target.year, base.year))
    return full_years - base.week + target.week


def months_between(base: Month, target: Month) -> int:
    return (target.year - base.year) * 12 - base.month + target.month


def days_between(base: Date, target: Date) -> int:
    return target.ordinal - base.ordinal
