"""Tests for calendar points, parsing and spans."""

from __future__ import annotations

import pytest

from formcheck.domain.calendar import (
    EPOCH_DATE,
    Date,
    Month,
    Week,
    days_between,
    days_in_month,
    has_53_weeks,
    is_leap_year,
    months_between,
    parse_date,
    parse_month,
    parse_week,
    weeks_between,
    weeks_in_year,
)
from formcheck.domain.errors import InvalidCalendarPoint


class TestYearRules:
    @pytest.mark.parametrize(
        ("year", "expected"),
        [(2000, True), (1900, False), (2024, True), (2023, False), (2400, True), (2100, False)],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        assert is_leap_year(year) is expected

    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            (2015, True),  # Jan 1 is a Thursday
            (2020, True),  # Wednesday in a leap year
            (2016, False),
            (2019, False),
            (2021, False),
            (2026, True),
        ],
    )
    def test_has_53_weeks(self, year: int, expected: bool) -> None:
        assert has_53_weeks(year) is expected
        assert weeks_in_year(year) == (53 if expected else 52)

    def test_days_in_month(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31


class TestPoints:
    def test_week_str_is_zero_padded(self) -> None:
        assert str(Week(2015, 1)) == "2015-W01"
        assert str(Week(5, 9)) == "0005-W09"

    def test_month_and_date_str(self) -> None:
        assert str(Month(2024, 3)) == "2024-03"
        assert str(Date(2024, 3, 7)) == "2024-03-07"

    def test_ordering(self) -> None:
        assert Week(2015, 52) < Week(2016, 1)
        assert Month(2024, 1) > Month(2023, 12)
        assert Date(2024, 1, 31) < Date(2024, 2, 1)

    @pytest.mark.parametrize(
        "factory",
        [
            lambda: Week(2016, 53),
            lambda: Week(2016, 0),
            lambda: Week(0, 1),
            lambda: Month(2024, 13),
            lambda: Month(2024, 0),
            lambda: Date(2023, 2, 29),
            lambda: Date(2024, 4, 31),
            lambda: Date(2024, 1, 0),
        ],
    )
    def test_out_of_range_parts_raise(self, factory) -> None:
        with pytest.raises(InvalidCalendarPoint):
            factory()

    def test_leap_day_exists(self) -> None:
        assert Date(2024, 2, 29).day == 29

    def test_ordinal(self) -> None:
        assert Date(1, 1, 1).ordinal == 1
        assert EPOCH_DATE.ordinal + 1 == Date(1970, 1, 2).ordinal


class TestParsing:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2015-W53", Week(2015, 53)),
            ("2016-W01", Week(2016, 1)),
            ("2016-W53", None),
            ("2016-W00", None),
            ("2016-w01", None),
            ("2016-W1", None),
            ("16-W01", None),
            ("0000-W01", None),
            ("2016-W01 ", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parse_week(self, text: str | None, expected: Week | None) -> None:
        assert parse_week(text) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2024-03", Month(2024, 3)),
            ("2024-13", None),
            ("2024-00", None),
            ("2024-3", None),
            ("2024/03", None),
            (None, None),
        ],
    )
    def test_parse_month(self, text: str | None, expected: Month | None) -> None:
        assert parse_month(text) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2024-02-29", Date(2024, 2, 29)),
            ("2023-02-29", None),
            ("2024-04-31", None),
            ("2024-4-01", None),
            ("2024-04-01T00:00", None),
            ("", None),
        ],
    )
    def test_parse_date(self, text: str | None, expected: Date | None) -> None:
        assert parse_date(text) == expected


class TestSpans:
    def test_weeks_between_across_years(self) -> None:
        assert weeks_between(Week(2014, 52), Week(2015, 1)) == 1
        assert weeks_between(Week(2015, 1), Week(2016, 1)) == 53
        assert weeks_between(Week(2016, 1), Week(2017, 1)) == 52

    def test_weeks_between_backwards(self) -> None:
        assert weeks_between(Week(2016, 1), Week(2015, 1)) == -53
        assert weeks_between(Week(2015, 10), Week(2015, 3)) == -7

    def test_months_between(self) -> None:
        assert months_between(Month(1970, 1), Month(1971, 3)) == 14
        assert months_between(Month(2024, 5), Month(2024, 2)) == -3

    def test_days_between(self) -> None:
        assert days_between(EPOCH_DATE, Date(1970, 3, 1)) == 59
        assert days_between(Date(2024, 3, 1), Date(2024, 2, 28)) == -2
