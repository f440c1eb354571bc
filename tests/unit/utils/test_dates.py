"""Tests for the duration and date helpers."""

from datetime import date

import pytest

from mcp_jira_tempo.exceptions import ParseError
from mcp_jira_tempo.utils.dates import (
    DateRange,
    format_seconds,
    format_signed_seconds,
    get_week_bounds,
    month_bounds,
    normalize_start_time,
    parse_date,
    parse_duration,
    resolve_period,
    weekday_range,
)

WEDNESDAY = date(2026, 2, 11)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2h", 7200),
        ("30m", 1800),
        ("1h30m", 5400),
        ("1.5h", 5400),
        ("2h 15m", 8100),
        ("2H", 7200),
        ("0.25h", 900),
        ("  45m  ", 2700),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "90", "h", "1.5m", "2d"])
def test_parse_duration_invalid(text):
    with pytest.raises(ParseError) as exc:
        parse_duration(text)
    assert "2h, 30m, 1h30m, 1.5h" in str(exc.value)


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (7200, "2h"),
        (0, "0m"),
        (5400, "1h 30m"),
        (1800, "30m"),
        (59, "0m"),
        (3661, "1h 1m"),
    ],
)
def test_format_seconds(seconds, expected):
    assert format_seconds(seconds) == expected


def test_format_signed_seconds():
    assert format_signed_seconds(5400) == "+1h 30m"
    assert format_signed_seconds(-2700) == "-45m"
    assert format_signed_seconds(0) == "0h"
    assert format_signed_seconds(0, zero="—") == "—"


@pytest.mark.parametrize("day", range(9, 16))
def test_get_week_bounds_every_weekday(day):
    """Every day of the week, Sunday included, maps to the same Mon..Fri."""
    assert get_week_bounds(date(2026, 2, day)) == (
        date(2026, 2, 9),
        date(2026, 2, 13),
    )


def test_month_bounds():
    assert month_bounds(date(2026, 2, 17)) == (date(2026, 2, 1), date(2026, 2, 28))
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))


def test_weekday_range_includes_weekends():
    assert len(weekday_range(date(2026, 2, 9), date(2026, 2, 13))) == 5
    assert weekday_range(date(2026, 2, 13), date(2026, 2, 16)) == [
        date(2026, 2, 13),
        date(2026, 2, 14),
        date(2026, 2, 15),
        date(2026, 2, 16),
    ]
    assert weekday_range(date(2026, 2, 9), date(2026, 2, 9)) == [date(2026, 2, 9)]


def test_parse_date():
    assert parse_date("2026-02-09") == date(2026, 2, 9)
    assert parse_date("Feb 9 2026") == date(2026, 2, 9)
    with pytest.raises(ParseError):
        parse_date("2026-13-45")
    with pytest.raises(ParseError):
        parse_date("not a date")


def test_normalize_start_time():
    assert normalize_start_time(None) == "09:00:00"
    assert normalize_start_time("") == "09:00:00"
    assert normalize_start_time("9:30") == "09:30:00"
    assert normalize_start_time("14:05:30") == "14:05:30"
    with pytest.raises(ParseError):
        normalize_start_time("25:00")
    with pytest.raises(ParseError):
        normalize_start_time("noon")


class TestDateRange:
    def test_rejects_inverted_range(self):
        with pytest.raises(ParseError):
            DateRange(date(2026, 2, 13), date(2026, 2, 9))

    def test_single_day(self):
        single = DateRange(WEDNESDAY, WEDNESDAY)
        assert single.is_single_day
        assert single.label() == "2026-02-11"
        assert single.days() == [WEDNESDAY]

    def test_label(self):
        week = DateRange(date(2026, 2, 9), date(2026, 2, 13))
        assert not week.is_single_day
        assert week.label() == "2026-02-09 → 2026-02-13"
        assert week.from_str == "2026-02-09"
        assert week.to_str == "2026-02-13"


class TestResolvePeriod:
    def test_today(self):
        assert resolve_period("today", ref=WEDNESDAY) == DateRange(WEDNESDAY, WEDNESDAY)

    def test_week(self):
        assert resolve_period("week", ref=WEDNESDAY) == DateRange(
            date(2026, 2, 9), date(2026, 2, 13)
        )

    def test_month(self):
        assert resolve_period("month", ref=WEDNESDAY) == DateRange(
            date(2026, 2, 1), date(2026, 2, 28)
        )

    def test_custom_date(self):
        resolved = resolve_period("custom", date_str="2026-02-03", ref=WEDNESDAY)
        assert resolved == DateRange(date(2026, 2, 3), date(2026, 2, 3))

    def test_custom_week_start_is_normalized_to_monday(self):
        resolved = resolve_period("custom", week_start="2026-02-11")
        assert resolved == DateRange(date(2026, 2, 9), date(2026, 2, 13))

    def test_custom_from_to(self):
        resolved = resolve_period(
            "custom", from_str="2026-01-15", to_str="2026-02-15"
        )
        assert resolved == DateRange(date(2026, 1, 15), date(2026, 2, 15))

    def test_custom_from_without_to(self):
        with pytest.raises(ParseError) as exc:
            resolve_period("custom", from_str="2026-01-15")
        assert '"from"' in str(exc.value)
        assert '"to"' in str(exc.value)

    def test_custom_without_companion_field(self):
        with pytest.raises(ParseError) as exc:
            resolve_period("custom")
        assert '"date"' in str(exc.value)
        assert '"week_start"' in str(exc.value)

    def test_custom_invalid_date(self):
        with pytest.raises(ParseError):
            resolve_period("custom", date_str="yesterday-ish")

    def test_unknown_period(self):
        with pytest.raises(ParseError):
            resolve_period("year")  # type: ignore[arg-type]
