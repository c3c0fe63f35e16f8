"""Tests for date parser with relative dates."""

from datetime import date, timedelta

import pytest
from dateutil.relativedelta import relativedelta

from ledgerfolio.domain.entities import DateStamp
from ledgerfolio.domain.errors import ValidationError
from ledgerfolio.utils.date_parser import get_date_range, parse_date


def _stamp(value: date) -> DateStamp:
    return DateStamp.from_date(value)


def test_parse_absolute_date():
    assert parse_date("2024-01-15") == DateStamp(15, 1, 2024)


def test_parse_display_format_is_day_first():
    assert parse_date("5/3/2024") == DateStamp(5, 3, 2024)


def test_parse_long_form():
    assert parse_date("January 15, 2024") == DateStamp(15, 1, 2024)


def test_parse_today():
    assert parse_date("Today") == _stamp(date.today())


def test_parse_yesterday():
    assert parse_date("yesterday") == _stamp(date.today() - timedelta(days=1))


def test_parse_last_month():
    """'last month' is the first day of the previous month."""
    expected = (date.today() - relativedelta(months=1)).replace(day=1)
    assert parse_date("last month") == _stamp(expected)


def test_parse_this_week_is_monday():
    result = parse_date("this week").to_date()
    assert result.weekday() == 0
    assert date.today() - timedelta(days=6) <= result <= date.today()


def test_parse_next_year():
    assert parse_date("next year") == DateStamp(1, 1, date.today().year + 1)


def test_parse_invalid():
    with pytest.raises(ValidationError):
        parse_date("not a date")


def test_parse_invalid_relative():
    with pytest.raises(ValidationError):
        parse_date("last fortnight")


def test_get_date_range_this_month():
    start, end = get_date_range("this-month")
    today = date.today()
    assert start == DateStamp(1, today.month, today.year)
    assert end == _stamp(today)


def test_get_date_range_last_month():
    start, end = get_date_range("last-month")
    first_of_month = date.today().replace(day=1)
    assert start == _stamp(first_of_month - relativedelta(months=1))
    assert end == _stamp(first_of_month - timedelta(days=1))


def test_get_date_range_last_week_spans_seven_days():
    start, end = get_date_range("last-week")
    assert start.to_date().weekday() == 0
    assert end.to_date() - start.to_date() == timedelta(days=6)


def test_get_date_range_last_year():
    start, end = get_date_range("last-year")
    year = date.today().year - 1
    assert (start, end) == (DateStamp(1, 1, year), DateStamp(31, 12, year))


def test_get_date_range_unknown():
    with pytest.raises(ValidationError, match="Unknown period"):
        get_date_range("next-decade")
