"""Date parsing utilities."""

from datetime import date, timedelta

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ledgerfolio.domain.entities import DateStamp
from ledgerfolio.domain.errors import ValidationError

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


def _relative_date(text: str, today: date) -> date | None:
    simple = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in simple:
        return simple[text]

    prefix, _, period = text.partition(" ")
    week_start = today - timedelta(days=today.weekday())
    month_start = today.replace(day=1)
    year_start = today.replace(month=1, day=1)

    if prefix == "last":
        starts = {
            "week": week_start - timedelta(days=7),
            "month": month_start - relativedelta(months=1),
            "year": year_start - relativedelta(years=1),
        }
    elif prefix == "this":
        starts = {"week": week_start, "month": month_start, "year": year_start}
    elif prefix == "next":
        starts = {
            "week": week_start + timedelta(days=7),
            "month": month_start + relativedelta(months=1),
            "year": year_start + relativedelta(years=1),
        }
    else:
        return None
    return starts.get(period)


def parse_date(date_str: str) -> DateStamp:
    """Parse a date string into a DateStamp.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "15/1/2024" (day first), "January 15, 2024"
    - Relative dates: "today", "yesterday", "last month", "this year", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        DateStamp for the date

    Raises:
        ValidationError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    relative = _relative_date(text, date.today())
    if relative is not None:
        return DateStamp.from_date(relative)

    # Slash dates are shown as D/M/Y, so read them back day first
    try:
        parsed = date_parser.parse(text, dayfirst="/" in text)
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Could not parse date '{date_str}': {e}")
    return DateStamp.from_date(parsed.date())


def get_date_range(period: str) -> tuple[DateStamp, DateStamp]:
    """Get start and end dates for a named period ending today or earlier.

    Args:
        period: One of this-month, this-year, this-week, last-month,
            last-year, last-week

    Returns:
        Tuple of (start, end) DateStamps, both inclusive

    Raises:
        ValidationError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period not in PERIODS:
        raise ValidationError(
            f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}"
        )

    when, unit = period.split("-")
    start = _relative_date(f"{when} {unit}", today)
    if when == "this":
        end = today
    elif unit == "week":
        end = start + timedelta(days=6)
    elif unit == "month":
        end = today.replace(day=1) - timedelta(days=1)
    else:
        end = today.replace(month=1, day=1) - timedelta(days=1)

    return DateStamp.from_date(start), DateStamp.from_date(end)
