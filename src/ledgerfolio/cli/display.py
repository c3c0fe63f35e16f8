"""Formatting helpers for CLI tables."""

from decimal import Decimal

CURRENCY = "₹"


def money(amount: Decimal) -> str:
    """Format an amount with currency symbol and two decimals."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY}{abs(amount):,.2f}"


def percent(value: Decimal) -> str:
    return f"{value:.1f}%"


def rule(width: int) -> str:
    return "-" * width
