"""Tests for amount and choice parsing."""

from decimal import Decimal

import pytest

from ledgerfolio.domain.entities import EntryKind, ExpenseCategory, InvestmentKind
from ledgerfolio.domain.errors import ValidationError
from ledgerfolio.utils.amount_parser import parse_amount
from ledgerfolio.utils.choice_parser import parse_choice


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("-123.45", Decimal("-123.45")),
        ("₹1,234.56", Decimal("1234.56")),
        ("$50", Decimal("50")),
        ("(20.00)", Decimal("-20.00")),
        ("  7 ", Decimal("7")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "12..5", "inf"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValidationError):
        parse_amount(text)


class TestParseChoice:
    """Tests for resolving enum choices."""

    def test_menu_numbers_are_one_based(self):
        assert parse_choice(EntryKind, "1") == EntryKind.INCOME
        assert parse_choice(EntryKind, 4) == EntryKind.WITHDRAWAL
        assert parse_choice(ExpenseCategory, "7") == ExpenseCategory.OTHER

    def test_names_and_labels(self):
        assert parse_choice(EntryKind, "expense") == EntryKind.EXPENSE
        assert parse_choice(InvestmentKind, "Mutual Fund") == InvestmentKind.MUTUAL_FUND
        assert parse_choice(InvestmentKind, "mutual-fund") == InvestmentKind.MUTUAL_FUND
        assert parse_choice(InvestmentKind, "etf") == InvestmentKind.ETF

    def test_out_of_range_number(self):
        with pytest.raises(ValidationError, match="out of range for investment kind"):
            parse_choice(InvestmentKind, "6")
        with pytest.raises(ValidationError):
            parse_choice(EntryKind, "0")

    def test_unknown_name(self):
        with pytest.raises(ValidationError, match="Unknown expense category 'rent'"):
            parse_choice(ExpenseCategory, "rent")
