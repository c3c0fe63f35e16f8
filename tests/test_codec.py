"""Tests for the ledger and portfolio line codec."""

from decimal import Decimal

import pytest

from ledgerfolio.domain.entities import (
    DateStamp,
    EntryKind,
    ExpenseCategory,
    Holding,
    InvestmentKind,
    LedgerEntry,
)
from ledgerfolio.domain.errors import ParseError
from ledgerfolio.storage.codec import (
    decode_entry,
    decode_holding,
    encode_entry,
    encode_holding,
)


def _entry(description="Groceries", amount="1234.5678", kind=EntryKind.EXPENSE):
    return LedgerEntry(
        id=7,
        description=description,
        amount=Decimal(amount),
        date=DateStamp(15, 1, 2024),
        kind=kind,
        category=ExpenseCategory.FOOD,
    )


def _holding(name="Apple Inc"):
    return Holding(
        symbol="AAPL",
        name=name,
        kind=InvestmentKind.MUTUAL_FUND,
        quantity=Decimal("10.5"),
        purchase_price=Decimal("150.25"),
        current_price=Decimal("161.123456789012345"),
        purchase_date=DateStamp(3, 11, 2023),
    )


class TestEntryCodec:
    """Tests for ledger entry lines."""

    def test_encode_layout(self):
        assert encode_entry(_entry()) == "7,Groceries,1234.5678,15,1,2024,1,0"

    def test_round_trip(self):
        entry = _entry()
        assert decode_entry(encode_entry(entry)) == entry

    def test_round_trip_keeps_full_precision(self):
        entry = _entry(amount="0.1000000000000000055511151231257827")
        assert decode_entry(encode_entry(entry)).amount == entry.amount

    def test_description_with_comma_and_quotes(self):
        entry = _entry(description='Dinner, drinks and "tips"')
        line = encode_entry(entry)
        assert line.startswith('7,"Dinner, drinks and ""tips""",')
        assert decode_entry(line) == entry

    def test_empty_description(self):
        entry = _entry(description="")
        assert decode_entry(encode_entry(entry)) == entry

    def test_line_breaks_become_spaces(self):
        line = encode_entry(_entry(description="two\nlines"))
        assert "\n" not in line
        assert decode_entry(line).description == "two lines"

    def test_decode_legacy_fixed_point_amount(self):
        entry = decode_entry("3,Investment: AAPL,1500.000000,1,2,2024,2,6")
        assert entry.id == 3
        assert entry.description == "Investment: AAPL"
        assert entry.amount == Decimal("1500")
        assert entry.kind == EntryKind.INVESTMENT
        assert entry.category == ExpenseCategory.OTHER

    def test_decode_legacy_unquoted_comma(self):
        entry = decode_entry("4,Rent, March,900.000000,1,3,2024,1,2")
        assert entry.description == "Rent, March"
        assert entry.amount == Decimal("900")
        assert entry.category == ExpenseCategory.UTILITIES

    def test_decode_legacy_leading_quote_kept(self):
        entry = decode_entry('5,"Best" pizza,100.000000,1,1,2024,1,0')
        assert entry.id == 5
        assert entry.description == '"Best" pizza'
        assert entry.amount == Decimal("100")
        assert entry.category == ExpenseCategory.FOOD

    def test_decode_legacy_unbalanced_quote(self):
        entry = decode_entry('6,"Best pizza,100.000000,1,1,2024,1,0')
        assert entry.description == '"Best pizza'
        assert entry.amount == Decimal("100")

    def test_decode_legacy_quote_and_comma(self):
        entry = decode_entry('7,Dinner at "Joe\'s", downtown,50,1,1,2024,1,0')
        assert entry.description == 'Dinner at "Joe\'s", downtown'
        assert entry.amount == Decimal("50")

    def test_decode_ignores_line_terminator(self):
        assert decode_entry("1,Pay,10,1,1,2024,0,6\r\n").amount == 10

    @pytest.mark.parametrize(
        "line",
        [
            "1,Pay,abc,1,1,2024,0,6",  # non-numeric amount
            "x,Pay,10,1,1,2024,0,6",  # non-numeric id
            "1,Pay,10,1,1,2024,zero,6",  # non-numeric kind
            "1,Pay,10,1,1,2024,9,6",  # kind out of range
            "1,Pay,10,1,1,2024,0,7",  # category out of range
            "1,Pay,10,1,x,2024,0,6",  # bad month
            "1,Pay,NaN,1,1,2024,0,6",  # not a finite amount
            "1,Pay,10,1,1,2024,0",  # too few fields
            "",
        ],
    )
    def test_decode_rejects_malformed(self, line):
        with pytest.raises(ParseError):
            decode_entry(line)

    def test_decode_keeps_stored_id(self):
        assert decode_entry("99,Pay,10,1,1,2024,0,6").id == 99


class TestHoldingCodec:
    """Tests for holding lines."""

    def test_encode_layout(self):
        assert encode_holding(_holding()) == (
            "AAPL,Apple Inc,2,10.5,150.25,161.123456789012345,3,11,2023"
        )

    def test_round_trip(self):
        holding = _holding()
        assert decode_holding(encode_holding(holding)) == holding

    def test_name_with_comma(self):
        holding = _holding(name="Apple, Inc.")
        assert decode_holding(encode_holding(holding)) == holding

    def test_decode_legacy_line(self):
        holding = decode_holding("BTC,Bitcoin,3,0.500000,2000000.000000,2100000.500000,9,9,2024")
        assert holding.kind == InvestmentKind.CRYPTO
        assert holding.quantity == Decimal("0.5")
        assert holding.current_price == Decimal("2100000.5")
        assert holding.purchase_date == DateStamp(9, 9, 2024)

    def test_decode_legacy_unquoted_comma(self):
        holding = decode_holding("AAPL,Apple, Inc.,0,1,100,100,1,1,2024")
        assert holding.symbol == "AAPL"
        assert holding.name == "Apple, Inc."

    def test_decode_legacy_quoted_name(self):
        holding = decode_holding('TTM,"Tata" Motors,0,1,100,100,1,1,2024')
        assert holding.symbol == "TTM"
        assert holding.name == '"Tata" Motors'
        assert holding.quantity == Decimal("1")

    def test_decode_keeps_garbage_dates(self):
        holding = decode_holding("X,Thing,4,1,1,1,40,13,2024")
        assert holding.purchase_date == DateStamp(40, 13, 2024)

    @pytest.mark.parametrize(
        "line",
        [
            "AAPL,Apple,0,ten,100,100,1,1,2024",
            "AAPL,Apple,5,1,100,100,1,1,2024",
            "AAPL,Apple,0,1,100,,1,1,2024",
            "AAPL,Apple,0,1,100,100,1,1",
        ],
    )
    def test_decode_rejects_malformed(self, line):
        with pytest.raises(ParseError):
            decode_holding(line)
