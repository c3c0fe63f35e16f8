"""Line codec for ledger entries and holdings.

Each record is one comma-separated line written with the ``csv`` module, so
free text containing commas or quotes is quoted and survives a round trip.
Line breaks inside free text are written as spaces. Records without such
characters come out exactly as the older unquoted format did::

    id,description,amount,day,month,year,kind,category
    symbol,name,kind,quantity,purchase_price,current_price,day,month,year

Older files wrote free text unquoted. A line that does not read back
exactly as the csv writer would produce it is taken to be from such a file
and split on every comma, so quote characters in its free text are kept.
If the description (or holding name) contained a comma the line has surplus
fields; those are joined back into the free-text field.
"""

import csv
import io
from decimal import Decimal, InvalidOperation
from enum import IntEnum
from typing import TypeVar

from ledgerfolio.domain.entities import (
    DateStamp,
    EntryKind,
    ExpenseCategory,
    Holding,
    InvestmentKind,
    LedgerEntry,
)
from ledgerfolio.domain.errors import ParseError, bad_field, too_few_fields

ENTRY_FIELD_COUNT = 8
HOLDING_FIELD_COUNT = 9

E = TypeVar("E", bound=IntEnum)


def _single_line(text: str) -> str:
    # One record per line; line breaks inside free text become spaces
    return " ".join(text.splitlines())


def _join(fields: list[str]) -> str:
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="").writerow(fields)
    return buffer.getvalue()


def _split(line: str) -> list[str]:
    line = line.rstrip("\r\n")
    try:
        rows = list(csv.reader([line]))
    except csv.Error:
        rows = []
    fields = rows[0] if rows else []
    # Lines we did not write ourselves (older unquoted format with quote
    # characters in free text) are split on every comma
    if _join(fields) != line:
        return line.split(",")
    return fields


def _int(field: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise ParseError(bad_field(field, value))


def _decimal(field: str, value: str) -> Decimal:
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        raise ParseError(bad_field(field, value))
    if not number.is_finite():
        raise ParseError(bad_field(field, value))
    return number


def _ordinal(enum_type: type[E], field: str, value: str) -> E:
    ordinal = _int(field, value)
    try:
        return enum_type(ordinal)
    except ValueError:
        raise ParseError(bad_field(field, value))


def encode_entry(entry: LedgerEntry) -> str:
    """Encode a ledger entry as one line (without line terminator)."""
    return _join(
        [
            str(entry.id),
            _single_line(entry.description),
            str(entry.amount),
            str(entry.date.day),
            str(entry.date.month),
            str(entry.date.year),
            str(int(entry.kind)),
            str(int(entry.category)),
        ]
    )


def decode_entry(line: str) -> LedgerEntry:
    """Decode a ledger entry line.

    The decoded id is kept as is; no id sequence is consulted.

    Raises:
        ParseError: If the line has too few fields or a malformed field
    """
    fields = _split(line)
    if len(fields) < ENTRY_FIELD_COUNT:
        raise ParseError(too_few_fields("Transaction", ENTRY_FIELD_COUNT, len(fields)))

    # Everything between the id and the six trailing fields is description
    tail = fields[-6:]
    description = ",".join(fields[1:-6])

    return LedgerEntry(
        id=_int("id", fields[0]),
        description=description,
        amount=_decimal("amount", tail[0]),
        date=DateStamp.from_fields(tail[1:4]),
        kind=_ordinal(EntryKind, "transaction type", tail[4]),
        category=_ordinal(ExpenseCategory, "category", tail[5]),
    )


def encode_holding(holding: Holding) -> str:
    """Encode a holding as one line (without line terminator)."""
    return _join(
        [
            _single_line(holding.symbol),
            _single_line(holding.name),
            str(int(holding.kind)),
            str(holding.quantity),
            str(holding.purchase_price),
            str(holding.current_price),
            str(holding.purchase_date.day),
            str(holding.purchase_date.month),
            str(holding.purchase_date.year),
        ]
    )


def decode_holding(line: str) -> Holding:
    """Decode a holding line.

    Raises:
        ParseError: If the line has too few fields or a malformed field
    """
    fields = _split(line)
    if len(fields) < HOLDING_FIELD_COUNT:
        raise ParseError(too_few_fields("Holding", HOLDING_FIELD_COUNT, len(fields)))

    tail = fields[-7:]
    name = ",".join(fields[1:-7])

    return Holding(
        symbol=fields[0],
        name=name,
        kind=_ordinal(InvestmentKind, "investment type", tail[0]),
        quantity=_decimal("quantity", tail[1]),
        purchase_price=_decimal("purchase price", tail[2]),
        current_price=_decimal("current price", tail[3]),
        purchase_date=DateStamp.from_fields(tail[4:7]),
    )
