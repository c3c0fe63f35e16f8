"""Domain model entities for ledgerfolio.

These are plain data classes representing ledger and portfolio concepts,
independent of the flat-file format they are persisted in. The codec in
``ledgerfolio.storage.codec`` is the only place that knows about field order.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import IntEnum
from functools import total_ordering
from typing import Optional, Union

from ledgerfolio.domain.errors import ParseError

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal, going through str for floats."""
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class EntryKind(IntEnum):
    """Kind of a ledger entry. Values are the persisted ordinals."""

    INCOME = 0
    EXPENSE = 1
    INVESTMENT = 2
    WITHDRAWAL = 3

    @property
    def label(self) -> str:
        return self.name.title()


class ExpenseCategory(IntEnum):
    """Expense category. Only meaningful for EXPENSE entries."""

    FOOD = 0
    TRANSPORT = 1
    UTILITIES = 2
    ENTERTAINMENT = 3
    HEALTHCARE = 4
    EDUCATION = 5
    OTHER = 6

    @property
    def label(self) -> str:
        return self.name.title()


class InvestmentKind(IntEnum):
    """Kind of an investment holding. Values are the persisted ordinals."""

    STOCK = 0
    BOND = 1
    MUTUAL_FUND = 2
    CRYPTO = 3
    ETF = 4

    @property
    def label(self) -> str:
        if self is InvestmentKind.ETF:
            return "ETF"
        return self.name.replace("_", " ").title()


@total_ordering
@dataclass(frozen=True)
class DateStamp:
    """Calendar date stamp.

    Unlike ``datetime.date`` no calendar validation is done, so values such as
    day 40 or month 13 are accepted and survive a save/load cycle unchanged.
    Ordering is by (year, month, day).
    """

    day: int
    month: int
    year: int

    @classmethod
    def today(cls) -> "DateStamp":
        """Return the current local calendar date."""
        return cls.from_date(date.today())

    @classmethod
    def from_date(cls, value: date) -> "DateStamp":
        return cls(day=value.day, month=value.month, year=value.year)

    def to_date(self) -> date:
        """Convert to ``datetime.date``.

        Raises:
            ValueError: If the stamp is not a real calendar date
        """
        return date(self.year, self.month, self.day)

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: "DateStamp") -> bool:
        if not isinstance(other, DateStamp):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

    def encode(self) -> str:
        """Return the ``D,M,Y`` storage form."""
        return f"{self.day},{self.month},{self.year}"

    @classmethod
    def decode(cls, text: str) -> "DateStamp":
        """Parse the ``D,M,Y`` storage form.

        Raises:
            ParseError: If there are not exactly three integer fields
        """
        parts = text.split(",")
        if len(parts) != 3:
            raise ParseError(f"Expected 3 date fields, got {len(parts)}: '{text}'")
        return cls.from_fields(parts)

    @classmethod
    def from_fields(cls, fields: list[str]) -> "DateStamp":
        """Build a stamp from already split day, month and year fields."""
        try:
            day, month, year = (int(field.strip()) for field in fields)
        except ValueError:
            raise ParseError(f"Invalid date fields: {','.join(fields)}")
        return cls(day=day, month=month, year=year)


class IdSequence:
    """Strictly increasing id generator owned by a ledger store."""

    def __init__(self, start: int = 1):
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        """Return the id the next call to ``next_id`` will hand out."""
        return self._next

    def advance_past(self, used_id: int) -> None:
        """Make sure ids handed out from now on are greater than ``used_id``."""
        if used_id >= self._next:
            self._next = used_id + 1


@dataclass
class LedgerEntry:
    """One recorded income, expense, investment or withdrawal event.

    The id never changes. Description, amount and category may be edited.
    """

    id: int
    description: str
    amount: Decimal
    date: DateStamp
    kind: EntryKind
    category: ExpenseCategory = ExpenseCategory.OTHER

    @classmethod
    def create(
        cls,
        ids: IdSequence,
        description: str,
        amount: Number,
        kind: EntryKind,
        category: ExpenseCategory = ExpenseCategory.OTHER,
        date: Optional[DateStamp] = None,
    ) -> "LedgerEntry":
        """Create an entry with the next id from ``ids``.

        No validation is done on the sign or magnitude of ``amount``.
        """
        return cls(
            id=ids.next_id(),
            description=description,
            amount=to_decimal(amount),
            date=date if date is not None else DateStamp.today(),
            kind=kind,
            category=category,
        )


@dataclass
class Holding:
    """One investment position: symbol, quantity, cost basis and live price."""

    symbol: str
    name: str
    kind: InvestmentKind
    quantity: Decimal
    purchase_price: Decimal
    current_price: Decimal
    purchase_date: DateStamp

    @classmethod
    def create(
        cls,
        symbol: str,
        name: str,
        kind: InvestmentKind,
        quantity: Number,
        price: Number,
        date: Optional[DateStamp] = None,
    ) -> "Holding":
        """Create a holding whose current price starts at the purchase price."""
        price = to_decimal(price)
        return cls(
            symbol=symbol,
            name=name,
            kind=kind,
            quantity=to_decimal(quantity),
            purchase_price=price,
            current_price=price,
            purchase_date=date if date is not None else DateStamp.today(),
        )

    def set_current_price(self, price: Number) -> None:
        self.current_price = to_decimal(price)

    def add_quantity(self, quantity: Number) -> None:
        self.quantity += to_decimal(quantity)

    @property
    def current_value(self) -> Decimal:
        return self.quantity * self.current_price

    @property
    def initial_value(self) -> Decimal:
        return self.quantity * self.purchase_price

    @property
    def gain_loss(self) -> Decimal:
        return self.current_value - self.initial_value

    @property
    def gain_loss_pct(self) -> Decimal:
        """Gain or loss as a percentage of the initial value.

        Returns 0 when the initial value is 0.
        """
        initial = self.initial_value
        if initial == 0:
            return Decimal(0)
        return self.gain_loss / initial * 100


@dataclass
class LoadReport:
    """Outcome of loading the ledger and portfolio files."""

    entries: int = 0
    holdings: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
