"""Ledger store: the top-level owner of entries and the portfolio."""

from __future__ import annotations

import random
from collections import defaultdict
from decimal import Decimal
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from loguru import logger

from ledgerfolio.domain.entities import (
    DateStamp,
    EntryKind,
    ExpenseCategory,
    Holding,
    IdSequence,
    InvestmentKind,
    LedgerEntry,
    LoadReport,
    Number,
    to_decimal,
)
from ledgerfolio.domain.errors import NotFoundError, entry_not_found, holding_not_found
from ledgerfolio.domain.portfolio import Portfolio, RandomSource

if TYPE_CHECKING:
    from ledgerfolio.storage.base import Storage


class LedgerStore:
    """Owns the ledger entries and the portfolio, and persists both.

    Data is loaded from storage once, when the store is created. All changes
    and analytics then happen in memory until ``save`` is called.

    Not safe for concurrent use: callers sharing a store across threads must
    serialize calls to it.
    """

    def __init__(self, storage: Storage, ids: Optional[IdSequence] = None):
        """Initialize the store and load persisted data.

        Args:
            storage: Storage backend
            ids: Id sequence for new entries (a fresh one starting at 1 if
                not given)
        """
        self.storage = storage
        self.ids = ids if ids is not None else IdSequence()
        self.portfolio = Portfolio()
        self._entries: list[LedgerEntry] = []
        self.load_report = self.load()

    @property
    def entries(self) -> tuple[LedgerEntry, ...]:
        return tuple(self._entries)

    # Recording

    def record_transaction(
        self,
        description: str,
        amount: Number,
        kind: EntryKind,
        category: ExpenseCategory = ExpenseCategory.OTHER,
        date: Optional[DateStamp] = None,
    ) -> LedgerEntry:
        """Append a new ledger entry.

        Args:
            description: Free text description
            amount: Amount (any sign, not validated)
            kind: Entry kind
            category: Expense category (only meaningful for expenses)
            date: Entry date, today if not given

        Returns:
            The new entry
        """
        entry = LedgerEntry.create(
            self.ids,
            description=description,
            amount=amount,
            kind=kind,
            category=category,
            date=date,
        )
        self._entries.append(entry)
        logger.debug(f"Recorded {kind.label.lower()} {entry.id}: {description} {entry.amount}")
        return entry

    def record_purchase(
        self,
        symbol: str,
        name: str,
        kind: InvestmentKind,
        quantity: Number,
        price: Number,
        date: Optional[DateStamp] = None,
    ) -> Holding:
        """Buy an investment.

        Adds a new holding to the portfolio and records the matching
        investment entry (amount = quantity x price) in the ledger. Repeated
        purchases of one symbol stay separate holdings.

        Returns:
            The new holding
        """
        holding = Holding.create(symbol, name, kind, quantity, price, date=date)
        self.portfolio.add(holding)
        self.record_transaction(
            f"Investment: {symbol}",
            holding.initial_value,
            EntryKind.INVESTMENT,
            date=holding.purchase_date,
        )
        return holding

    # Entries

    def get_entry(self, entry_id: int) -> Optional[LedgerEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def update_entry(
        self,
        entry_id: int,
        description: Optional[str] = None,
        amount: Optional[Number] = None,
        category: Optional[ExpenseCategory] = None,
    ) -> LedgerEntry:
        """Edit the mutable fields of an entry.

        Raises:
            NotFoundError: If no entry has ``entry_id``
        """
        entry = self.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))

        if description is not None:
            entry.description = description
        if amount is not None:
            entry.amount = to_decimal(amount)
        if category is not None:
            entry.category = category
        return entry

    def list_entries(
        self,
        kind: Optional[EntryKind] = None,
        start_date: Optional[DateStamp] = None,
        end_date: Optional[DateStamp] = None,
    ) -> list[LedgerEntry]:
        """List entries in recording order, with optional filters."""
        entries = self._entries
        if kind is not None:
            entries = [e for e in entries if e.kind == kind]
        if start_date is not None:
            entries = [e for e in entries if e.date >= start_date]
        if end_date is not None:
            entries = [e for e in entries if e.date <= end_date]
        return list(entries)

    # Holdings

    def _require_holding(self, symbol: str) -> Holding:
        holding = self.portfolio.find_by_symbol(symbol)
        if holding is None:
            raise NotFoundError(holding_not_found(symbol))
        return holding

    def set_price(self, symbol: str, price: Number) -> Holding:
        """Replace the current price of the first holding with ``symbol``."""
        holding = self._require_holding(symbol)
        holding.set_current_price(price)
        return holding

    def top_up(self, symbol: str, quantity: Number) -> Holding:
        """Add ``quantity`` to the first holding with ``symbol``."""
        holding = self._require_holding(symbol)
        holding.add_quantity(quantity)
        return holding

    def sell(self, symbol: str) -> None:
        """Drop the first holding with ``symbol`` from the portfolio.

        No ledger entry is recorded.
        """
        if not self.portfolio.remove(symbol):
            raise NotFoundError(holding_not_found(symbol))

    def simulate_market_move(self, rng: Optional[RandomSource] = None) -> None:
        """Apply a random price move to every holding.

        Args:
            rng: Random source, a fresh ``random.Random()`` if not given
        """
        self.portfolio.simulate_market_move(rng if rng is not None else random.Random())
        logger.info(f"Updated market prices for {len(self.portfolio)} holding(s)")

    # Analytics

    def _total_for(self, kind: EntryKind) -> Decimal:
        return sum((e.amount for e in self._entries if e.kind == kind), Decimal(0))

    def total_income(self) -> Decimal:
        return self._total_for(EntryKind.INCOME)

    def total_expenses(self) -> Decimal:
        return self._total_for(EntryKind.EXPENSE)

    def total_investments(self) -> Decimal:
        return self._total_for(EntryKind.INVESTMENT)

    def net_worth(self) -> Decimal:
        """Income minus expenses plus current portfolio value.

        Investment entries are not counted; the money they moved is already in
        the portfolio value.
        """
        return self.total_income() - self.total_expenses() + self.portfolio.total_value()

    def expense_by_category(self) -> dict[ExpenseCategory, Decimal]:
        """Sum expense amounts per category, ordered by category."""
        totals: dict[ExpenseCategory, Decimal] = defaultdict(Decimal)
        for entry in self._entries:
            if entry.kind == EntryKind.EXPENSE:
                totals[entry.category] += entry.amount
        return {category: totals[category] for category in sorted(totals)}

    # Persistence

    def load(self) -> LoadReport:
        """Replace in-memory data with the stored entries and holdings.

        Lines that cannot be decoded are skipped and listed in the report.
        The id sequence is moved past the largest loaded id.
        """
        entries, entry_errors = self.storage.load_entries()
        holdings, holding_errors = self.storage.load_holdings()

        self._entries = entries
        self.portfolio = Portfolio()
        for holding in holdings:
            self.portfolio.add(holding)

        if entries:
            self.ids.advance_past(max(e.id for e in entries))

        report = LoadReport(
            entries=len(entries),
            holdings=len(holdings),
            errors=entry_errors + holding_errors,
        )
        logger.info(
            f"Loaded {report.entries} transaction(s) and {report.holdings} holding(s)"
            + (f", skipped {len(report.errors)} bad record(s)" if report.errors else "")
        )
        logger.debug(f"Next transaction id is {self.ids.peek()}")
        return report

    def save(self) -> bool:
        """Rewrite both data files from memory.

        A write failure is logged and does not stop the other file from being
        written.

        Returns:
            True if both files were written
        """
        saved_entries = self._save_part(
            "transactions", self.storage.save_entries, self._entries
        )
        saved_holdings = self._save_part(
            "portfolio", self.storage.save_holdings, self.portfolio.holdings
        )
        return saved_entries and saved_holdings

    @staticmethod
    def _save_part(label: str, write: Callable[[Iterable], None], records: Iterable) -> bool:
        try:
            write(records)
        except (OSError, UnicodeError) as e:
            logger.warning(f"Could not save {label}: {e}")
            return False
        logger.debug(f"Saved {label}")
        return True
