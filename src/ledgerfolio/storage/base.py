"""Abstract storage interface."""

from abc import ABC, abstractmethod
from typing import Iterable

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerfolio.domain.entities import Holding, LedgerEntry


class Storage(ABC):
    """Abstract persistence interface for ledger entries and holdings.

    Loading never raises for bad data: records that fail to decode are
    skipped and described in the returned error list. Saving raises
    ``OSError`` when the data cannot be written; the caller decides how to
    report it.
    """

    @abstractmethod
    def load_entries(self) -> tuple[list[LedgerEntry], list[str]]:
        """Load all ledger entries. Returns (entries, error messages)."""
        pass

    @abstractmethod
    def save_entries(self, entries: Iterable[LedgerEntry]) -> None:
        """Replace the stored ledger entries with ``entries``."""
        pass

    @abstractmethod
    def load_holdings(self) -> tuple[list[Holding], list[str]]:
        """Load all holdings. Returns (holdings, error messages)."""
        pass

    @abstractmethod
    def save_holdings(self, holdings: Iterable[Holding]) -> None:
        """Replace the stored holdings with ``holdings``."""
        pass
