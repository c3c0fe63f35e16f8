"""Domain layer for ledgerfolio."""

from ledgerfolio.domain.ledger import LedgerStore
from ledgerfolio.domain.portfolio import Portfolio

__all__ = [
    "LedgerStore",
    "Portfolio",
]
