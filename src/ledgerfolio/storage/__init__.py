"""Storage layer for ledgerfolio."""

from ledgerfolio.storage.base import Storage
from ledgerfolio.storage.factories import create_flat_file_storage

__all__ = ["Storage", "create_flat_file_storage"]
