"""Flat-file storage: one text file for the ledger, one for the portfolio."""

import os
import tempfile
from pathlib import Path
from typing import Callable, Iterable, TypeVar

from loguru import logger

from ledgerfolio.domain.entities import Holding, LedgerEntry
from ledgerfolio.domain.errors import ParseError
from ledgerfolio.storage.base import Storage
from ledgerfolio.storage.codec import (
    decode_entry,
    decode_holding,
    encode_entry,
    encode_holding,
)

T = TypeVar("T")


class FlatFileStorage(Storage):
    """Store entries and holdings as one record per line in two files.

    Each file is rewritten completely on save, through a temporary file that
    is renamed over the target. The two files are written one after the other
    and not as a unit: a crash between the two writes leaves a new ledger
    file next to an old portfolio file.
    """

    def __init__(self, ledger_path: str | Path, portfolio_path: str | Path):
        """Initialize flat-file storage.

        Args:
            ledger_path: Path of the transactions file
            portfolio_path: Path of the holdings file
        """
        self.ledger_path = Path(ledger_path)
        self.portfolio_path = Path(portfolio_path)

    def load_entries(self) -> tuple[list[LedgerEntry], list[str]]:
        return self._read_records(self.ledger_path, decode_entry, "transaction")

    def save_entries(self, entries: Iterable[LedgerEntry]) -> None:
        self._write_records(self.ledger_path, (encode_entry(e) for e in entries))

    def load_holdings(self) -> tuple[list[Holding], list[str]]:
        return self._read_records(self.portfolio_path, decode_holding, "holding")

    def save_holdings(self, holdings: Iterable[Holding]) -> None:
        self._write_records(self.portfolio_path, (encode_holding(h) for h in holdings))

    def _read_records(
        self, path: Path, decode: Callable[[str], T], record: str
    ) -> tuple[list[T], list[str]]:
        """Decode every non-blank line of ``path``, skipping bad lines.

        A missing file is an empty dataset. An unreadable file is reported as
        a single error and also treated as empty.
        """
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            logger.debug(f"No {record} file at {path}, starting empty")
            return [], []
        except OSError as e:
            message = f"Could not read {path}: {e}"
            logger.warning(message)
            return [], [message]

        records: list[T] = []
        errors: list[str] = []
        for line_num, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                records.append(decode(line))
            except ParseError as e:
                message = f"{path.name} line {line_num}: {e}"
                logger.warning(f"Skipping {record}: {message}")
                errors.append(message)

        logger.debug(f"Loaded {len(records)} {record} record(s) from {path}")
        return records, errors

    @staticmethod
    def _write_records(path: Path, lines: Iterable[str]) -> None:
        """Write ``lines`` to ``path`` via a temp file and rename.

        Undecodable bytes that reached us as surrogate escapes (for example
        from non-UTF-8 command line arguments) are written back as bytes.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
        try:
            with os.fdopen(
                fd, "w", encoding="utf-8", errors="surrogateescape", newline="\n"
            ) as f:
                for line in lines:
                    f.write(line)
                    f.write("\n")
            os.replace(tmp_path, path)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
