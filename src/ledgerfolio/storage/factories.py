"""Storage factory functions."""

import os
from pathlib import Path
from typing import Optional

from ledgerfolio.storage.flat_file import FlatFileStorage

LEDGER_FILE_NAME = "finance_data.csv"
PORTFOLIO_FILE_NAME = "portfolio_data.csv"


def resolve_data_dir(data_dir: Optional[str] = None) -> Path:
    """Resolve the directory holding the data files.

    Args:
        data_dir: Directory path. If None, checks LEDGERFOLIO_DATA_DIR
            environment variable, then defaults to ~/.ledgerfolio

    Returns:
        Directory path (created if it does not exist yet)
    """
    if data_dir is None:
        data_dir = os.environ.get("LEDGERFOLIO_DATA_DIR")

    if data_dir is None:
        path = Path.home() / ".ledgerfolio"
    else:
        path = Path(data_dir).expanduser()

    path.mkdir(parents=True, exist_ok=True)
    return path


def create_flat_file_storage(data_dir: Optional[str] = None) -> FlatFileStorage:
    """Create a flat-file storage instance.

    Args:
        data_dir: Directory for the ledger and portfolio files, see
            ``resolve_data_dir``

    Returns:
        FlatFileStorage instance using finance_data.csv and portfolio_data.csv
    """
    directory = resolve_data_dir(data_dir)
    return FlatFileStorage(
        ledger_path=directory / LEDGER_FILE_NAME,
        portfolio_path=directory / PORTFOLIO_FILE_NAME,
    )
