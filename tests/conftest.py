"""Shared pytest fixtures for ledgerfolio tests."""

from pathlib import Path

import pytest

from ledgerfolio.domain.ledger import LedgerStore
from ledgerfolio.storage.factories import create_flat_file_storage


class SequenceRandom:
    """Deterministic stand-in for ``random.Random`` that replays fixed draws."""

    def __init__(self, *values: float):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Create an empty data directory for testing."""
    directory = tmp_path / "data"
    directory.mkdir()
    return directory


@pytest.fixture
def storage(data_dir):
    """Create a flat-file storage in the temporary data directory."""
    return create_flat_file_storage(data_dir=str(data_dir))


@pytest.fixture
def store(storage):
    """Create an empty LedgerStore backed by the temporary storage."""
    return LedgerStore(storage)


@pytest.fixture
def sequence_random():
    """Factory for deterministic random sources."""
    return SequenceRandom


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
