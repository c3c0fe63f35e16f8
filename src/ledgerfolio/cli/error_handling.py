"""CLI error handling helpers."""

import click

from ledgerfolio.domain.errors import DomainError
from ledgerfolio.domain.ledger import LedgerStore


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def save_or_warn(store: LedgerStore) -> None:
    """Save the store, warning on stderr if a data file could not be written."""
    if not store.save():
        click.echo("Warning: changes could not be saved completely", err=True)
