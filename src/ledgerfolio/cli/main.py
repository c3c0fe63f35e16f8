"""Main CLI entry point."""

import sys

import click
from loguru import logger

from ledgerfolio.domain.ledger import LedgerStore
from ledgerfolio.storage.factories import create_flat_file_storage

# Import and register all commands at module level
from ledgerfolio.cli.commands import (
    add,
    buy,
    holding,
    portfolio,
    summary,
    transaction,
)

LOG_FORMAT = "<level>{level: <8}</level> | {message}"


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    help="Directory for the data files (overrides LEDGERFOLIO_DATA_DIR environment variable)",
    envvar="LEDGERFOLIO_DATA_DIR",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, data_dir: str | None, verbose: bool):
    """Ledgerfolio - Personal finance and investment tracker.

    Record income, expenses and investment purchases, follow the value of
    your portfolio and see where your money goes.
    """
    ctx.ensure_object(dict)

    logger.remove()
    handler_id = logger.add(
        sys.stderr, level="DEBUG" if verbose else "WARNING", format=LOG_FORMAT
    )
    ctx.call_on_close(lambda: logger.remove(handler_id))

    # Load data only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        storage = create_flat_file_storage(data_dir=data_dir)
        ctx.obj["store"] = LedgerStore(storage)


# Register all commands
add.register_commands(cli)
buy.register_commands(cli)
transaction.register_commands(cli)
holding.register_commands(cli)
portfolio.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
