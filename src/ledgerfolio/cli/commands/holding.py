"""Holding management commands."""

import click

from ledgerfolio.cli.display import money
from ledgerfolio.cli.error_handling import handle_domain_error, save_or_warn
from ledgerfolio.cli.input_parsing import amount_or_exit
from ledgerfolio.domain.errors import DomainError, holding_not_found


@click.group()
def holding_group():
    """Manage individual holdings.

    A SYMBOL refers to the first holding bought with that symbol.
    """
    pass


@holding_group.command("set-price")
@click.argument("symbol")
@click.argument("price")
@click.pass_context
def set_price(ctx, symbol: str, price: str) -> None:
    """Set the current market price of a holding."""
    store = ctx.obj["store"]
    new_price = amount_or_exit(ctx, price, "price")

    try:
        holding = store.set_price(symbol, new_price)
    except DomainError as e:
        handle_domain_error(ctx, e)
    save_or_warn(store)
    click.echo(f"{holding.symbol} now priced at {money(holding.current_price)}")


@holding_group.command("top-up")
@click.argument("symbol")
@click.argument("quantity")
@click.pass_context
def top_up(ctx, symbol: str, quantity: str) -> None:
    """Add units to an existing holding without recording a purchase."""
    store = ctx.obj["store"]
    units = amount_or_exit(ctx, quantity, "quantity")

    try:
        holding = store.top_up(symbol, units)
    except DomainError as e:
        handle_domain_error(ctx, e)
    save_or_warn(store)
    click.echo(f"{holding.symbol} quantity is now {holding.quantity}")


@holding_group.command("sell")
@click.argument("symbol")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def sell(ctx, symbol: str, yes: bool) -> None:
    """Remove a holding from the portfolio."""
    store = ctx.obj["store"]

    if store.portfolio.find_by_symbol(symbol) is None:
        click.echo(f"Error: {holding_not_found(symbol)}", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Remove holding '{symbol}' from the portfolio?"):
        click.echo("Cancelled.")
        return

    try:
        store.sell(symbol)
    except DomainError as e:
        handle_domain_error(ctx, e)
    save_or_warn(store)
    click.echo(f"Removed holding '{symbol}'")


def register_commands(cli):
    """Register holding commands with main CLI."""
    cli.add_command(holding_group, name="holding")
