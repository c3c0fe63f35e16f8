"""Buy investment command."""

import click

from ledgerfolio.cli.display import money
from ledgerfolio.cli.error_handling import save_or_warn
from ledgerfolio.cli.input_parsing import amount_or_exit, choice_or_exit, date_or_exit
from ledgerfolio.domain.entities import InvestmentKind


@click.command("buy")
@click.argument("symbol")
@click.option("--name", help="Investment name (defaults to the symbol)")
@click.option(
    "--type",
    "kind",
    required=True,
    help="Investment type: stock, bond, mutual fund, crypto, etf (or 1-5)",
)
@click.option("--quantity", required=True, help="Number of units bought")
@click.option("--price", required=True, help="Purchase price per unit")
@click.option("--date", help="Purchase date; defaults to today")
@click.pass_context
def buy_investment(
    ctx,
    symbol: str,
    name: str | None,
    kind: str,
    quantity: str,
    price: str,
    date: str | None,
):
    """Buy an investment.

    Adds a holding to the portfolio and records the purchase as an
    investment transaction. Buying a symbol you already hold adds a
    separate holding.

    Examples:
        ledgerfolio buy AAPL --name "Apple" --type stock --quantity 10 --price 150
        ledgerfolio buy BTC --type crypto --quantity 0.05 --price 2500000
    """
    store = ctx.obj["store"]

    units = amount_or_exit(ctx, quantity, "quantity")
    unit_price = amount_or_exit(ctx, price, "price")
    investment_kind = choice_or_exit(ctx, InvestmentKind, kind)
    purchase_date = date_or_exit(ctx, date) if date is not None else None

    if store.portfolio.find_by_symbol(symbol) is not None:
        click.echo(f"Note: '{symbol}' is already held; recording a separate holding", err=True)

    holding = store.record_purchase(
        symbol,
        name if name is not None else symbol,
        investment_kind,
        units,
        unit_price,
        date=purchase_date,
    )
    save_or_warn(store)

    click.echo(f"Bought {holding.quantity} x {holding.symbol} at {money(holding.purchase_price)}")
    click.echo(f"  Type: {holding.kind.label}")
    click.echo(f"  Total cost: {money(holding.initial_value)}")


def register_commands(cli):
    """Register buy command with main CLI."""
    cli.add_command(buy_investment)
