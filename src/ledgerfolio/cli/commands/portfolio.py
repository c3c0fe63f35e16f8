"""Portfolio commands."""

import random

import click

from ledgerfolio.cli.display import money, percent, rule
from ledgerfolio.cli.error_handling import save_or_warn


@click.command("portfolio")
@click.pass_context
def show_portfolio(ctx):
    """Show holdings, totals and diversification."""
    store = ctx.obj["store"]
    portfolio = store.portfolio

    click.echo(f"\n=== Portfolio: {portfolio.name} ===")
    if not len(portfolio):
        click.echo("No holdings.")
        return

    click.echo(
        f"{'Symbol':<8} {'Name':<20} {'Type':<12} {'Quantity':>10} {'Buy Price':>12} "
        f"{'Current':>12} {'Value':>14} {'Gain/Loss':>14} {'%':>8}"
    )
    click.echo(rule(118))
    for holding in portfolio:
        click.echo(
            f"{holding.symbol:<8} {holding.name[:20]:<20} {holding.kind.label:<12} "
            f"{holding.quantity:>10,.2f} {money(holding.purchase_price):>12} "
            f"{money(holding.current_price):>12} {money(holding.current_value):>14} "
            f"{money(holding.gain_loss):>14} {percent(holding.gain_loss_pct):>8}"
        )
    click.echo(rule(118))
    click.echo(f"Total Portfolio Value: {money(portfolio.total_value())}")
    click.echo(
        f"Total Gain/Loss: {money(portfolio.total_gain_loss())} "
        f"({percent(portfolio.total_gain_loss_pct())})"
    )

    click.echo("\nDiversification:")
    for kind, share in portfolio.diversification().items():
        click.echo(f"  {kind.label:<12} {percent(share):>7}")


@click.command("update-prices")
@click.option("--seed", type=int, help="Seed the random price moves (for repeatable runs)")
@click.pass_context
def update_prices(ctx, seed: int | None):
    """Simulate a market move of up to 5% either way on every holding."""
    store = ctx.obj["store"]

    rng = random.Random(seed) if seed is not None else random.Random()
    store.simulate_market_move(rng)
    save_or_warn(store)
    click.echo("Market prices updated!")


def register_commands(cli):
    """Register portfolio commands with main CLI."""
    cli.add_command(show_portfolio)
    cli.add_command(update_prices)
