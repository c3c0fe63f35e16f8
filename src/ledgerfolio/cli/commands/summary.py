"""Summary command."""

import click

from ledgerfolio.cli.display import money


@click.command("summary")
@click.pass_context
def summary(ctx):
    """Show income, expenses, investments and net worth."""
    store = ctx.obj["store"]

    click.echo("\n=== Financial Summary ===")
    click.echo(f"Total Income: {money(store.total_income())}")
    click.echo(f"Total Expenses: {money(store.total_expenses())}")
    click.echo(f"Total Investments: {money(store.total_investments())}")
    click.echo(f"Portfolio Value: {money(store.portfolio.total_value())}")
    click.echo(f"Net Worth: {money(store.net_worth())}")

    breakdown = store.expense_by_category()
    click.echo("\n=== Expense Breakdown ===")
    if not breakdown:
        click.echo("No expenses recorded.")
        return
    for category, total in breakdown.items():
        click.echo(f"  {category.label:<15} {money(total):>14}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
