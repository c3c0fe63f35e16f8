"""Add transaction command."""

import click

from ledgerfolio.cli.display import money
from ledgerfolio.cli.error_handling import save_or_warn
from ledgerfolio.cli.input_parsing import amount_or_exit, choice_or_exit, date_or_exit
from ledgerfolio.domain.entities import EntryKind, ExpenseCategory


@click.command("add")
@click.argument("description")
@click.option("--amount", required=True, help="Transaction amount (e.g., 123.45)")
@click.option(
    "--type",
    "kind",
    required=True,
    help="Transaction type: income, expense, investment, withdrawal (or 1-4)",
)
@click.option(
    "--category",
    help="Expense category: food, transport, utilities, entertainment, healthcare, education, other (or 1-7)",
)
@click.option(
    "--date", help="Transaction date (YYYY-MM-DD, D/M/YYYY or relative like 'today'); defaults to today"
)
@click.pass_context
def add_transaction(
    ctx,
    description: str,
    amount: str,
    kind: str,
    category: str | None,
    date: str | None,
):
    """Record a transaction.

    The category only applies to expenses and defaults to 'other'.

    Examples:
        ledgerfolio add "Salary" --amount 50000 --type income
        ledgerfolio add "Groceries" --amount 1200 --type expense --category food
        ledgerfolio add "Bus pass" --amount 800 --type 2 --category 2 --date yesterday
    """
    store = ctx.obj["store"]

    entry_amount = amount_or_exit(ctx, amount)
    entry_kind = choice_or_exit(ctx, EntryKind, kind)
    entry_category = ExpenseCategory.OTHER
    if category is not None:
        entry_category = choice_or_exit(ctx, ExpenseCategory, category)
        if entry_kind != EntryKind.EXPENSE:
            click.echo("Note: category is only used for expenses", err=True)
    entry_date = date_or_exit(ctx, date) if date is not None else None

    entry = store.record_transaction(
        description,
        entry_amount,
        entry_kind,
        category=entry_category,
        date=entry_date,
    )
    save_or_warn(store)

    click.echo(f"Created transaction {entry.id}")
    click.echo(f"  Type: {entry.kind.label}")
    click.echo(f"  Date: {entry.date}")
    click.echo(f"  Amount: {money(entry.amount)}")
    if entry.kind == EntryKind.EXPENSE:
        click.echo(f"  Category: {entry.category.label}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
