"""Transaction history commands."""

import click

from ledgerfolio.cli.display import money, rule
from ledgerfolio.cli.error_handling import handle_domain_error, save_or_warn
from ledgerfolio.cli.input_parsing import amount_or_exit, choice_or_exit, date_or_exit
from ledgerfolio.domain.entities import EntryKind, ExpenseCategory
from ledgerfolio.domain.errors import DomainError
from ledgerfolio.utils.date_parser import PERIODS, get_date_range


@click.group()
def transaction_group():
    """View and edit transactions."""
    pass


@transaction_group.command("list")
@click.option("--type", "kind", help="Only show this transaction type")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--period", type=click.Choice(PERIODS), help="Named period instead of start/end dates")
@click.pass_context
def list_transactions(
    ctx,
    kind: str | None,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
):
    """Show the transaction history."""
    store = ctx.obj["store"]

    if period is not None and (start_date or end_date):
        click.echo("Error: --period cannot be combined with --start-date or --end-date.", err=True)
        ctx.exit(1)

    start = date_or_exit(ctx, start_date) if start_date else None
    end = date_or_exit(ctx, end_date) if end_date else None
    if period is not None:
        start, end = get_date_range(period)
    entry_kind = choice_or_exit(ctx, EntryKind, kind) if kind else None

    entries = store.list_entries(kind=entry_kind, start_date=start, end_date=end)
    if not entries:
        click.echo("No transactions found.")
        return

    click.echo(f"{'ID':<5} {'Description':<24} {'Amount':>14}  {'Type':<12} {'Category':<15} {'Date':<12}")
    click.echo(rule(86))
    for entry in entries:
        category = entry.category.label if entry.kind == EntryKind.EXPENSE else ""
        click.echo(
            f"{entry.id:<5} {entry.description[:24]:<24} {money(entry.amount):>14}  "
            f"{entry.kind.label:<12} {category:<15} {str(entry.date):<12}"
        )


@transaction_group.command("edit")
@click.argument("entry_id", type=int)
@click.option("--description", help="New description")
@click.option("--amount", help="New amount")
@click.option("--category", help="New expense category")
@click.pass_context
def edit_transaction(
    ctx,
    entry_id: int,
    description: str | None,
    amount: str | None,
    category: str | None,
):
    """Edit a transaction.

    Only the description, amount and category can be changed.

    Examples:
        ledgerfolio transaction edit 3 --amount 1250
        ledgerfolio transaction edit 3 --category healthcare
    """
    store = ctx.obj["store"]

    if description is None and amount is None and category is None:
        click.echo("Nothing to change.")
        return

    new_amount = amount_or_exit(ctx, amount) if amount is not None else None
    new_category = choice_or_exit(ctx, ExpenseCategory, category) if category is not None else None

    try:
        store.update_entry(
            entry_id,
            description=description,
            amount=new_amount,
            category=new_category,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    save_or_warn(store)
    click.echo(f"Updated transaction {entry_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
