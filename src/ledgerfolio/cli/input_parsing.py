"""CLI helpers that parse user input or exit with a CLI error.

These keep error messaging and exit behavior consistent across commands.
"""

from __future__ import annotations

from decimal import Decimal
from enum import IntEnum
from typing import TypeVar

import click

from ledgerfolio.domain.entities import DateStamp
from ledgerfolio.domain.errors import ValidationError
from ledgerfolio.utils.amount_parser import parse_amount
from ledgerfolio.utils.choice_parser import parse_choice
from ledgerfolio.utils.date_parser import parse_date

E = TypeVar("E", bound=IntEnum)


def amount_or_exit(ctx: click.Context, value: str, what: str = "amount") -> Decimal:
    try:
        return parse_amount(value)
    except ValidationError as e:
        click.echo(f"Error: Invalid {what}: {e}", err=True)
        ctx.exit(1)


def date_or_exit(ctx: click.Context, value: str) -> DateStamp:
    try:
        return parse_date(value)
    except ValidationError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def choice_or_exit(ctx: click.Context, enum_type: type[E], value: str) -> E:
    try:
        return parse_choice(enum_type, value)
    except ValidationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
