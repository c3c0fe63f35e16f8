"""Utility functions for ledgerfolio."""

from ledgerfolio.utils.date_parser import parse_date
from ledgerfolio.utils.amount_parser import parse_amount
from ledgerfolio.utils.choice_parser import parse_choice

__all__ = ["parse_date", "parse_amount", "parse_choice"]
