"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid user input, such as an unknown transaction type name."""


class NotFoundError(DomainError):
    """Requested ledger entry or holding does not exist."""


class ParseError(DomainError):
    """A persisted record has a malformed or missing field."""


def entry_not_found(entry_id: int) -> str:
    """Return message for missing ledger entry."""
    return f"Transaction {entry_id} not found"


def holding_not_found(symbol: str) -> str:
    """Return message for missing holding."""
    return f"No holding with symbol '{symbol}'"


def too_few_fields(record: str, expected: int, found: int) -> str:
    """Return message for a record that is missing fields."""
    return f"{record} record has {found} field{'s' if found != 1 else ''}, expected {expected}"


def bad_field(field: str, value: str) -> str:
    """Return message for a field that failed to parse."""
    return f"Invalid {field} '{value}'"
