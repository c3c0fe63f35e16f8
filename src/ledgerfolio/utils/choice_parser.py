"""Utility for resolving user-entered enum choices."""

from enum import IntEnum
from typing import TypeVar

from ledgerfolio.domain.errors import ValidationError

E = TypeVar("E", bound=IntEnum)


def parse_choice(enum_type: type[E], choice: str | int) -> E:
    """Resolve a menu number or a name to an enum member.

    Menu numbers are 1-based, so for transaction types "1" is Income.
    Names match the member name or its display label, ignoring case,
    spaces, dashes and underscores ("mutual fund", "MUTUAL_FUND").

    Args:
        enum_type: Enum to resolve into
        choice: Menu number (int or numeric string) or name

    Returns:
        Enum member

    Raises:
        ValidationError: If the choice matches no member
    """
    members = list(enum_type)

    if isinstance(choice, int):
        number = choice
    else:
        try:
            number = int(choice)
        except (ValueError, TypeError):
            number = None

    if number is not None:
        if 1 <= number <= len(members):
            return members[number - 1]
        raise ValidationError(
            f"Choice {number} out of range for {_describe(enum_type)} (1-{len(members)})"
        )

    wanted = _normalize(choice)
    for member in members:
        if wanted in (_normalize(member.name), _normalize(member.label)):
            return member

    options = ", ".join(member.label for member in members)
    raise ValidationError(f"Unknown {_describe(enum_type)} '{choice}'. Choose one of: {options}")


def _normalize(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch.isalnum())


def _describe(enum_type: type[IntEnum]) -> str:
    words = []
    for ch in enum_type.__name__:
        if ch.isupper() and words:
            words.append(" ")
        words.append(ch.lower())
    return "".join(words)
