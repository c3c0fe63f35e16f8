"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

from ledgerfolio.domain.errors import ValidationError


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount, quantity or price string into a Decimal.

    Handles various formats:
    - "123.45"
    - "₹123.45" or "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValidationError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValidationError("Empty amount string")

    text = amount_str.strip()

    is_negative = False
    if text.startswith("(") and text.endswith(")"):
        is_negative = True
        text = text[1:-1]

    # Currency symbols and thousands separators
    text = re.sub(r"[$€£¥₹,\s]", "", text)

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValidationError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValidationError(f"Could not parse amount '{amount_str}'")

    return -amount if is_negative else amount
