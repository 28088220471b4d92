"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

# "1,200" or "-12,345,678": commas followed by groups of exactly three digits
THOUSANDS_COMMAS = re.compile(r"^-?\d{1,3}(,\d{3})+$")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a numeric value to Decimal.

    Floats go through their shortest string form, so ``0.1`` becomes
    ``Decimal("0.1")`` rather than its binary expansion.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Not a number: {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return amount


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "40"
    - "12.5"
    - "1 200.00"
    - "1,200.00", "1,200" (comma before groups of three digits is a
      thousands separator)
    - "12,5", "0,75" (any other single comma is a decimal separator)
    - "300 руб." / "300 RUB" / "₽300"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency markers and units
    amount_str = re.sub(r"(?i)(руб\.?|rub|gb|гб|[₽$€])", "", amount_str)

    # Remove whitespace used as thousands separator
    amount_str = re.sub(r"\s+", "", amount_str)

    if THOUSANDS_COMMAS.match(amount_str) or "." in amount_str:
        amount_str = amount_str.replace(",", "")
    elif amount_str.count(",") == 1:
        amount_str = amount_str.replace(",", ".")

    try:
        return to_decimal(amount_str)
    except ValueError as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")


def parse_non_negative_amount(amount_str: str) -> Decimal:
    """Parse an amount string and reject negative values.

    Raises:
        ValueError: If the string cannot be parsed or is negative
    """
    amount = parse_amount(amount_str)
    if amount < 0:
        raise ValueError(f"Amount must be >= 0 (got {amount})")
    return amount
