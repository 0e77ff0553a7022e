"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45", "₺99.90", "€10"
    - "1,234.56"
    - "1.234,56" (comma as decimal separator)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove currency symbols and whitespace
    amount_str = re.sub(r"[$€£¥₺\s]", "", amount_str)

    # "1.234,56" and "12,5" use a comma as the decimal separator
    if "," in amount_str and (
        "." not in amount_str or amount_str.rfind(",") > amount_str.rfind(".")
    ):
        if re.search(r",\d{1,2}$", amount_str):
            amount_str = amount_str.replace(".", "").replace(",", ".")

    # Remove thousands separators
    amount_str = amount_str.replace(",", "")

    try:
        return Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
