"""Parsing of hours and DKK amounts typed on the command line."""

import re
from decimal import Decimal, InvalidOperation

_CURRENCY = re.compile(r"(?i)\s*(dkk|kr\.?)\s*")
_DECIMAL_COMMA = re.compile(r"^-?\d+,\d{1,2}$")
_DANISH_THOUSANDS = re.compile(r"^-?\d{1,3}(\.\d{3})+,\d{1,2}$")


def parse_decimal(value_str: str) -> Decimal:
    """Parse a number string into a Decimal.

    Handles:
    - "200", "200.50"
    - "200,50" (Danish decimal comma)
    - "1.250,50" (Danish thousands dot with decimal comma)
    - "1,250.00" (comma as thousands separator)
    - "200 kr", "DKK 200", "200 kr."

    Raises:
        ValueError: If the string cannot be parsed
    """
    if not value_str or not value_str.strip():
        raise ValueError("Empty number string")

    cleaned = _CURRENCY.sub("", value_str.strip())
    if _DANISH_THOUSANDS.match(cleaned):
        cleaned = cleaned.replace(".", "").replace(",", ".")
    elif _DECIMAL_COMMA.match(cleaned):
        cleaned = cleaned.replace(",", ".")
    elif "." in cleaned and cleaned.rfind(",") > cleaned.rfind("."):
        raise ValueError(f"Ambiguous number separators in '{value_str}'")
    else:
        cleaned = cleaned.replace(",", "")

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse number '{value_str}'")
    if not value.is_finite():
        raise ValueError(f"Could not parse number '{value_str}'")
    return value
