"""Amount normalization utilities."""

import re

# Optional currency symbol, a single zero, optional all-zero fraction
_ZERO_AMOUNT_RE = re.compile(r"[$€£¥]?0(\.0+)?")


def blank_if_zero(amount_str: str) -> str:
    """Return an empty string for zero amounts, otherwise the amount unchanged.

    Handles various zero spellings:
    - "0"
    - "0.000"
    - "$0.00"
    - "€0"

    Args:
        amount_str: Amount as exported, possibly currency-prefixed

    Returns:
        "" if the amount is a zero, else ``amount_str`` untouched
    """
    if _ZERO_AMOUNT_RE.fullmatch(amount_str):
        return ""
    return amount_str
