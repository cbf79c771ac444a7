"""Date reshaping utilities."""

from typing import Optional


def reorder_date(date_str: str) -> Optional[str]:
    """Turn an export date ``mm/dd/yyyy`` into a ledger date ``yyyy/mm/dd``.

    The components are reordered as text and not validated as a calendar
    date, so leading zeros and the year width are preserved.

    Args:
        date_str: Date string from the register export

    Returns:
        The reordered date, or None if the value does not split into
        exactly three ``/``-separated parts
    """
    parts = date_str.split("/")
    if len(parts) != 3:
        return None
    month, day, year = parts
    return f"{year}/{month}/{day}"
