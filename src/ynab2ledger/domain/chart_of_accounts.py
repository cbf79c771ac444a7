"""Chart of accounts generation from a register export."""

from pathlib import Path

import yaml

from ynab2ledger.domain.csv_reader import read_table
from ynab2ledger.domain.entities import (
    ACCOUNT_COLUMN,
    CATEGORY_COLUMN,
    UNKNOWN_ACCOUNT,
    UNKNOWN_CATEGORY,
    WILDCARD,
    ParsedTable,
)

ACCOUNT_PREFIX = "Assets:Bank:"
CATEGORY_PREFIX = "Expenses:"

_REMOVED_CHARS = (" ", "-", "(", ")", "/", ":")


def sanitize_ledger_name(label: str) -> str:
    """Squeeze an export label into a single ledger account segment."""
    for ch in _REMOVED_CHARS:
        label = label.replace(ch, "")
    return label.replace("&", "And")


def build_chart_of_accounts(table: ParsedTable) -> dict[str, dict[str, str]]:
    """Suggest a mapping for every account and category label in the table.

    Labels are sorted and empty labels are left out. Each section ends with
    a wildcard entry pointing at the matching ``Unknown`` account.
    """
    account_idx = table.index[ACCOUNT_COLUMN]
    category_idx = table.index[CATEGORY_COLUMN]

    accounts = sorted({row.fields[account_idx] for row in table.rows} - {""})
    categories = sorted({row.fields[category_idx] for row in table.rows} - {""})

    account_section = {label: ACCOUNT_PREFIX + sanitize_ledger_name(label) for label in accounts}
    account_section[WILDCARD] = UNKNOWN_ACCOUNT

    category_section = {
        label: CATEGORY_PREFIX + sanitize_ledger_name(label) for label in categories
    }
    category_section[WILDCARD] = UNKNOWN_CATEGORY

    return {"accounts": account_section, "categories": category_section}


def generate_coa(csv_path: str | Path, yaml_path: str | Path) -> dict[str, dict[str, str]]:
    """Write a starter mapping file for the labels found in a register export.

    Args:
        csv_path: Register CSV export
        yaml_path: Destination for the YAML mapping

    Returns:
        The mapping document that was written

    Raises:
        OSError: If a file cannot be read or written
        MissingColumnError: If the Account or category column is missing
        ParseError: If the export cannot be parsed at all
    """
    table = read_table(Path(csv_path).read_bytes(), required=(ACCOUNT_COLUMN, CATEGORY_COLUMN))
    chart = build_chart_of_accounts(table)

    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(chart, f, sort_keys=False, allow_unicode=True, default_flow_style=False)

    return chart
