"""Building ledger journal entries from register rows."""

from typing import Sequence

from ynab2ledger.domain.entities import (
    ACCOUNT_COLUMN,
    CATEGORY_COLUMN,
    DATE_COLUMN,
    INFLOW_COLUMN,
    MEMO_COLUMN,
    OUTFLOW_COLUMN,
    PAYEE_COLUMN,
    HeaderIndex,
    JournalEntry,
    MappingTable,
    SkipReason,
)
from ynab2ledger.utils.amount_parser import blank_if_zero
from ynab2ledger.utils.date_parser import reorder_date

TRANSFER_MARKER = "Transfer :"


def transfer_target(payee: str) -> str:
    """Return the counterpart account named after the last colon of a transfer payee."""
    return payee.rsplit(":", 1)[-1].strip()


def build_entry(
    fields: Sequence[str], index: HeaderIndex, mapping: MappingTable
) -> JournalEntry | SkipReason:
    """Turn one register row into a journal entry.

    The outflow is posted against the source (a category, or the other
    account of a transfer) and the inflow against the row's own account.
    Only the outflow leg of a transfer is kept; the inflow leg appears as
    its own row in the export and would otherwise be counted twice.

    Args:
        fields: Row values
        index: Column positions for the row
        mapping: Label to ledger account lookups

    Returns:
        The entry, or the reason the row does not produce one
    """
    outflow = blank_if_zero(index.value(fields, OUTFLOW_COLUMN))
    inflow = blank_if_zero(index.value(fields, INFLOW_COLUMN))
    if not outflow and not inflow:
        return SkipReason.ZERO_FLOW

    date = reorder_date(index.value(fields, DATE_COLUMN))
    if date is None:
        return SkipReason.MALFORMED_DATE

    payee = index.value(fields, PAYEE_COLUMN)
    if TRANSFER_MARKER in payee:
        if not outflow:
            return SkipReason.TRANSFER_INFLOW_LEG
        source = mapping.account_for(transfer_target(payee))
    else:
        source = mapping.category_for(index.value(fields, CATEGORY_COLUMN))

    if not source:
        return SkipReason.EMPTY_SOURCE

    return JournalEntry(
        date=date,
        payee=payee,
        memo=index.value(fields, MEMO_COLUMN),
        source=source,
        outflow=outflow,
        destination=mapping.account_for(index.value(fields, ACCOUNT_COLUMN)),
        inflow=inflow,
    )
