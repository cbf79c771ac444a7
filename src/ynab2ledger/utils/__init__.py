"""Utility functions for ynab2ledger."""

from ynab2ledger.utils.amount_parser import blank_if_zero
from ynab2ledger.utils.date_parser import reorder_date
from ynab2ledger.utils.mapping_loader import load_mapping

__all__ = ["blank_if_zero", "reorder_date", "load_mapping"]
