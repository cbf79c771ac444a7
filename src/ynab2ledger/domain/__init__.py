"""Domain layer for ynab2ledger application."""

from ynab2ledger.domain.entities import JournalEntry, MappingTable
from ynab2ledger.domain.errors import (
    DomainError,
    MappingError,
    MissingColumnError,
    ParseError,
)

__all__ = [
    "JournalEntry",
    "MappingTable",
    "DomainError",
    "MappingError",
    "MissingColumnError",
    "ParseError",
]
