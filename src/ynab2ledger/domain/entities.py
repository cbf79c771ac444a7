"""Domain model entities for ynab2ledger.

These are pure data classes describing a parsed register export, the
label-to-account mapping and the journal entries rendered from it.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

from ynab2ledger.domain.errors import MappingError, MissingColumnError, mapping_section_invalid

WILDCARD = "*"
UNKNOWN_ACCOUNT = "Assets:Unknown"
UNKNOWN_CATEGORY = "Expenses:Unknown"

ACCOUNT_COLUMN = "Account"
DATE_COLUMN = "Date"
PAYEE_COLUMN = "Payee"
CATEGORY_COLUMN = "Category Group/Category"
MEMO_COLUMN = "Memo"
OUTFLOW_COLUMN = "Outflow"
INFLOW_COLUMN = "Inflow"

REQUIRED_COLUMNS = (
    ACCOUNT_COLUMN,
    DATE_COLUMN,
    PAYEE_COLUMN,
    CATEGORY_COLUMN,
    MEMO_COLUMN,
    OUTFLOW_COLUMN,
    INFLOW_COLUMN,
)


def _freeze_section(data: Mapping[Any, Any], section: str) -> Mapping[str, str]:
    raw = data.get(section)
    if raw is None:
        return MappingProxyType({})
    if not isinstance(raw, Mapping):
        raise MappingError(mapping_section_invalid(section))
    return MappingProxyType(
        {str(key): "" if value is None else str(value) for key, value in raw.items()}
    )


def _lookup(table: Mapping[str, str], label: str, default: str) -> str:
    if label in table:
        return table[label]
    if WILDCARD in table:
        return table[WILDCARD]
    return default


@dataclass(frozen=True)
class MappingTable:
    """Label to ledger account lookups for accounts and categories.

    Each lookup tries the exact label, then the ``"*"`` wildcard, then a
    fixed ``Unknown`` account.
    """

    accounts: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    categories: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[Any, Any]]) -> "MappingTable":
        """Build a table from a parsed mapping document.

        Raises:
            MappingError: If a section is present but is not a mapping
        """
        if data is None:
            data = {}
        return cls(
            accounts=_freeze_section(data, "accounts"),
            categories=_freeze_section(data, "categories"),
        )

    def account_for(self, label: str) -> str:
        return _lookup(self.accounts, label, UNKNOWN_ACCOUNT)

    def category_for(self, label: str) -> str:
        return _lookup(self.categories, label, UNKNOWN_CATEGORY)


@dataclass(frozen=True)
class HeaderIndex:
    """Positions of the named columns within a header row."""

    positions: Mapping[str, int]

    @classmethod
    def from_headers(
        cls, headers: Sequence[str], required: Sequence[str] = REQUIRED_COLUMNS
    ) -> "HeaderIndex":
        """Locate every required column by exact name.

        The first occurrence wins when a name repeats.

        Raises:
            MissingColumnError: If any required column is absent
        """
        positions: dict[str, int] = {}
        for name in required:
            if name in headers:
                positions[name] = list(headers).index(name)
        missing = [name for name in required if name not in positions]
        if missing:
            raise MissingColumnError(headers, missing)
        return cls(positions=MappingProxyType(positions))

    @property
    def min_fields(self) -> int:
        """Shortest row that still reaches every indexed column."""
        return max(self.positions.values(), default=-1) + 1

    def __getitem__(self, name: str) -> int:
        return self.positions[name]

    def value(self, fields: Sequence[str], name: str) -> str:
        return fields[self.positions[name]]


@dataclass(frozen=True)
class ParsedRow:
    """One data row and the 1-based input line it started on."""

    line_num: int
    fields: tuple[str, ...]


@dataclass(frozen=True)
class ParsedTable:
    """Header, column positions and data rows of a register export."""

    headers: tuple[str, ...]
    index: HeaderIndex
    rows: tuple[ParsedRow, ...]
    delimiter: str
    used_fallback: bool = False
    skipped_lines: tuple[int, ...] = ()


@dataclass(frozen=True)
class ParseOutcome:
    """Result of one parsing strategy.

    Either carries a table, or the reason the next strategy should be tried.
    """

    table: Optional[ParsedTable] = None
    fallback_reason: Optional[str] = None

    @property
    def needs_fallback(self) -> bool:
        return self.table is None


class SkipReason(str, Enum):
    """Why a row produced no journal entry."""

    ZERO_FLOW = "zero_flow"
    MALFORMED_DATE = "malformed_date"
    TRANSFER_INFLOW_LEG = "transfer_inflow_leg"
    EMPTY_SOURCE = "empty_source"
    INSUFFICIENT_FIELDS = "insufficient_fields"


@dataclass(frozen=True)
class SkippedRow:
    """A row that was passed over without aborting the conversion."""

    line_num: int
    reason: SkipReason


@dataclass(frozen=True)
class JournalEntry:
    """A two-posting ledger transaction.

    Exactly one of ``outflow`` and ``inflow`` is non-blank.
    """

    date: str
    payee: str
    memo: str
    source: str
    outflow: str
    destination: str
    inflow: str

    @property
    def description(self) -> str:
        return f"{self.payee}{self.memo}"

    def render(self) -> str:
        return (
            f"{self.date} {self.description}\n"
            f"    {self.source}  {self.outflow}\n"
            f"    {self.destination}  {self.inflow}"
        )


@dataclass(frozen=True)
class ConversionResult:
    """Entries (oldest first) and bookkeeping from one conversion."""

    entries: tuple[JournalEntry, ...]
    skipped: tuple[SkippedRow, ...]
    delimiter: str
    used_fallback: bool

    @property
    def document(self) -> str:
        """Ledger text: entries separated by a blank line."""
        if not self.entries:
            return ""
        return "\n\n".join(entry.render() for entry in self.entries) + "\n"
