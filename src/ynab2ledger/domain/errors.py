"""Shared domain error messages and error types."""

from typing import Sequence


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ParseError(DomainError):
    """The register export could not be read as a table."""


class MissingColumnError(ParseError):
    """A required column is absent from the header row."""

    def __init__(self, headers: Sequence[str], missing: Sequence[str]):
        self.headers = tuple(headers)
        self.missing = tuple(missing)
        super().__init__(missing_columns(self.headers))


class MappingError(DomainError):
    """The account/category mapping document has the wrong shape."""


def missing_columns(headers: Sequence[str]) -> str:
    """Return message for a header row lacking required columns."""
    return f"required column not found in CSV. Headers found: {list(headers)}"


def not_enough_lines() -> str:
    """Return message for input too short to hold a header and a row."""
    return "not enough lines in the CSV file"


def row_read_failed(line_num: int, reason: str) -> str:
    """Return message for a structural failure after the header was read."""
    return f"error reading row at line {line_num}: {reason}"


def mapping_section_invalid(section: str) -> str:
    """Return message for a mapping section that is not a key/value table."""
    return f"mapping section '{section}' must be a mapping of label to account"
