"""Register to ledger conversion domain service."""

from pathlib import Path

from ynab2ledger.config import ConvertConfig
from ynab2ledger.domain.csv_reader import read_table
from ynab2ledger.domain.entities import (
    ConversionResult,
    JournalEntry,
    MappingTable,
    SkippedRow,
    SkipReason,
)
from ynab2ledger.domain.ledger_entry import build_entry
from ynab2ledger.logging_config import get_logger
from ynab2ledger.utils.mapping_loader import load_mapping

logger = get_logger("conversion")

_WARN_REASONS = {SkipReason.MALFORMED_DATE, SkipReason.EMPTY_SOURCE}


class ConversionService:
    """Service for converting register exports to ledger journals."""

    def __init__(self, mapping: MappingTable):
        """Initialize conversion service.

        Args:
            mapping: Label to ledger account lookups, shared read-only
        """
        self.mapping = mapping

    def convert(self, content: bytes) -> ConversionResult:
        """Convert the raw bytes of a register export.

        The export lists the newest transaction first; the result lists
        entries oldest first.

        Args:
            content: Raw CSV file bytes

        Returns:
            ConversionResult with entries and skipped rows

        Raises:
            MissingColumnError: If a required column is missing
            ParseError: If the file cannot be parsed at all
        """
        table = read_table(content)

        entries: list[JournalEntry] = []
        skipped = [
            SkippedRow(line_num=line_num, reason=SkipReason.INSUFFICIENT_FIELDS)
            for line_num in table.skipped_lines
        ]

        for row in table.rows:
            outcome = build_entry(row.fields, table.index, self.mapping)
            if isinstance(outcome, SkipReason):
                log = logger.warning if outcome in _WARN_REASONS else logger.debug
                log("Skipping line %d: %s", row.line_num, outcome.value)
                skipped.append(SkippedRow(line_num=row.line_num, reason=outcome))
                continue
            entries.append(outcome)

        entries.reverse()
        skipped.sort(key=lambda s: s.line_num)

        return ConversionResult(
            entries=tuple(entries),
            skipped=tuple(skipped),
            delimiter=table.delimiter,
            used_fallback=table.used_fallback,
        )


def log_preview(content: bytes, lines: int) -> None:
    """Log the first few input lines to help diagnose CSV issues."""
    text = content.decode("utf-8", errors="replace")
    for num, line in enumerate(text.splitlines()[:lines], start=1):
        logger.debug("%d: %s", num, line)


def convert_file(config: ConvertConfig) -> ConversionResult:
    """Convert the register export named in ``config`` and write the journal.

    Args:
        config: Input, output and mapping paths for this run

    Returns:
        ConversionResult for the written journal

    Raises:
        OSError: If a file cannot be read or written
        MappingError: If the mapping file is invalid
        MissingColumnError: If a required column is missing
        ParseError: If the file cannot be parsed at all
    """
    mapping = load_mapping(config.mapping_path)

    content = Path(config.input_path).read_bytes()
    log_preview(content, config.preview_lines)

    result = ConversionService(mapping).convert(content)

    Path(config.output_path).write_text(
        result.document, encoding="utf-8", errors="surrogateescape"
    )
    logger.info(
        "Wrote %d entries to %s (%d rows skipped)",
        len(result.entries),
        config.output_path,
        len(result.skipped),
    )
    return result
