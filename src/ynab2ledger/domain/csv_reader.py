"""Resilient reading of register CSV exports.

Exports from budgeting applications are not always well-formed CSV: stray
quote characters appear inside unquoted payees and memos, files carry a
byte-order mark, and some locales use ``;`` or tabs as the separator.

Reading happens in stages:

1. ``strip_preamble`` drops the BOM and normalizes line endings.
2. ``detect_delimiter`` guesses the separator from the first line only.
3. ``repair_bare_quotes`` re-quotes fields holding a bare quote character.
4. ``parse_strict`` reads the text with the ``csv`` module.
5. If the strict reader cannot even read the header, ``parse_fallback``
   re-reads the whole file with a hand-written quote-aware splitter.

Known limitations:
    The delimiter is guessed from raw character counts, so a first line
    whose quoted fields contain another candidate separator can be
    mis-detected. The quote repair splits lines on the delimiter without
    tracking quote state, so a quoted field containing the delimiter may be
    re-wrapped incorrectly. Both are best-effort passes.
"""

import csv
import io
from typing import Sequence

from ynab2ledger.domain.entities import (
    REQUIRED_COLUMNS,
    HeaderIndex,
    ParsedRow,
    ParsedTable,
    ParseOutcome,
)
from ynab2ledger.domain.errors import ParseError, not_enough_lines, row_read_failed
from ynab2ledger.logging_config import get_logger

logger = get_logger("csv_reader")

UTF8_BOM = b"\xef\xbb\xbf"
CANDIDATE_DELIMITERS = (",", ";", "\t")
DEFAULT_DELIMITER = ","
QUOTE = '"'


def strip_preamble(content: bytes) -> bytes:
    """Remove a leading UTF-8 byte-order mark and normalize CRLF to LF."""
    if content.startswith(UTF8_BOM):
        content = content[len(UTF8_BOM):]
    return content.replace(b"\r\n", b"\n")


def detect_delimiter(text: str) -> str:
    """Guess the field delimiter from the first line.

    Counts each candidate delimiter and returns the most frequent one.
    Comma wins when the first line is empty, holds no candidate, or when
    several candidates share the highest count.
    """
    first_line = text.split("\n", 1)[0]
    counts = {delimiter: first_line.count(delimiter) for delimiter in CANDIDATE_DELIMITERS}
    best = max(counts.values())
    if best == 0:
        return DEFAULT_DELIMITER
    winners = [delimiter for delimiter, count in counts.items() if count == best]
    if len(winners) > 1:
        return DEFAULT_DELIMITER
    return winners[0]


def repair_bare_quotes(text: str, delimiter: str) -> str:
    """Quote fields that contain a quote character but are not quoted.

    Each line is split naively on the delimiter. A field holding a quote that
    does not both start and end with one is wrapped in quotes, with its
    inner quotes doubled.
    """
    lines = text.split("\n")
    for i, line in enumerate(lines):
        fields = line.split(delimiter)
        for j, value in enumerate(fields):
            if QUOTE in value and not (value.startswith(QUOTE) and value.endswith(QUOTE)):
                fields[j] = QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
        lines[i] = delimiter.join(fields)
    return "\n".join(lines)


def split_line(line: str, delimiter: str) -> list[str]:
    """Split one line into fields, honouring quotes.

    A doubled quote inside a quoted field is a literal quote; the delimiter
    only separates fields outside quotes. Quotes themselves are dropped.
    """
    fields = []
    current = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]

        if ch == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append("".join(current))
    return fields


def _trim_leading(fields: list[str]) -> list[str]:
    # skipinitialspace only drops spaces; tabs must go too
    return [value.lstrip() for value in fields]


def _warn_short_row(line_num: int, mode: str) -> None:
    logger.warning("Skipping line %d due to insufficient fields (%s parser)", line_num, mode)


def parse_strict(
    text: str, delimiter: str, required: Sequence[str] = REQUIRED_COLUMNS
) -> ParseOutcome:
    """Parse the text with the ``csv`` module.

    Quoting is relaxed, rows may vary in length and leading whitespace in
    each field is dropped.

    Returns:
        Outcome with the table, or a fallback reason if the header row
        could not be read

    Raises:
        MissingColumnError: If the header lacks a required column
        ParseError: If a row after the header cannot be read
    """
    reader = csv.reader(
        io.StringIO(text, newline=""),
        delimiter=delimiter,
        skipinitialspace=True,
        strict=False,
    )

    try:
        headers = _trim_leading(next(reader))
    except StopIteration:
        return ParseOutcome(fallback_reason="no header row")
    except csv.Error as e:
        return ParseOutcome(fallback_reason=str(e))

    index = HeaderIndex.from_headers(headers, required)

    rows = []
    skipped = []
    try:
        for raw in reader:
            line_num = reader.line_num
            fields = _trim_leading(raw)
            if not "".join(fields).strip():
                continue
            if len(fields) < index.min_fields:
                _warn_short_row(line_num, "strict")
                skipped.append(line_num)
                continue
            rows.append(ParsedRow(line_num=line_num, fields=tuple(fields)))
    except csv.Error as e:
        raise ParseError(row_read_failed(reader.line_num, str(e))) from e

    return ParseOutcome(
        table=ParsedTable(
            headers=tuple(headers),
            index=index,
            rows=tuple(rows),
            delimiter=delimiter,
            skipped_lines=tuple(skipped),
        )
    )


def parse_fallback(
    text: str, delimiter: str, required: Sequence[str] = REQUIRED_COLUMNS
) -> ParseOutcome:
    """Parse the text line by line with ``split_line``.

    Blank lines are ignored and rows too short to reach every required
    column are skipped with a warning.

    Raises:
        ParseError: If the text has fewer than two lines
        MissingColumnError: If the header lacks a required column
    """
    lines = text.split("\n")
    if len(lines) < 2:
        raise ParseError(not_enough_lines())

    headers = split_line(lines[0], delimiter)
    index = HeaderIndex.from_headers(headers, required)

    rows = []
    skipped = []
    for line_num, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        fields = split_line(line, delimiter)
        if len(fields) < index.min_fields:
            _warn_short_row(line_num, "fallback")
            skipped.append(line_num)
            continue
        rows.append(ParsedRow(line_num=line_num, fields=tuple(fields)))

    return ParseOutcome(
        table=ParsedTable(
            headers=tuple(headers),
            index=index,
            rows=tuple(rows),
            delimiter=delimiter,
            used_fallback=True,
            skipped_lines=tuple(skipped),
        )
    )


def decode(content: bytes) -> str:
    """Decode export bytes after stripping the preamble."""
    return strip_preamble(content).decode("utf-8", errors="surrogateescape")


def read_table(content: bytes, required: Sequence[str] = REQUIRED_COLUMNS) -> ParsedTable:
    """Read a register export into a table.

    Args:
        content: Raw file bytes
        required: Column names that must be present in the header

    Returns:
        ParsedTable with the header index and data rows in file order

    Raises:
        MissingColumnError: If the header lacks a required column
        ParseError: If neither parser can make sense of the text
    """
    text = decode(content)
    delimiter = detect_delimiter(text)
    logger.info("Detected delimiter: %r", delimiter)

    text = repair_bare_quotes(text, delimiter)

    outcome = parse_strict(text, delimiter, required)
    if outcome.needs_fallback:
        logger.warning(
            "Standard CSV parsing failed (%s), trying fallback method", outcome.fallback_reason
        )
        outcome = parse_fallback(text, delimiter, required)

    return outcome.table
