"""Input file reading — preamble skip and tab-separated row splitting."""

from __future__ import annotations

import csv
import logging
from itertools import islice

from rfid_check.errors import RecordDecodeError
from rfid_check.record import LogRecord, parse_record

logger = logging.getLogger(__name__)

PREAMBLE_LINES = 16


def read_rows(
    filepath: str, preamble_lines: int = PREAMBLE_LINES
) -> list[tuple[int, list[str]]]:
    """Return (line, fields) pairs for the lines after the preamble.

    ``line`` is the zero-based index of the line counted from the end of the
    preamble, so blank lines, which are dropped, still advance it.

    Raises:
        FileNotFoundError: the file does not exist.
        RecordDecodeError: a line cannot be split, e.g. an oversized field.
    """
    rows = []
    with open(filepath, "r", encoding="utf-8", newline="") as f:
        for line, text in enumerate(islice(f, preamble_lines, None)):
            try:
                fields = next(
                    csv.reader([text], delimiter="\t", quoting=csv.QUOTE_NONE), []
                )
            except csv.Error as exc:
                raise RecordDecodeError(str(exc), line=line) from exc
            if fields:
                rows.append((line, fields))

    logger.info("Read %d row(s) from %s after %d preamble line(s)",
                len(rows), filepath, preamble_lines)
    return rows


def decode_rows(rows: list[tuple[int, list[str]]]) -> list[LogRecord]:
    """Decode every row, failing on the first bad one.

    Raises:
        RecordDecodeError: with ``line`` set to the bad row's line index.
    """
    records = []
    for line, fields in rows:
        try:
            records.append(parse_record(fields, line=line))
        except RecordDecodeError as exc:
            raise RecordDecodeError(str(exc), line=line) from exc
    return records


def load_records(filepath: str, preamble_lines: int = PREAMBLE_LINES) -> list[LogRecord]:
    """Read and decode a whole log file into records."""
    records = decode_rows(read_rows(filepath, preamble_lines))
    passed = sum(1 for r in records if r.passed)
    logger.info("Decoded %d record(s): %d passed, %d failed",
                len(records), passed, len(records) - passed)
    return records
