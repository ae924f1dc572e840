"""Log record — frozen dataclass decoded from one tab-separated row."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from rfid_check.errors import RecordDecodeError
from rfid_check.tag_data import TagDatum

FIELD_NAMES = ("timestamp", "passed", "epc_data", "tid_data")

PASSED_TOKENS = {"PASS": True, "FAIL": False}


@dataclass(frozen=True)
class LogRecord:
    timestamp: str
    passed: bool
    epc_data: TagDatum
    tid_data: TagDatum
    # Line index after the preamble; None when built outside the reader.
    line: int | None = field(default=None, compare=False)


def decode_passed(token: str) -> bool:
    """PASS -> True, FAIL -> False, anything else raises."""
    try:
        return PASSED_TOKENS[token]
    except KeyError:
        raise RecordDecodeError(
            f"expected PASS or FAIL, got {token!r}"
        ) from None


def parse_record(fields: Sequence[str], line: int | None = None) -> LogRecord:
    """Decode exactly four fields into a LogRecord.

    Raises:
        RecordDecodeError: wrong field count, bad PASS/FAIL token, or a
            malformed tag cell.
    """
    if len(fields) != len(FIELD_NAMES):
        raise RecordDecodeError(
            f"expected {len(FIELD_NAMES)} fields "
            f"({', '.join(FIELD_NAMES)}), got {len(fields)}"
        )

    timestamp, passed, epc_cell, tid_cell = fields
    return LogRecord(
        timestamp=timestamp,
        passed=decode_passed(passed),
        epc_data=TagDatum.from_cell(epc_cell),
        tid_data=TagDatum.from_cell(tid_cell),
        line=line,
    )
