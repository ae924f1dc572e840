"""Validation engine — format, order, and range checks over passed records.

Every check looks only at records with ``passed`` set; failed reads are
skipped. Positions reported in findings are the line indexes the reader
recorded after the preamble, so they line up with the input file once the
preamble is added back.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Sequence

from rfid_check.errors import CheckError
from rfid_check.record import LogRecord

logger = logging.getLogger(__name__)

# 000000000 2 dddddd 0000 dddd
EPC_PATTERN = re.compile(r"0{9}2[0-9]{6}0{4}[0-9]{4}")

EXPECTED_TAG_COUNT = 2000


def passed_records(records: Sequence[LogRecord]) -> Iterator[tuple[int, LogRecord]]:
    """Yield (position, record) for passed records, in file order.

    The position is the record's line index from the reader, falling back to
    its index in ``records`` when the record carries none.
    """
    for index, record in enumerate(records):
        if record.passed:
            yield (record.line if record.line is not None else index), record


def _serial_or_zero(record: LogRecord) -> tuple[int, ValueError | None]:
    serial = record.epc_data.serial_number()
    if serial is None:
        return 0, ValueError(
            f"no serial number in epc {record.epc_data.identifier!r}"
        )
    return serial, None


def check_format(records: Sequence[LogRecord]) -> list[CheckError]:
    """One EPC_FORMAT_MISMATCH per passed record whose EPC fails EPC_PATTERN."""
    return [
        CheckError.epc_format_mismatch(position)
        for position, record in passed_records(records)
        if not EPC_PATTERN.fullmatch(record.epc_data.identifier)
    ]


def check_order(records: Sequence[LogRecord]) -> list[CheckError]:
    """Flag consecutive passed records whose serials are not 1 apart.

    Undecodable serials count as 0 and the parse failure is carried as the
    finding's cause. Records that failed the format check still take part.
    """
    errors = []
    previous: tuple[int, LogRecord] | None = None

    for position, record in passed_records(records):
        if previous is not None:
            prev_position, prev_record = previous
            current, current_cause = _serial_or_zero(record)
            before, before_cause = _serial_or_zero(prev_record)
            if abs(current - before) != 1:
                errors.append(CheckError.epc_out_of_order(
                    prev_position, position, cause=current_cause or before_cause,
                ))
        previous = (position, record)

    return errors


def check_range(
    records: Sequence[LogRecord],
    expected_count: int = EXPECTED_TAG_COUNT,
) -> list[CheckError]:
    """At most one TAG_RANGE_INCOMPLETE if the serial span != expected_count.

    The span is ``abs(last - first) + 1`` over the first and last passed
    records. No passed records gives a span of 1.
    """
    passed = [record for _, record in passed_records(records)]
    first, first_cause = (0, None) if not passed else _serial_or_zero(passed[0])
    last, last_cause = (0, None) if not passed else _serial_or_zero(passed[-1])

    span = abs(last - first) + 1
    if span == expected_count:
        return []

    logger.debug("Serial span %d-%d covers %d tags, expected %d",
                 first, last, span, expected_count)
    return [CheckError.tag_range_incomplete(cause=first_cause or last_cause)]


def validate(
    records: Sequence[LogRecord],
    expected_count: int = EXPECTED_TAG_COUNT,
) -> list[CheckError]:
    """Run all three checks; format errors, then order, then range."""
    format_errors = check_format(records)
    order_errors = check_order(records)
    range_errors = check_range(records, expected_count)

    logger.debug(
        "Checked %d records: %d format, %d order, %d range error(s)",
        len(records), len(format_errors), len(order_errors), len(range_errors),
    )
    return format_errors + order_errors + range_errors
