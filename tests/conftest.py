"""Shared pytest fixtures for the rfid-log-check test suite."""

from __future__ import annotations

import pytest

from rfid_check.record import LogRecord
from rfid_check.tag_data import TagDatum

PREAMBLE = [f"# header line {i}" for i in range(1, 17)]
TID = "0/E28011602000751A"


def epc_for(serial: int, batch: int = 123456) -> str:
    """A well-formed EPC identifier ending in ``serial``."""
    # 000000000 + 2 + batch + 0000 + serial
    return f"0000000002{batch:06d}0000{serial:04d}"


@pytest.fixture()
def make_record():
    """Return a factory building LogRecords from a serial or an identifier."""

    def _make(serial: int | None = None, passed: bool = True, epc: str | None = None) -> LogRecord:
        identifier = epc if epc is not None else epc_for(serial)
        return LogRecord(
            timestamp="2024-03-01 10:15:02",
            passed=passed,
            epc_data=TagDatum(None, identifier),
            tid_data=TagDatum(None, "E28011602000751A"),
        )

    return _make


@pytest.fixture()
def make_run(make_record):
    """Return a factory for a run of passed records with consecutive serials."""

    def _run(count: int, start: int = 0) -> list[LogRecord]:
        return [make_record(start + i) for i in range(count)]

    return _run


@pytest.fixture()
def write_log(tmp_path):
    """Return a function writing a log file (preamble + rows) and its path."""

    def _write(rows: list[list[str]], name: str = "run.txt", preamble=PREAMBLE) -> str:
        path = tmp_path / name
        lines = list(preamble) + ["\t".join(row) for row in rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture()
def passing_rows():
    """Return a factory for PASS rows with consecutive serials."""

    def _rows(count: int, start: int = 0) -> list[list[str]]:
        return [
            [f"2024-03-01 10:15:{i % 60:02d}", "PASS", f"0/{epc_for(start + i)}", TID]
            for i in range(count)
        ]

    return _rows
