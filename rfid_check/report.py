"""Report rendering — plain text, ANSI color, and NDJSON."""

from __future__ import annotations

import json
from enum import Enum
from typing import Sequence

from rfid_check.errors import CheckError, LineRange

# ANSI color codes
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
MAGENTA = "\033[35m"
RESET = "\033[0m"

DEFAULT_PREAMBLE_LINES = 16


class Severity(Enum):
    NONE = "none"
    WARNING = "warning"
    CRITICAL = "critical"


SEVERITY_COLORS = {
    Severity.NONE: GREEN,
    Severity.WARNING: YELLOW,
    Severity.CRITICAL: RED,
}


def severity_for(count: int) -> Severity:
    """0 -> NONE, 1-9 -> WARNING, 10+ -> CRITICAL."""
    if count == 0:
        return Severity.NONE
    if count < 10:
        return Severity.WARNING
    return Severity.CRITICAL


def display_line(position: int, preamble_lines: int = DEFAULT_PREAMBLE_LINES) -> int:
    """Turn a zero-based record position into a one-based file line number."""
    return position + preamble_lines + 1


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{RESET}" if color else text


def render_location(
    error: CheckError,
    preamble_lines: int = DEFAULT_PREAMBLE_LINES,
    color: bool = False,
) -> str:
    """`` (line: N)``, `` (lines: A-B)``, or an empty string."""
    location = error.location
    if location is None:
        return ""

    if isinstance(location, LineRange):
        label = "lines"
        value = (f"{display_line(location.start, preamble_lines)}-"
                 f"{display_line(location.end, preamble_lines)}")
    else:
        label = "line"
        value = str(display_line(location, preamble_lines))

    return (_paint(f" ({label}: ", MAGENTA, color)
            + _paint(value, YELLOW, color)
            + _paint(")", MAGENTA, color))


def render_error(
    error: CheckError,
    preamble_lines: int = DEFAULT_PREAMBLE_LINES,
    color: bool = False,
) -> str:
    """Format one finding, e.g. ``Error - epc was not in order (lines: 18-19)``."""
    text = "Error - " + _paint(error.kind.message, RED, color)
    text += render_location(error, preamble_lines, color)
    if error.cause is not None:
        text += f" [caused by: {error.cause}]"
    return text


def render_summary(count: int, color: bool = False) -> str:
    """Total error count, colored by severity tier."""
    return _paint(f"Total errors: {count}", SEVERITY_COLORS[severity_for(count)], color)


def render_error_json(
    error: CheckError,
    preamble_lines: int = DEFAULT_PREAMBLE_LINES,
) -> str:
    """NDJSON — one object per finding."""
    payload = {
        "kind": error.kind.name,
        "message": error.kind.message,
    }
    if error.line is not None:
        payload["line"] = display_line(error.line, preamble_lines)
    elif error.line_range is not None:
        payload["lines"] = [
            display_line(error.line_range.start, preamble_lines),
            display_line(error.line_range.end, preamble_lines),
        ]
    payload["cause"] = str(error.cause) if error.cause is not None else None
    return json.dumps(payload)


def render_summary_json(count: int) -> str:
    return json.dumps({
        "total_errors": count,
        "severity": severity_for(count).value,
    })


def render_report(
    errors: Sequence[CheckError],
    preamble_lines: int = DEFAULT_PREAMBLE_LINES,
    output: str = "text",
    color: bool = False,
) -> list[str]:
    """All findings in order, followed by the summary line."""
    if output == "json":
        lines = [render_error_json(e, preamble_lines) for e in errors]
        lines.append(render_summary_json(len(errors)))
        return lines

    lines = [render_error(e, preamble_lines, color) for e in errors]
    lines.append(render_summary(len(errors), color))
    return lines
