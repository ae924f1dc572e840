"""Error taxonomy — check findings and fatal ingestion failures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Closed set of validation findings, valued by their report message."""

    EPC_FORMAT_MISMATCH = "epc did not match expected format"
    EPC_OUT_OF_ORDER = "epc was not in order"
    TAG_RANGE_INCOMPLETE = "tag range is incomplete"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class LineRange:
    """Two record positions, previous then current."""

    start: int
    end: int


@dataclass(frozen=True)
class CheckError:
    """One validation finding.

    ``location`` is None, a single zero-based record position, or a
    :class:`LineRange` of two positions. Use the classmethod constructors,
    they fix the location shape for each kind.
    """

    kind: ErrorKind
    location: int | LineRange | None = None
    cause: BaseException | None = None

    @classmethod
    def epc_format_mismatch(cls, line: int, cause: BaseException | None = None) -> CheckError:
        return cls(ErrorKind.EPC_FORMAT_MISMATCH, line, cause)

    @classmethod
    def epc_out_of_order(
        cls, start: int, end: int, cause: BaseException | None = None
    ) -> CheckError:
        return cls(ErrorKind.EPC_OUT_OF_ORDER, LineRange(start, end), cause)

    @classmethod
    def tag_range_incomplete(cls, cause: BaseException | None = None) -> CheckError:
        return cls(ErrorKind.TAG_RANGE_INCOMPLETE, None, cause)

    @property
    def line(self) -> int | None:
        if isinstance(self.location, int):
            return self.location
        return None

    @property
    def line_range(self) -> LineRange | None:
        if isinstance(self.location, LineRange):
            return self.location
        return None

    def __str__(self) -> str:
        return self.kind.message


class RecordDecodeError(ValueError):
    """Raised when a raw row cannot be decoded into a record.

    Aborts the whole run. ``line`` is the zero-based record position when
    known; the underlying error, if any, is chained as ``__cause__``.
    """

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"record {self.line}: {message}"
