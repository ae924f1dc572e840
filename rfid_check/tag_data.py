"""Tag datum — one ``<code>/<identifier>`` cell from an RFID log line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rfid_check.errors import RecordDecodeError

SERIAL_WIDTH = 4


class StatusCode(Enum):
    """Reader fault codes. Code ``0`` (no error) maps to ``None``."""

    NO_RESPONSE_TO_QUERY = 1
    NO_RESPONSE_TO_COMMAND = 2
    INVENTORY_FAILED = 3
    TAG_ERROR_OTHER = 4
    TAG_ERROR_MEMORY_OVERRUN = 52
    TAG_ERROR_MEMORY_LOCKED = 68
    TAG_ERROR_INSUFFICIENT_POWER = 180
    TAG_ERROR_NON_SPECIFIC = 244

    @property
    def is_tag_error(self) -> bool:
        return self.name.startswith("TAG_ERROR_")


# Exact cell text -> status. Anything not listed is a decode failure.
STATUS_CODES: dict[str, StatusCode | None] = {"0": None}
STATUS_CODES.update({str(code.value): code for code in StatusCode})


def decode_status(raw: str) -> StatusCode | None:
    """Look up a status code cell. Raises RecordDecodeError if unknown."""
    try:
        return STATUS_CODES[raw]
    except KeyError:
        raise RecordDecodeError(f"unknown status code: {raw!r}") from None


@dataclass(frozen=True)
class TagDatum:
    status: StatusCode | None
    identifier: str

    @classmethod
    def from_cell(cls, cell: str) -> TagDatum:
        """Decode ``"<code>/<identifier>"``.

        Raises:
            RecordDecodeError: the cell is not two slash-separated parts or
                the code is not a known status code.
        """
        parts = cell.split("/")
        if len(parts) != 2:
            raise RecordDecodeError(
                f"expected '<code>/<identifier>', got {cell!r}"
            )
        code, identifier = parts
        return cls(status=decode_status(code), identifier=identifier)

    def serial_number(self) -> int | None:
        """Trailing 4-digit serial, or None if the suffix is not numeric."""
        if len(self.identifier) < SERIAL_WIDTH:
            return None
        suffix = self.identifier[-SERIAL_WIDTH:]
        if not (suffix.isascii() and suffix.isdigit()):
            return None
        return int(suffix)

    def __str__(self) -> str:
        return self.identifier
