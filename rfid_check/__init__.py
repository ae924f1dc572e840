"""rfid-log-check — validate RFID tag read logs."""

__version__ = "0.1.0"
