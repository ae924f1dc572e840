"""rfid-log-check — validate RFID tag read logs."""

import sys

from rfid_check.cli import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
