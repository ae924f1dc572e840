"""Command-line entry point — load, validate, and report on an RFID log."""

import logging
import sys
from argparse import ArgumentParser

from rfid_check import __version__
from rfid_check.config import OUTPUT_FORMATS, load_config, load_yaml_config
from rfid_check.errors import RecordDecodeError
from rfid_check.reader import load_records
from rfid_check.report import display_line, render_report
from rfid_check.validator import validate

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="rfid-log-check",
        description="Validate RFID tag read logs: EPC format, order, and range.",
    )
    parser.add_argument(
        "-i", "--input-file",
        required=True,
        metavar="FILE",
        help="The input file to run through",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--preamble-lines",
        type=int,
        default=None,
        help="Header lines to skip before the first record (default: 16)",
    )
    parser.add_argument(
        "--expected-count",
        type=int,
        default=None,
        help="Number of tags a complete run covers (default: 2000)",
    )
    parser.add_argument(
        "--output",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in text output",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run(config, input_file: str) -> int:
    """Load records, run the checks, print the report. Returns an exit code."""
    try:
        records = load_records(input_file, config.preamble_lines)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except RecordDecodeError as exc:
        if exc.line is not None:
            where = f"line {display_line(exc.line, config.preamble_lines)}"
        else:
            where = "input"
        print(f"Error: could not decode {where}: {exc.args[0]}", file=sys.stderr)
        return 1

    errors = validate(records, config.expected_tag_count)

    for line in render_report(
        errors,
        preamble_lines=config.preamble_lines,
        output=config.output,
        color=config.color,
    ):
        print(line)
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [RFID-CHECK] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args, load_yaml_config(args.config))
    except (ValueError, OSError) as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    logging.getLogger().setLevel(config.log_level)
    logger.info("Config: preamble_lines=%d, expected_tag_count=%d, output=%s",
                config.preamble_lines, config.expected_tag_count, config.output)

    return run(config, args.input_file)
