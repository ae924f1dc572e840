"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

from rfid_check.reader import PREAMBLE_LINES
from rfid_check.validator import EXPECTED_TAG_COUNT

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "json")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


def _parse_int(name: str, value) -> int:
    """Accept ints and integer strings; reject bools, floats, and other text."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value.strip())
    raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class Config:
    preamble_lines: int = PREAMBLE_LINES
    expected_tag_count: int = EXPECTED_TAG_COUNT
    output: str = "text"
    color: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        for name in ("preamble_lines", "expected_tag_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.preamble_lines < 0:
            raise ValueError(f"preamble_lines must be >= 0, got {self.preamble_lines}")
        if self.expected_tag_count < 1:
            raise ValueError(
                f"expected_tag_count must be >= 1, got {self.expected_tag_count}"
            )
        if self.output not in OUTPUT_FORMATS:
            raise ValueError(f"output must be one of {OUTPUT_FORMATS}, got {self.output!r}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(cli_args=None, yaml_data: dict | None = None) -> Config:
    """Build Config: defaults < YAML < env vars < CLI flags."""
    settings = {
        "preamble_lines": Config.preamble_lines,
        "expected_tag_count": Config.expected_tag_count,
        "output": Config.output,
        "color": Config.color,
        "log_level": Config.log_level,
    }

    for key, value in (yaml_data or {}).items():
        if key in settings:
            settings[key] = value
        else:
            logger.warning("Ignoring unknown config key %r", key)

    env_names = {
        "preamble_lines": "RFID_PREAMBLE_LINES",
        "expected_tag_count": "RFID_EXPECTED_TAG_COUNT",
        "output": "RFID_OUTPUT",
        "color": "RFID_COLOR",
        "log_level": "RFID_LOG_LEVEL",
    }
    for key, env_name in env_names.items():
        if env_name in os.environ:
            settings[key] = os.environ[env_name]

    if cli_args is not None:
        if getattr(cli_args, "preamble_lines", None) is not None:
            settings["preamble_lines"] = cli_args.preamble_lines
        if getattr(cli_args, "expected_count", None) is not None:
            settings["expected_tag_count"] = cli_args.expected_count
        if getattr(cli_args, "output", None):
            settings["output"] = cli_args.output
        if getattr(cli_args, "no_color", False):
            settings["color"] = False
        if getattr(cli_args, "verbose", False):
            settings["log_level"] = "DEBUG"

    return Config(
        preamble_lines=_parse_int("preamble_lines", settings["preamble_lines"]),
        expected_tag_count=_parse_int(
            "expected_tag_count", settings["expected_tag_count"]
        ),
        output=str(settings["output"]).lower(),
        color=_parse_bool(settings["color"]),
        log_level=str(settings["log_level"]).upper(),
    )
