"""Tests for the config module."""

from argparse import Namespace

import pytest

from rfid_check.config import (
    LOG_LEVELS,
    Config,
    _parse_bool,
    load_config,
    load_yaml_config,
)

ENV_VARS = [
    "RFID_PREAMBLE_LINES", "RFID_EXPECTED_TAG_COUNT", "RFID_OUTPUT",
    "RFID_COLOR", "RFID_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _args(**overrides) -> Namespace:
    values = {
        "preamble_lines": None,
        "expected_count": None,
        "output": None,
        "no_color": False,
        "verbose": False,
    }
    values.update(overrides)
    return Namespace(**values)


class TestParseBool:
    def test_true_values(self):
        for val in ("true", "True", "TRUE", "1", "yes", " yes ", True):
            assert _parse_bool(val) is True

    def test_false_values(self):
        for val in ("false", "0", "no", "", "random", False):
            assert _parse_bool(val) is False


class TestConfigDefaults:
    def test_defaults(self):
        cfg = Config()
        assert cfg.preamble_lines == 16
        assert cfg.expected_tag_count == 2000
        assert cfg.output == "text"
        assert cfg.color is True
        assert cfg.log_level == "WARNING"

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.preamble_lines = 3

    def test_log_levels(self):
        assert LOG_LEVELS == ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    @pytest.mark.parametrize("kwargs", [
        {"preamble_lines": -1},
        {"expected_tag_count": 0},
        {"output": "xml"},
        {"log_level": "LOUD"},
        {"preamble_lines": True},
        {"expected_tag_count": 2000.0},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            Config(**kwargs)


class TestLoadYamlConfig:
    def test_no_path(self):
        assert load_yaml_config(None) == {}

    def test_missing_file(self, tmp_path):
        assert load_yaml_config(str(tmp_path / "missing.yaml")) == {}

    def test_loads_mapping(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("preamble_lines: 4\ncolor: false\n", encoding="utf-8")
        assert load_yaml_config(str(path)) == {"preamble_lines": 4, "color": False}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml_config(str(path)) == {}

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_yaml_config(str(path))

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("key: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_yaml_config(str(path))


class TestLoadConfig:
    def test_defaults(self):
        assert load_config() == Config()

    def test_yaml_overrides_defaults(self):
        cfg = load_config(yaml_data={"expected_tag_count": 500, "output": "JSON"})
        assert cfg.expected_tag_count == 500
        assert cfg.output == "json"

    def test_unknown_yaml_key_ignored(self):
        assert load_config(yaml_data={"nonsense": 1}) == Config()

    def test_env_overrides_yaml(self, monkeypatch):
        monkeypatch.setenv("RFID_PREAMBLE_LINES", "3")
        monkeypatch.setenv("RFID_COLOR", "no")
        monkeypatch.setenv("RFID_LOG_LEVEL", "info")
        cfg = load_config(yaml_data={"preamble_lines": 8, "color": True})
        assert cfg.preamble_lines == 3
        assert cfg.color is False
        assert cfg.log_level == "INFO"

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("RFID_EXPECTED_TAG_COUNT", "100")
        monkeypatch.setenv("RFID_OUTPUT", "json")
        args = _args(expected_count=50, output="text", no_color=True, verbose=True)
        cfg = load_config(args, {})
        assert cfg.expected_tag_count == 50
        assert cfg.output == "text"
        assert cfg.color is False
        assert cfg.log_level == "DEBUG"

    def test_cli_zero_preamble(self):
        cfg = load_config(_args(preamble_lines=0), {"preamble_lines": 16})
        assert cfg.preamble_lines == 0

    @pytest.mark.parametrize("key", ["preamble_lines", "expected_tag_count"])
    @pytest.mark.parametrize("value", [True, False, 1.5, 16.0, "1.5", None])
    def test_non_integer_yaml_value_raises(self, key, value):
        with pytest.raises(ValueError):
            load_config(yaml_data={key: value})

    def test_integer_string_accepted(self):
        assert load_config(yaml_data={"preamble_lines": " 4 "}).preamble_lines == 4

    def test_bad_env_value_raises(self, monkeypatch):
        monkeypatch.setenv("RFID_EXPECTED_TAG_COUNT", "lots")
        with pytest.raises(ValueError):
            load_config()
