# Copyright 2026 MonkeyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration module."""

import re
from pathlib import Path

import pytest

from monkeylex.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    ReplConfig,
    find_config,
    load_config,
    parse_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a configuration file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    config = ReplConfig()
    assert config.prompt == ">> "
    assert config.mode == "line"
    assert config.color is True
    assert config.log_level == "WARNING"


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, ""))
    assert config == ReplConfig()


def test_full_config(tmp_path: Path) -> None:
    content = """\
prompt: "lex> "
mode: buffer
color: false
log-level: DEBUG
"""
    config = load_config(_write_config(tmp_path, content))
    assert config.prompt == "lex> "
    assert config.mode == "buffer"
    assert config.color is False
    assert config.log_level == "DEBUG"


def test_field_name_accepted_in_place_of_alias() -> None:
    config = parse_config("log_level: ERROR\n")
    assert config.log_level == "ERROR"


def test_find_config_present(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "mode: line\n")
    assert find_config(tmp_path) == path


def test_find_config_absent(tmp_path: Path) -> None:
    assert find_config(tmp_path) is None


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "mode: [unclosed\n"))


def test_non_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        load_config(_write_config(tmp_path, "- line\n- buffer\n"))


def test_unknown_key_rejected() -> None:
    with pytest.raises(ConfigError, match="Invalid configuration"):
        parse_config("history: 100\n")


def test_unknown_mode_rejected() -> None:
    with pytest.raises(ConfigError):
        parse_config("mode: stream\n")


def test_error_mentions_source_label(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "color: [1, 2]\n")
    with pytest.raises(ConfigError, match=re.escape(str(path))):
        load_config(path)


# ###############
# Overrides
# ###############


def test_overrides_replace_fields() -> None:
    config = parse_config("prompt: '? '\nlog-level: INFO\n").with_overrides(mode="buffer", log_level="DEBUG")
    assert config.prompt == "? "
    assert config.mode == "buffer"
    assert config.log_level == "DEBUG"


def test_overrides_leave_original_untouched() -> None:
    config = ReplConfig()
    config.with_overrides(color=False)
    assert config.color is True


def test_overrides_are_validated() -> None:
    with pytest.raises(ConfigError, match="Invalid configuration override"):
        ReplConfig().with_overrides(mode="stream")


def test_overrides_reject_unknown_fields() -> None:
    with pytest.raises(ConfigError):
        ReplConfig().with_overrides(history=100)
