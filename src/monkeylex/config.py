# Copyright 2026 MonkeyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration model and YAML loader for the interactive token printer."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".monkeylex.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class ReplConfig(BaseModel):
    """Settings for the interactive loop.

    Attributes:
        prompt: Text written before each line is read. Empty disables the prompt.
        mode: ``line`` scans each line on its own; ``buffer`` collects lines
            until a blank line and scans them as one unit.
        color: Highlight error tokens in the output.
        log_level: Level name passed to the logging configuration.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    prompt: str = ">> "
    mode: Literal["line", "buffer"] = "line"
    color: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(alias="log-level", default="WARNING")

    def with_overrides(self, **overrides: object) -> "ReplConfig":
        """Return a validated copy with the given fields replaced.

        Raises:
            ConfigError: If an override does not match the schema.
        """
        try:
            return ReplConfig.model_validate({**self.model_dump(), **overrides})
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration override: {exc}") from exc


def load_config(path: Path) -> ReplConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated ReplConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    return parse_config(raw, source_label=str(path))


def parse_config(text: str, source_label: str = "<string>") -> ReplConfig:
    """Parse YAML configuration text into a ReplConfig.

    Raises:
        ConfigError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    try:
        return ReplConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source_label}: {exc}") from exc


def find_config(directory: Path) -> Path | None:
    """Return the configuration file in ``directory`` if one exists."""
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None
