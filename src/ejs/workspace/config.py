# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Engine configuration model and its YAML file format."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ejs.compiler.parser import DEFAULT_MAX_NESTING_DEPTH, MAX_NESTING_DEPTH_LIMIT
from ejs.compiler.scanner import DEFAULT_MESSAGE_CAPACITY, DEFAULT_SNIPPET_LENGTH

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".ejs.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read, written, or is invalid."""


class EngineConfig(BaseModel):
    """Limits and formatting options applied by an engine.

    Attributes:
        max_nesting_depth: Deepest allowed nesting of parentheses and call
            argument lists.
        error_message_capacity: Size of the message buffer; messages keep at
            most ``error_message_capacity - 1`` characters.
        snippet_length: Number of source bytes quoted in a diagnostic.
        log_level: Level used by the command-line tool.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    max_nesting_depth: int = Field(
        alias="max-nesting-depth", default=DEFAULT_MAX_NESTING_DEPTH, ge=1, le=MAX_NESTING_DEPTH_LIMIT
    )
    error_message_capacity: int = Field(alias="error-message-capacity", default=DEFAULT_MESSAGE_CAPACITY, ge=16)
    snippet_length: int = Field(alias="snippet-length", default=DEFAULT_SNIPPET_LENGTH, ge=1, le=64)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(alias="log-level", default="WARNING")


def load_engine_config(path: Path) -> EngineConfig:
    """Load and validate an engine configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.ejs.yaml`` file.

    Returns:
        A validated EngineConfig instance.

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

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return EngineConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def save_engine_config(config: EngineConfig, path: Path) -> None:
    """Write ``config`` to ``path`` as YAML with sorted keys.

    Raises:
        ConfigError: If the file cannot be written.
    """
    data = config.model_dump(by_alias=True)
    try:
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=True), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot write config file '{path}': {exc}") from exc
