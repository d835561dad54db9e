# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the engine configuration file."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from ejs.workspace import (
    CONFIG_FILE_NAME,
    ConfigError,
    EngineConfig,
    load_engine_config,
    save_engine_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    """A default config mirrors the reference engine limits."""
    config = EngineConfig()
    assert config.max_nesting_depth == 128
    assert config.error_message_capacity == 100
    assert config.snippet_length == 10
    assert config.log_level == "WARNING"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty file is treated as a config with every default."""
    assert load_engine_config(_write_config(tmp_path, "")) == EngineConfig()


def test_load_all_fields(tmp_path: Path) -> None:
    """All kebab-case keys are read into the model."""
    content = """\
max-nesting-depth: 32
error-message-capacity: 200
snippet-length: 20
log-level: DEBUG
"""
    config = load_engine_config(_write_config(tmp_path, content))

    assert config.max_nesting_depth == 32
    assert config.error_message_capacity == 200
    assert config.snippet_length == 20
    assert config.log_level == "DEBUG"


def test_save_and_reload(tmp_path: Path) -> None:
    """A saved config reloads to an equal model."""
    config = EngineConfig(max_nesting_depth=64, log_level="INFO")
    path = tmp_path / CONFIG_FILE_NAME

    save_engine_config(config, path)

    assert load_engine_config(path) == config


def test_save_uses_aliases(tmp_path: Path) -> None:
    """The saved YAML uses the hyphenated key names."""
    path = tmp_path / CONFIG_FILE_NAME
    save_engine_config(EngineConfig(), path)

    data = yaml.safe_load(path.read_text(encoding="utf-8"))

    assert data["max-nesting-depth"] == 128
    assert "max_nesting_depth" not in data


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_engine_config(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_engine_config(_write_config(tmp_path, "max-nesting-depth: [unclosed\n"))


def test_non_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_engine_config(_write_config(tmp_path, "- a\n- b\n"))


def test_unknown_key_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_engine_config(_write_config(tmp_path, "max-depth: 10\n"))


@pytest.mark.parametrize(
    "content",
    [
        "max-nesting-depth: 0\n",
        "max-nesting-depth: 193\n",
        "max-nesting-depth: 1000\n",
        "error-message-capacity: 4\n",
        "snippet-length: 0\n",
        "log-level: LOUD\n",
    ],
)
def test_out_of_range_values_rejected(tmp_path: Path, content: str) -> None:
    with pytest.raises(ConfigError):
        load_engine_config(_write_config(tmp_path, content))


def test_largest_nesting_depth_accepted(tmp_path: Path) -> None:
    config = load_engine_config(_write_config(tmp_path, "max-nesting-depth: 192\n"))
    assert config.max_nesting_depth == 192


def test_model_is_frozen() -> None:
    config = EngineConfig()
    with pytest.raises(ValidationError):
        config.max_nesting_depth = 5  # type: ignore[misc]
