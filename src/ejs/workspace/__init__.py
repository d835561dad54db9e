# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration files for EJS."""

from ejs.workspace.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    EngineConfig,
    load_engine_config,
    save_engine_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "EngineConfig",
    "load_engine_config",
    "save_engine_config",
]
