# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for uiderive."""

from uiderive.workspace.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    ProjectConfig,
    dump_config,
    load_config,
    parse_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ProjectConfig",
    "dump_config",
    "load_config",
    "parse_config",
]
