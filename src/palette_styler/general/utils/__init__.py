"""

Does: Provide config loading and topic-gated debug tracing for the palette stack.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Settings, hue-family table, pipeline stages, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_dir,
    temp_data_dir,
)
from .log import (
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Tracing
    "debug",
    "enabled",
    "reload_topics",
]
