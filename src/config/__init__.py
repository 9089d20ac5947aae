"""Configuration for vueindex."""

from config.settings import (
    CONFIG_FILENAME,
    ConfigError,
    FrameworkConfig,
    VueIndexConfig,
    load_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "FrameworkConfig",
    "VueIndexConfig",
    "load_config",
]
