"""Configuration loading with layered overrides."""

from gitpick.config.settings import (
    build_command_config,
    build_settings,
    get_config,
    get_config_loaded_sources,
)

__all__ = [
    "get_config",
    "get_config_loaded_sources",
    "build_settings",
    "build_command_config",
]
