"""Configuration management for templater."""

from .settings import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    Settings,
    get_settings,
    load_settings,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "Settings",
    "get_settings",
    "load_settings",
]
