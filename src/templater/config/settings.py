"""User settings.

Templates and snippets live under ``~/dotfiles`` unless
``~/.config/templater/config.yml`` (or the file named by
``$TEMPLATER_CONFIG``) says otherwise::

    templates_dir: ~/work/templates
    snippets_dir: ~/work/snippets
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..errors import ConfigError
from ..utils.filesystem import expand_home_dir

CONFIG_ENV_VAR = "TEMPLATER_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/templater/config.yml")
DEFAULT_TEMPLATES_DIR = Path("~/dotfiles/templates")
DEFAULT_SNIPPETS_DIR = Path("~/dotfiles/snippets")


@dataclass(frozen=True)
class Settings:
    templates_dir: Path
    snippets_dir: Path


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return expand_home_dir(override or DEFAULT_CONFIG_PATH)


def _read_config(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the root")
    return data


def _dir_setting(data: Dict[str, Any], key: str, default: Path) -> Path:
    value = data.get(key)
    if value is None:
        return expand_home_dir(default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string")
    return expand_home_dir(value.strip())


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from ``path`` (or the default location), if it exists."""
    path = path or config_path()
    data = _read_config(path) if path.exists() else {}
    return Settings(
        templates_dir=_dir_setting(data, "templates_dir", DEFAULT_TEMPLATES_DIR),
        snippets_dir=_dir_setting(data, "snippets_dir", DEFAULT_SNIPPETS_DIR),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the user's settings (memoized)."""
    return load_settings()
