#!/usr/bin/env python3
"""
Settings
========
Reads vtv/configs/app.yaml (or the file named by $VTV_CONFIG) and
exposes it through dotted lookups such as "matcher.batch_size".
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parent
CONFIG_DIR = PACKAGE_DIR / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
CONFIG_ENV_VAR = "VTV_CONFIG"


def config_path() -> Path:
    """App config in use: $VTV_CONFIG if set, else the bundled app.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(os.path.expanduser(override)) if override else APP_CONFIG_PATH


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    path = config_path()
    if not path.exists():
        raise FileNotFoundError(f"Missing app config: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"App config must be a mapping: {path}")
    return data or {}


def reload_settings() -> None:
    """Drop the cached config so the next lookup re-reads it."""
    load_app_config.cache_clear()


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value, base: Path | None = None) -> Path:
    """Resolve a path relative to the project root (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if not path.is_absolute():
        path = ((base or PROJECT_ROOT) / path).resolve()
    return path


__all__ = [
    "load_app_config",
    "reload_settings",
    "get_setting",
    "resolve_path",
    "config_path",
    "PROJECT_ROOT",
    "APP_CONFIG_PATH",
]
