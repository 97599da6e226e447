"""Configuration management utilities for Chief.

Settings come from ``CHIEF_*`` variables, read from the process environment
and, at lower precedence, from a ``.env`` file in the working directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values
from dotenv import load_dotenv as _load_dotenv_file

__all__ = [
    "env_var",
    "export_dotenv",
    "get_default_config",
    "load_config",
    "load_dotenv",
    "load_dotenv_config",
    "load_env_config",
    "read_dotenv",
]

logger = logging.getLogger(__name__)

_ENV_TO_CONFIG_KEY = {
    "CHIEF_TOOL": "tool",
    "CHIEF_DOTENV": "dotenv",
    "CHIEF_LOG_LEVEL": "log_level",
}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}

DotenvValues = Dict[str, Optional[str]]


def env_var(var_name: str, default: str) -> str:
    """Return the environment variable ``var_name`` or ``default`` when unset."""
    return os.environ.get(var_name, default)


def read_dotenv(dotenv_path: Optional[Path] = None) -> DotenvValues:
    """Parse ``.env`` once; a missing or unreadable file yields an empty mapping."""
    path = dotenv_path or Path(".env")
    if not path.is_file():
        return {}
    try:
        return dict(dotenv_values(path))
    except OSError as exc:
        logger.debug("could not read %s: %s", path, exc)
        return {}


def export_dotenv(values: Mapping[str, Optional[str]]) -> bool:
    """Copy parsed ``.env`` values into ``os.environ``, keeping existing variables."""
    for key, value in values.items():
        if value is not None and key not in os.environ:
            os.environ[key] = value
    return bool(values)


def load_dotenv(dotenv_path: Optional[Path] = None) -> bool:
    """Load ``.env`` into ``os.environ`` without overriding existing variables.

    Returns True when a file was found and loaded. A missing file is not an error.
    """
    path = dotenv_path or Path(".env")
    if not path.is_file():
        return False
    return _load_dotenv_file(path, override=False)


def load_dotenv_config(values: Mapping[str, Optional[str]]) -> Dict[str, Any]:
    """Pick Chief settings out of parsed ``.env`` values."""
    return _from_mapping(values)


def load_env_config() -> Dict[str, Any]:
    """Load supported ``CHIEF_*`` variables from the current environment."""
    return _from_mapping(os.environ)


def get_default_config() -> Dict[str, Any]:
    """Return a fresh copy of Chief's default configuration."""
    return {
        "tool": "cargo",
        "dotenv": True,
        "log_level": "WARNING",
    }


def load_config(dotenv: Optional[Mapping[str, Optional[str]]] = None) -> Dict[str, Any]:
    """Merge defaults, ``.env`` settings, and the environment, lowest first."""
    config = get_default_config()
    config.update(load_dotenv_config(read_dotenv() if dotenv is None else dotenv))
    config.update(load_env_config())
    config["dotenv"] = _as_bool(config["dotenv"])
    config["tool"] = str(config["tool"] or "cargo")
    return config


def _from_mapping(values: Mapping[str, Optional[str]]) -> Dict[str, Any]:
    return {
        config_key: values[env_key]
        for env_key, config_key in _ENV_TO_CONFIG_KEY.items()
        if values.get(env_key) is not None
    }


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)
