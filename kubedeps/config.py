"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from kubedeps.errors import ConfigError
from kubedeps.models.config import KubeDepsConfig, LogConfig

_VALID_LOG_LEVELS = ("debug", "info", "warning", "error")
_VALID_LOG_FORMATS = ("json", "console")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBEDEPS_{key}", default)


def _validate_choice(key: str, value: str, choices: tuple[str, ...]) -> str:
    if value.lower() not in choices:
        raise ConfigError(key, value, f"Must be one of {', '.join(choices)}")
    return value.lower()


def load_config() -> KubeDepsConfig:
    """Load configuration from KUBEDEPS_* environment variables."""
    return KubeDepsConfig(
        log=LogConfig(
            level=_validate_choice("LOG_LEVEL", _env("LOG_LEVEL", "info"), _VALID_LOG_LEVELS),
            format=_validate_choice("LOG_FORMAT", _env("LOG_FORMAT", "json"), _VALID_LOG_FORMATS),
        ),
    )
