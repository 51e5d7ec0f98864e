"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass
class KubeDepsConfig:
    """Top-level kubedeps configuration."""

    log: LogConfig = field(default_factory=LogConfig)
