"""Exception hierarchy for kubedeps."""

from __future__ import annotations


class KubeDepsError(Exception):
    """Base class for every error raised by kubedeps."""


class InvalidPodTemplateError(KubeDepsError, ValueError):
    """Raised when a Pod cannot be materialized because no template was given."""


class DependencyExtractionError(KubeDepsError):
    """Raised when dependencies cannot be derived from a Pod.

    Part of the extractor's contract so callers can handle it, although no
    current code path raises it.
    """


class ConfigError(KubeDepsError, ValueError):
    """Raised when a KUBEDEPS_* environment variable holds an invalid value."""

    def __init__(self, key: str, value: str, detail: str) -> None:
        super().__init__(f"Invalid value for KUBEDEPS_{key}: {value!r}. {detail}")
        self.key = key
        self.value = value
