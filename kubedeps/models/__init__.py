"""Core data structures for kubedeps."""

from kubedeps.models.conditions import PodConditionType
from kubedeps.models.config import KubeDepsConfig, LogConfig
from kubedeps.models.references import (
    CORE_API_VERSION,
    DependencyKind,
    DependentObjectReference,
)

__all__ = [
    "CORE_API_VERSION",
    "DependencyKind",
    "DependentObjectReference",
    "KubeDepsConfig",
    "LogConfig",
    "PodConditionType",
]
