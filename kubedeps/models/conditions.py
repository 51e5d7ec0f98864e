"""Pod condition enumerations."""

from __future__ import annotations

from enum import StrEnum


class PodConditionType(StrEnum):
    """Well-known Pod condition types.

    Lookups accept any string, so condition types added by newer Kubernetes
    releases or by readiness gates work without a change here.
    """

    POD_SCHEDULED = "PodScheduled"
    INITIALIZED = "Initialized"
    CONTAINERS_READY = "ContainersReady"
    READY = "Ready"
    POD_READY_TO_START_CONTAINERS = "PodReadyToStartContainers"
    DISRUPTION_TARGET = "DisruptionTarget"
