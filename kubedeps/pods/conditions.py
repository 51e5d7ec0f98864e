"""Pod status condition lookup."""

from __future__ import annotations

from collections.abc import Sequence

from kubernetes_asyncio.client import V1PodCondition, V1PodStatus  # type: ignore[import-untyped]

NOT_FOUND = -1


def get_pod_condition(status: V1PodStatus | None, condition_type: str) -> tuple[int, V1PodCondition | None]:
    """Extract the condition of ``condition_type`` from a Pod status.

    Returns ``(-1, None)`` when the status is absent or holds no such
    condition, otherwise the index of the condition and the condition itself.
    """
    if status is None:
        return NOT_FOUND, None
    return get_pod_condition_from_list(status.conditions, condition_type)


def get_pod_condition_from_list(
    conditions: Sequence[V1PodCondition] | None,
    condition_type: str,
) -> tuple[int, V1PodCondition | None]:
    """Return the index and object of the first condition of ``condition_type``.

    The returned condition is the list entry itself, not a copy.
    Returns ``(-1, None)`` when no entry matches.
    """
    if not conditions:
        return NOT_FOUND, None
    for i, condition in enumerate(conditions):
        if condition.type == condition_type:
            return i, condition
    return NOT_FOUND, None
