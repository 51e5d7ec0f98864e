"""Materialize a minimal Pod from a workload's Pod template."""

from __future__ import annotations

import copy

from kubernetes_asyncio.client import V1ObjectMeta, V1Pod, V1PodTemplateSpec  # type: ignore[import-untyped]

from kubedeps.errors import InvalidPodTemplateError
from kubedeps.observability.logging import get_logger

_logger = get_logger("pods.template")


def generate_pod_from_template_and_namespace(template: V1PodTemplateSpec, namespace: str) -> V1Pod:
    """Build a Pod shell carrying ``namespace`` and a deep copy of the template spec.

    Only the namespace is set on the metadata; the result is meant for
    dependency scanning, not for submission to an API server.
    """
    if template is None:
        raise InvalidPodTemplateError("Pod template must not be None")

    pod = V1Pod(metadata=V1ObjectMeta(namespace=namespace))
    pod.spec = copy.deepcopy(template.spec)

    _logger.debug("pod_materialized", namespace=namespace, has_spec=pod.spec is not None)
    return pod
