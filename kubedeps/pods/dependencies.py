"""Derive the auxiliary objects a Pod depends on.

A Pod can only start in a member cluster once the ConfigMaps, Secrets,
ServiceAccount and PersistentVolumeClaims it references exist there too.
The collectors below find those names; the extractor turns them into
``DependentObjectReference`` entries scoped to the Pod's namespace.
"""

from __future__ import annotations

from kubernetes_asyncio.client import V1Pod, V1PodTemplateSpec  # type: ignore[import-untyped]

from kubedeps.models.references import CORE_API_VERSION, DependencyKind, DependentObjectReference
from kubedeps.observability.logging import get_logger
from kubedeps.pods.template import generate_pod_from_template_and_namespace
from kubedeps.pods.visitors import visit_pod_config_map_names, visit_pod_secret_names

_logger = get_logger("pods.dependencies")

# Present in every namespace, so never propagated.
DEFAULT_SERVICE_ACCOUNT = "default"


def get_config_map_names(pod: V1Pod) -> set[str]:
    result: set[str] = set()

    def _insert(name: str) -> bool:
        result.add(name)
        return True

    visit_pod_config_map_names(pod, _insert)
    return result


def get_secret_names(pod: V1Pod) -> set[str]:
    result: set[str] = set()

    def _insert(name: str) -> bool:
        result.add(name)
        return True

    visit_pod_secret_names(pod, _insert)
    return result


def get_service_account_names(pod: V1Pod) -> set[str]:
    result: set[str] = set()
    if pod.spec is None:
        return result
    name = pod.spec.service_account_name
    if name and name != DEFAULT_SERVICE_ACCOUNT:
        result.add(name)
    return result


def get_pvc_names(pod: V1Pod) -> set[str]:
    result: set[str] = set()
    if pod.spec is None:
        return result
    for volume in pod.spec.volumes or ():
        claim = volume.persistent_volume_claim
        if claim is not None and claim.claim_name:
            result.add(claim.claim_name)
    return result


_COLLECTORS = (
    (DependencyKind.CONFIG_MAP, get_config_map_names),
    (DependencyKind.SECRET, get_secret_names),
    (DependencyKind.SERVICE_ACCOUNT, get_service_account_names),
    (DependencyKind.PERSISTENT_VOLUME_CLAIM, get_pvc_names),
)


def get_dependencies_from_pod_template(pod: V1Pod) -> list[DependentObjectReference]:
    """Return the ConfigMap, Secret, ServiceAccount and PVC references of ``pod``.

    References are grouped by kind in that order and sorted by name within
    a kind. Each (kind, name) pair appears once. A Pod without dependencies
    yields an empty list.

    Raises:
        DependencyExtractionError: reserved for extraction failures; no
            current input triggers it.
    """
    namespace = pod.metadata.namespace if pod.metadata is not None else None
    namespace = namespace or ""

    refs: list[DependentObjectReference] = []
    counts: dict[str, int] = {}
    for kind, collect in _COLLECTORS:
        names = collect(pod)
        counts[kind.value] = len(names)
        refs.extend(
            DependentObjectReference(
                api_version=CORE_API_VERSION,
                kind=kind.value,
                namespace=namespace,
                name=name,
            )
            for name in sorted(names)
        )

    _logger.debug("dependencies_extracted", namespace=namespace, total=len(refs), **counts)
    return refs


def get_dependencies_from_pod_template_spec(
    template: V1PodTemplateSpec, namespace: str
) -> list[DependentObjectReference]:
    """Materialize ``template`` into ``namespace`` and extract its dependencies."""
    pod = generate_pod_from_template_and_namespace(template, namespace)
    return get_dependencies_from_pod_template(pod)
