"""Walkers over every place a Pod spec may name a ConfigMap or Secret.

Each walker calls ``visitor(name)`` once per occurrence, in spec order, and
stops as soon as the visitor returns ``False``. The walkers return ``False``
when they were stopped early and ``True`` when they ran to completion.
Absent optional fields are skipped and empty names are never reported.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Flag, auto
from typing import Any

from kubernetes_asyncio.client import V1Pod, V1PodSpec  # type: ignore[import-untyped]

NameVisitor = Callable[[str], bool]
ContainerVisitor = Callable[[Any, "ContainerType"], bool]


class ContainerType(Flag):
    """Selects which container lists of a Pod spec are walked."""

    INIT_CONTAINERS = auto()
    CONTAINERS = auto()
    EPHEMERAL_CONTAINERS = auto()
    ALL_CONTAINERS = INIT_CONTAINERS | CONTAINERS | EPHEMERAL_CONTAINERS


# Volume sources whose secret is a plain ``secret_name`` string.
_SECRET_NAME_VOLUME_SOURCES = ("azure_file",)

# Volume sources whose secret is a local object reference ``(source, field)``.
_SECRET_REF_VOLUME_SOURCES = (
    ("cephfs", "secret_ref"),
    ("cinder", "secret_ref"),
    ("flex_volume", "secret_ref"),
    ("iscsi", "secret_ref"),
    ("rbd", "secret_ref"),
    ("scale_io", "secret_ref"),
    ("storageos", "secret_ref"),
    ("csi", "node_publish_secret_ref"),
)


def _items(values: Iterable[Any] | None) -> Iterable[Any]:
    return values if values is not None else ()


def _visit(name: str | None, visitor: NameVisitor) -> bool:
    if not name:
        return True
    return visitor(name)


def visit_containers(spec: V1PodSpec | None, mask: ContainerType, visitor: ContainerVisitor) -> bool:
    """Call ``visitor(container, container_type)`` for each container selected by ``mask``."""
    if spec is None:
        return True
    lists = (
        (ContainerType.INIT_CONTAINERS, spec.init_containers),
        (ContainerType.CONTAINERS, spec.containers),
        (ContainerType.EPHEMERAL_CONTAINERS, spec.ephemeral_containers),
    )
    for container_type, containers in lists:
        if not mask & container_type:
            continue
        for container in _items(containers):
            if not visitor(container, container_type):
                return False
    return True


def _visit_container_config_map_names(container: Any, visitor: NameVisitor) -> bool:
    for env_from in _items(container.env_from):
        if env_from.config_map_ref is not None:
            if not _visit(env_from.config_map_ref.name, visitor):
                return False
    for env in _items(container.env):
        value_from = env.value_from
        if value_from is not None and value_from.config_map_key_ref is not None:
            if not _visit(value_from.config_map_key_ref.name, visitor):
                return False
    return True


def _visit_container_secret_names(container: Any, visitor: NameVisitor) -> bool:
    for env_from in _items(container.env_from):
        if env_from.secret_ref is not None:
            if not _visit(env_from.secret_ref.name, visitor):
                return False
    for env in _items(container.env):
        value_from = env.value_from
        if value_from is not None and value_from.secret_key_ref is not None:
            if not _visit(value_from.secret_key_ref.name, visitor):
                return False
    return True


def visit_pod_config_map_names(pod: V1Pod, visitor: NameVisitor) -> bool:
    """Report every ConfigMap name referenced by the Pod.

    Covers env ``configMapKeyRef``, ``envFrom.configMapRef`` of all
    containers, ``configMap`` volumes and projected ``configMap`` sources.
    """
    spec = pod.spec
    if spec is None:
        return True

    if not visit_containers(
        spec,
        ContainerType.ALL_CONTAINERS,
        lambda container, _: _visit_container_config_map_names(container, visitor),
    ):
        return False

    for volume in _items(spec.volumes):
        if volume.config_map is not None:
            if not _visit(volume.config_map.name, visitor):
                return False
        elif volume.projected is not None:
            for source in _items(volume.projected.sources):
                if source.config_map is not None:
                    if not _visit(source.config_map.name, visitor):
                        return False
    return True


def _visit_volume_secret_names(volume: Any, visitor: NameVisitor) -> bool:
    if volume.secret is not None:
        return _visit(volume.secret.secret_name, visitor)
    if volume.projected is not None:
        for source in _items(volume.projected.sources):
            if source.secret is not None:
                if not _visit(source.secret.name, visitor):
                    return False
        return True
    for attr in _SECRET_NAME_VOLUME_SOURCES:
        source = getattr(volume, attr, None)
        if source is not None:
            return _visit(source.secret_name, visitor)
    for attr, ref_field in _SECRET_REF_VOLUME_SOURCES:
        source = getattr(volume, attr, None)
        if source is not None:
            ref = getattr(source, ref_field)
            return ref is None or _visit(ref.name, visitor)
    return True


def visit_pod_secret_names(pod: V1Pod, visitor: NameVisitor) -> bool:
    """Report every Secret name referenced by the Pod.

    Covers ``imagePullSecrets``, env ``secretKeyRef`` and
    ``envFrom.secretRef`` of all containers, ``secret`` volumes, projected
    ``secret`` sources and the secret references of storage plugin volumes
    (azureFile, cephfs, cinder, flexVolume, iscsi, rbd, scaleIO, storageos
    and the CSI node publish secret).
    """
    spec = pod.spec
    if spec is None:
        return True

    for reference in _items(spec.image_pull_secrets):
        if not _visit(reference.name, visitor):
            return False

    if not visit_containers(
        spec,
        ContainerType.ALL_CONTAINERS,
        lambda container, _: _visit_container_secret_names(container, visitor),
    ):
        return False

    for volume in _items(spec.volumes):
        if not _visit_volume_secret_names(volume, visitor):
            return False
    return True
