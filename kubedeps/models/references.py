"""Dependent object reference data structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

CORE_API_VERSION = "v1"


class DependencyKind(StrEnum):
    """Kinds of auxiliary objects a Pod may implicitly depend on."""

    CONFIG_MAP = "ConfigMap"
    SECRET = "Secret"
    SERVICE_ACCOUNT = "ServiceAccount"
    PERSISTENT_VOLUME_CLAIM = "PersistentVolumeClaim"


@dataclass(frozen=True)
class DependentObjectReference:
    """An object that must be propagated alongside a workload.

    Mirrors the configuration API's ``DependentObjectReference`` field for
    field. Two references with identical fields are interchangeable.
    """

    api_version: str
    kind: str
    namespace: str
    name: str

    @property
    def key(self) -> tuple[str, str, str]:
        """Return the (kind, namespace, name) identity of the referenced object."""
        return (self.kind, self.namespace, self.name)

    def to_dict(self) -> dict[str, str]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "namespace": self.namespace,
            "name": self.name,
        }
