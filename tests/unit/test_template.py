"""Tests for Pod materialization from a Pod template."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from kubernetes_asyncio.client import (
    V1ConfigMapVolumeSource,
    V1Container,
    V1EnvVar,
    V1LocalObjectReference,
    V1ObjectMeta,
    V1PodSpec,
    V1PodTemplateSpec,
    V1Volume,
)

from kubedeps.errors import InvalidPodTemplateError, KubeDepsError
from kubedeps.pods.template import generate_pod_from_template_and_namespace

_namespaces = st.from_regex(r"[a-z0-9]([-a-z0-9]{0,30}[a-z0-9])?", fullmatch=True) | st.just("")


def _make_template(
    labels: dict[str, str] | None = None,
    service_account_name: str | None = "builder",
) -> V1PodTemplateSpec:
    return V1PodTemplateSpec(
        metadata=V1ObjectMeta(name="web", labels=labels or {"app": "web"}),
        spec=V1PodSpec(
            containers=[
                V1Container(
                    name="web",
                    image="nginx:1.27",
                    env=[V1EnvVar(name="MODE", value="prod")],
                )
            ],
            volumes=[V1Volume(name="conf", config_map=V1ConfigMapVolumeSource(name="web-conf"))],
            image_pull_secrets=[V1LocalObjectReference(name="regcred")],
            service_account_name=service_account_name,
        ),
    )


class TestGeneratePodFromTemplateAndNamespace:
    """Tests for generate_pod_from_template_and_namespace()."""

    def test_sets_namespace_only(self) -> None:
        pod = generate_pod_from_template_and_namespace(_make_template(), "prod")

        assert pod.metadata.namespace == "prod"
        assert pod.metadata.name is None
        assert pod.metadata.labels is None
        assert pod.metadata.annotations is None

    def test_spec_equals_template_spec(self) -> None:
        template = _make_template()
        pod = generate_pod_from_template_and_namespace(template, "prod")
        assert pod.spec == template.spec

    def test_spec_is_not_aliased(self) -> None:
        template = _make_template()
        pod = generate_pod_from_template_and_namespace(template, "prod")

        assert pod.spec is not template.spec
        assert pod.spec.containers is not template.spec.containers
        assert pod.spec.containers[0] is not template.spec.containers[0]
        assert pod.spec.volumes[0].config_map is not template.spec.volumes[0].config_map

    def test_empty_namespace_accepted(self) -> None:
        pod = generate_pod_from_template_and_namespace(_make_template(), "")
        assert pod.metadata.namespace == ""

    def test_template_without_spec(self) -> None:
        pod = generate_pod_from_template_and_namespace(V1PodTemplateSpec(), "prod")
        assert pod.spec is None
        assert pod.metadata.namespace == "prod"

    def test_none_template_fails_fast(self) -> None:
        with pytest.raises(InvalidPodTemplateError):
            generate_pod_from_template_and_namespace(None, "prod")  # type: ignore[arg-type]

    def test_invalid_template_error_is_value_error(self) -> None:
        assert issubclass(InvalidPodTemplateError, ValueError)
        assert issubclass(InvalidPodTemplateError, KubeDepsError)


class TestMaterializedPodIsolation:
    """Mutating either side never leaks into the other."""

    @settings(max_examples=50)
    @given(namespace=_namespaces, image=st.text(min_size=1, max_size=40))
    def test_mutating_pod_leaves_template_untouched(self, namespace: str, image: str) -> None:
        template = _make_template()
        pod = generate_pod_from_template_and_namespace(template, namespace)

        pod.spec.containers[0].image = image
        pod.spec.containers[0].env.append(V1EnvVar(name="EXTRA", value="1"))
        pod.spec.volumes[0].config_map.name = "other-conf"
        pod.spec.image_pull_secrets.clear()
        pod.spec.service_account_name = "intruder"

        assert template.spec.containers[0].image == "nginx:1.27"
        assert [e.name for e in template.spec.containers[0].env] == ["MODE"]
        assert template.spec.volumes[0].config_map.name == "web-conf"
        assert [s.name for s in template.spec.image_pull_secrets] == ["regcred"]
        assert template.spec.service_account_name == "builder"
        assert template.metadata.namespace is None

    @settings(max_examples=50)
    @given(namespace=_namespaces)
    def test_mutating_template_leaves_pod_untouched(self, namespace: str) -> None:
        template = _make_template()
        pod = generate_pod_from_template_and_namespace(template, namespace)

        template.spec.containers.append(V1Container(name="sidecar", image="busybox"))
        template.spec.volumes[0].config_map.name = "changed"
        template.spec.service_account_name = "changed"

        assert [c.name for c in pod.spec.containers] == ["web"]
        assert pod.spec.volumes[0].config_map.name == "web-conf"
        assert pod.spec.service_account_name == "builder"
        assert pod.metadata.namespace == namespace
