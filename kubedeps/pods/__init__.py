"""Pod analysis helpers.

Submodules:
    conditions    -- Status condition lookup.
    template      -- Pod materialization from a Pod template.
    visitors      -- Walkers over ConfigMap/Secret references in a Pod spec.
    dependencies  -- Reference collectors and the dependency extractor.
"""

from kubedeps.pods.conditions import NOT_FOUND, get_pod_condition, get_pod_condition_from_list
from kubedeps.pods.dependencies import (
    DEFAULT_SERVICE_ACCOUNT,
    get_config_map_names,
    get_dependencies_from_pod_template,
    get_dependencies_from_pod_template_spec,
    get_pvc_names,
    get_secret_names,
    get_service_account_names,
)
from kubedeps.pods.template import generate_pod_from_template_and_namespace
from kubedeps.pods.visitors import (
    ContainerType,
    visit_containers,
    visit_pod_config_map_names,
    visit_pod_secret_names,
)

__all__ = [
    "DEFAULT_SERVICE_ACCOUNT",
    "NOT_FOUND",
    "ContainerType",
    "generate_pod_from_template_and_namespace",
    "get_config_map_names",
    "get_dependencies_from_pod_template",
    "get_dependencies_from_pod_template_spec",
    "get_pod_condition",
    "get_pod_condition_from_list",
    "get_pvc_names",
    "get_secret_names",
    "get_service_account_names",
    "visit_containers",
    "visit_pod_config_map_names",
    "visit_pod_secret_names",
]
