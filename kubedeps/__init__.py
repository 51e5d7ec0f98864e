"""kubedeps: Pod condition lookup and implicit dependency discovery.

Given a workload's Pod template, kubedeps works out which ConfigMaps,
Secrets, ServiceAccounts and PersistentVolumeClaims must be propagated
alongside it to a member cluster.
"""

from kubedeps.config import load_config
from kubedeps.errors import (
    ConfigError,
    DependencyExtractionError,
    InvalidPodTemplateError,
    KubeDepsError,
)
from kubedeps.models import (
    CORE_API_VERSION,
    DependencyKind,
    DependentObjectReference,
    KubeDepsConfig,
    LogConfig,
    PodConditionType,
)
from kubedeps.observability.logging import get_logger, setup_logging
from kubedeps.pods import (
    DEFAULT_SERVICE_ACCOUNT,
    NOT_FOUND,
    ContainerType,
    generate_pod_from_template_and_namespace,
    get_config_map_names,
    get_dependencies_from_pod_template,
    get_dependencies_from_pod_template_spec,
    get_pod_condition,
    get_pod_condition_from_list,
    get_pvc_names,
    get_secret_names,
    get_service_account_names,
    visit_containers,
    visit_pod_config_map_names,
    visit_pod_secret_names,
)

__version__ = "0.1.0"

__all__ = [
    "CORE_API_VERSION",
    "DEFAULT_SERVICE_ACCOUNT",
    "NOT_FOUND",
    "ConfigError",
    "ContainerType",
    "DependencyExtractionError",
    "DependencyKind",
    "DependentObjectReference",
    "InvalidPodTemplateError",
    "KubeDepsConfig",
    "KubeDepsError",
    "LogConfig",
    "PodConditionType",
    "generate_pod_from_template_and_namespace",
    "get_config_map_names",
    "get_dependencies_from_pod_template",
    "get_dependencies_from_pod_template_spec",
    "get_logger",
    "get_pod_condition",
    "get_pod_condition_from_list",
    "get_pvc_names",
    "get_secret_names",
    "get_service_account_names",
    "load_config",
    "setup_logging",
    "visit_containers",
    "visit_pod_config_map_names",
    "visit_pod_secret_names",
]
