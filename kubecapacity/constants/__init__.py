"""Constants module for the accounting engine.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (unit tables, attribute paths)
- limits.py: Validation ranges
- defaults.py: Default values for settings
"""

from kubecapacity.constants.defaults import (
    CRITICAL_THRESHOLD_DEFAULT,
    EXCLUDE_TERMINATED_PODS_DEFAULT,
    WARNING_THRESHOLD_DEFAULT,
)
from kubecapacity.constants.enums import (
    PodPhase,
    ReportFormat,
    ResourceKind,
    UtilizationLevel,
)
from kubecapacity.constants.limits import THRESHOLD_MAX, THRESHOLD_MIN
from kubecapacity.constants.values import (
    DEFAULT_CLUSTER_NAME,
    TERMINAL_POD_PHASES,
)

__all__ = [
    "CRITICAL_THRESHOLD_DEFAULT",
    "DEFAULT_CLUSTER_NAME",
    "EXCLUDE_TERMINATED_PODS_DEFAULT",
    "PodPhase",
    "ReportFormat",
    "ResourceKind",
    "TERMINAL_POD_PHASES",
    "THRESHOLD_MAX",
    "THRESHOLD_MIN",
    "UtilizationLevel",
    "WARNING_THRESHOLD_DEFAULT",
]
