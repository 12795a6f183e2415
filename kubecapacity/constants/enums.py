"""All enum definitions for the accounting engine.

This module consolidates all enumerations used throughout the package.
"""

from enum import Enum

from kubecapacity.exceptions import UnknownResourceKindError

# =============================================================================
# Resource Enums
# =============================================================================

class ResourceKind(Enum):
    """Resource kinds tracked per node and per cluster."""

    CPU = "cpu"
    MEMORY = "memory"
    PODS = "pods"

    @classmethod
    def parse(cls, value: "ResourceKind | str") -> "ResourceKind":
        """Return the member for ``value``.

        Raises:
            UnknownResourceKindError: If ``value`` names no tracked kind.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownResourceKindError(value) from None


class UtilizationLevel(Enum):
    """Threshold level of a utilization percentage."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


# =============================================================================
# Pod Enums
# =============================================================================

class PodPhase(Enum):
    """Pod phase values from Kubernetes API."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


# =============================================================================
# Export Enums
# =============================================================================

class ReportFormat(Enum):
    """Serialization formats for snapshot export."""

    JSON = "json"
    YAML = "yaml"


__all__ = [
    "PodPhase",
    "ReportFormat",
    "ResourceKind",
    "UtilizationLevel",
]
