"""Scalar constants for the accounting engine.

All package-level constants with proper type hints using Final.
"""

from typing import Final

from kubecapacity.constants.enums import PodPhase

# ============================================================================
# Size units
# ============================================================================

KI: Final = 1024.0
KB: Final = 1000.0

# Suffix multipliers for size_string_to_bytes(); binary units step by 1024,
# decimal units by 1000.
BINARY_SIZE_SUFFIXES: Final = ("Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi")
DECIMAL_SIZE_SUFFIXES: Final = ("Kb", "Mb", "Gb", "Tb", "Pb", "Eb", "Zb", "Yb")
BYTE_SUFFIX: Final = "B"

# Ladder walked by bytes_to_size_string(); anything larger renders in Yi.
SIZE_DISPLAY_LADDER: Final = ("Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi")
SIZE_DISPLAY_OVERFLOW_UNIT: Final = "Yi"

MILLICORE_SUFFIX: Final = "m"
MILLICORES_PER_CORE: Final = 1000.0

# Usage telemetry CPU suffixes (metrics-server reports nanocores).
CPU_USAGE_DIVISORS: Final = (
    ("n", 1_000_000_000.0),
    ("u", 1_000_000.0),
    ("m", 1_000.0),
)

# ============================================================================
# Attribute paths
# ============================================================================

NODE_CAPACITY_PATH: Final = ("status", "capacity")
NODE_ALLOCATABLE_PATH: Final = ("status", "allocatable")
NAME_PATH: Final = ("metadata", "name")
NAMESPACE_PATH: Final = ("metadata", "namespace")
POD_NODE_NAME_PATH: Final = ("spec", "nodeName")
POD_PHASE_PATH: Final = ("status", "phase")
POD_CONTAINERS_PATH: Final = ("spec", "containers")
CONTAINER_REQUESTS_PATH: Final = ("resources", "requests")
CONTAINER_LIMITS_PATH: Final = ("resources", "limits")
USAGE_PATH: Final = ("usage",)

# ============================================================================
# Cluster
# ============================================================================

DEFAULT_CLUSTER_NAME: Final = "default"
TERMINAL_POD_PHASES: Final = frozenset({PodPhase.SUCCEEDED.value, PodPhase.FAILED.value})

__all__ = [
    "BINARY_SIZE_SUFFIXES",
    "BYTE_SUFFIX",
    "CONTAINER_LIMITS_PATH",
    "CONTAINER_REQUESTS_PATH",
    "CPU_USAGE_DIVISORS",
    "DECIMAL_SIZE_SUFFIXES",
    "DEFAULT_CLUSTER_NAME",
    "KB",
    "KI",
    "MILLICORES_PER_CORE",
    "MILLICORE_SUFFIX",
    "NAMESPACE_PATH",
    "NAME_PATH",
    "NODE_ALLOCATABLE_PATH",
    "NODE_CAPACITY_PATH",
    "POD_CONTAINERS_PATH",
    "POD_NODE_NAME_PATH",
    "POD_PHASE_PATH",
    "SIZE_DISPLAY_LADDER",
    "SIZE_DISPLAY_OVERFLOW_UNIT",
    "TERMINAL_POD_PHASES",
    "USAGE_PATH",
]
