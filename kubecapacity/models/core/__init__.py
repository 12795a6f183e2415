"""Core accounting models."""

from kubecapacity.models.core.node_info import NodeInfo, NodeUsageInfo, NUMACellInfo
from kubecapacity.models.core.pod_info import PodInfo
from kubecapacity.models.core.resources import (
    UNBOUNDED,
    WORKLOAD_RESOURCE_KINDS,
    ZERO_CEILING,
    BoundedCeiling,
    Ceiling,
    ResourceAmount,
    ResourceRequest,
    ResourceRequests,
    ResourceSet,
    UnboundedCeiling,
    sum_ceilings,
)
from kubecapacity.models.core.snapshot import ClusterSnapshot

__all__ = [
    "UNBOUNDED",
    "WORKLOAD_RESOURCE_KINDS",
    "ZERO_CEILING",
    "BoundedCeiling",
    "Ceiling",
    "ClusterSnapshot",
    "NUMACellInfo",
    "NodeInfo",
    "NodeUsageInfo",
    "PodInfo",
    "ResourceAmount",
    "ResourceRequest",
    "ResourceRequests",
    "ResourceSet",
    "UnboundedCeiling",
    "sum_ceilings",
]
