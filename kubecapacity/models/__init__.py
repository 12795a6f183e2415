"""Typed records produced by the accounting engine."""

from kubecapacity.models.core import (
    UNBOUNDED,
    ZERO_CEILING,
    BoundedCeiling,
    Ceiling,
    ClusterSnapshot,
    NodeInfo,
    NodeUsageInfo,
    NUMACellInfo,
    PodInfo,
    ResourceAmount,
    ResourceRequest,
    ResourceRequests,
    ResourceSet,
    UnboundedCeiling,
    sum_ceilings,
)
from kubecapacity.models.state import AccountingSettings

__all__ = [
    "UNBOUNDED",
    "ZERO_CEILING",
    "AccountingSettings",
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
