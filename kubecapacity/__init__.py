"""Capacity and request accounting for Kubernetes nodes and pods."""

from kubecapacity.constants.enums import ReportFormat, ResourceKind, UtilizationLevel
from kubecapacity.controllers.cluster.controller import ClusterController
from kubecapacity.exceptions import (
    AccountingError,
    DuplicateEntityError,
    ExtractionError,
    MalformedEntityError,
    MalformedQuantityError,
    MissingRequiredFieldError,
    UnknownResourceKindError,
    ZeroAllocatableError,
)
from kubecapacity.models import (
    AccountingSettings,
    BoundedCeiling,
    ClusterSnapshot,
    NodeInfo,
    PodInfo,
    ResourceAmount,
    ResourceSet,
    UnboundedCeiling,
)

__version__ = "0.1.0"

__all__ = [
    "AccountingError",
    "AccountingSettings",
    "DuplicateEntityError",
    "BoundedCeiling",
    "ClusterController",
    "ClusterSnapshot",
    "ExtractionError",
    "MalformedEntityError",
    "MalformedQuantityError",
    "MissingRequiredFieldError",
    "NodeInfo",
    "PodInfo",
    "ReportFormat",
    "ResourceAmount",
    "ResourceKind",
    "ResourceSet",
    "UnboundedCeiling",
    "UnknownResourceKindError",
    "UtilizationLevel",
    "ZeroAllocatableError",
    "__version__",
]
