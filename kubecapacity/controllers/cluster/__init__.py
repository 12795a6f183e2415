"""Init file for cluster module."""

from kubecapacity.controllers.cluster.aggregator import (
    fold_cluster,
    fold_node,
    group_pods_by_node,
    sum_amounts,
)
from kubecapacity.controllers.cluster.controller import ClusterController
from kubecapacity.controllers.cluster.parsers import NodeParser, PodParser, UsageParser

__all__ = [
    "ClusterController",
    "NodeParser",
    "PodParser",
    "UsageParser",
    "fold_cluster",
    "fold_node",
    "group_pods_by_node",
    "sum_amounts",
]
