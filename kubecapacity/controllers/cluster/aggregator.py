"""Folds pod requests into nodes and node amounts into cluster totals.

Grouping (pods indexed by host) and folding are separate steps so each can be
exercised on its own. Every fold returns new records; inputs are never
modified.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence

from kubecapacity.constants.enums import PodPhase, ResourceKind
from kubecapacity.models.core.node_info import NodeInfo, NodeUsageInfo
from kubecapacity.models.core.pod_info import PodInfo
from kubecapacity.models.core.resources import (
    WORKLOAD_RESOURCE_KINDS,
    BoundedCeiling,
    ResourceAmount,
    ResourceSet,
    sum_ceilings,
)

logger = logging.getLogger(__name__)


def group_pods_by_node(pods: Iterable[PodInfo]) -> dict[str, list[PodInfo]]:
    """Index pods by the name of their hosting node.

    Unscheduled pods (no node name) are left out.
    """
    pods_by_node: dict[str, list[PodInfo]] = defaultdict(list)
    for pod in pods:
        if not pod.node_name:
            continue
        pods_by_node[pod.node_name].append(pod)
    return dict(pods_by_node)


def fold_node(
    node: NodeInfo,
    pods: Sequence[PodInfo],
    usage: NodeUsageInfo | None = None,
) -> NodeInfo:
    """Return ``node`` with the requests of its pods and its live usage.

    CPU and memory floors are plain sums; ceilings follow the ceiling algebra
    so one unlimited pod makes the node ceiling unbounded. Pod slots are
    counted: each pod occupies exactly one, so that ceiling stays bounded,
    and the slots in use are the pods in the Running phase.
    A node with no pods requests zero of everything.
    """
    resources = node.resources
    updates: dict[str, ResourceAmount] = {}

    for kind in WORKLOAD_RESOURCE_KINDS:
        requests = [pod.resource_requests[kind] for pod in pods]
        updates[kind.value] = resources[kind].model_copy(
            update={
                "requested_floor": sum((request.floor for request in requests), 0.0),
                "requested_ceiling": sum_ceilings(request.ceiling for request in requests),
                "used": getattr(usage, kind.value) if usage is not None else 0.0,
            }
        )

    pod_count = float(len(pods))
    running = float(sum(1 for pod in pods if pod.phase == PodPhase.RUNNING.value))
    updates[ResourceKind.PODS.value] = resources.pods.model_copy(
        update={
            "requested_floor": pod_count,
            "requested_ceiling": BoundedCeiling(value=pod_count),
            "used": running,
        }
    )

    logger.debug("Folded %d pods (%d running) into node %s", len(pods), running, node.name)
    return node.model_copy(update={"resources": resources.model_copy(update=updates)})


def sum_amounts(amounts: Iterable[ResourceAmount]) -> ResourceAmount:
    """Element-wise sum of resource amounts of one kind."""
    amounts = list(amounts)
    return ResourceAmount(
        capacity=sum((amount.capacity for amount in amounts), 0.0),
        allocatable=sum((amount.allocatable for amount in amounts), 0.0),
        requested_floor=sum((amount.requested_floor for amount in amounts), 0.0),
        requested_ceiling=sum_ceilings(amount.requested_ceiling for amount in amounts),
        used=sum((amount.used for amount in amounts), 0.0),
    )


def fold_cluster(nodes: Sequence[NodeInfo]) -> ResourceSet:
    """Sum node resources per kind into cluster totals.

    An empty node list yields all-zero totals with bounded zero ceilings.
    """
    return ResourceSet(
        **{
            kind.value: sum_amounts(node.resources[kind] for node in nodes)
            for kind in ResourceKind
        }
    )
