"""Cluster controller for resource accounting.

This module serves as the orchestrator for one accounting snapshot,
delegating to the parsers for decoding and to the aggregator for folding.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from kubecapacity.constants.values import TERMINAL_POD_PHASES
from kubecapacity.controllers.cluster.aggregator import (
    fold_cluster,
    fold_node,
    group_pods_by_node,
)
from kubecapacity.controllers.cluster.parsers import NodeParser, PodParser, UsageParser
from kubecapacity.exceptions import DuplicateEntityError
from kubecapacity.models.core.node_info import NodeInfo, NodeUsageInfo
from kubecapacity.models.core.pod_info import PodInfo
from kubecapacity.models.core.snapshot import ClusterSnapshot
from kubecapacity.models.state.app_settings import AccountingSettings

logger = logging.getLogger(__name__)


class ClusterController:
    """Computes capacity and request accounting for one cluster.

    The controller holds no state between calls: each snapshot is built from
    the entity lists it is handed, so independent snapshots may be computed
    concurrently.
    """

    def __init__(self, settings: AccountingSettings | None = None) -> None:
        self._settings = settings or AccountingSettings()
        self._node_parser = NodeParser(cluster=self._settings.cluster_name)
        self._pod_parser = PodParser(cluster=self._settings.cluster_name)
        self._usage_parser = UsageParser()

    @property
    def settings(self) -> AccountingSettings:
        return self._settings

    def _counts_toward_node(self, pod: PodInfo) -> bool:
        """Return False for finished pods when they are excluded by settings."""
        if not self._settings.exclude_terminated_pods:
            return True
        return pod.phase not in TERMINAL_POD_PHASES

    def compute_snapshot(
        self,
        node_items: Iterable[Mapping[str, Any]],
        pod_items: Iterable[Mapping[str, Any]],
        usage_items: Iterable[Mapping[str, Any]] | None = None,
    ) -> ClusterSnapshot:
        """Decode raw node/pod (and optional NodeMetrics) items and account them.

        Args:
            node_items: Node objects as returned by a list call
            pod_items: Pod objects as returned by a list call
            usage_items: Optional metrics.k8s.io NodeMetrics objects

        Returns:
            ClusterSnapshot with per-node and cluster-total resources.

        Raises:
            ExtractionError: If any entity is malformed; nothing is returned
                for a partially decoded batch.
        """
        nodes = self._node_parser.parse_nodes(node_items)
        pods = self._pod_parser.parse_pods(pod_items)
        usages = (
            self._usage_parser.parse_usages(usage_items) if usage_items is not None else {}
        )
        logger.debug(
            "Parsed %d nodes, %d pods and %d usage readings", len(nodes), len(pods), len(usages)
        )
        return self.build_snapshot(nodes, pods, usages)

    def build_snapshot(
        self,
        nodes: list[NodeInfo],
        pods: list[PodInfo],
        usages: Mapping[str, NodeUsageInfo] | None = None,
    ) -> ClusterSnapshot:
        """Fold already decoded pods (and usage) into nodes and cluster totals.

        Raises:
            DuplicateEntityError: If two nodes share a name.
        """
        usages = usages or {}
        node_names: set[str] = set()
        for node in nodes:
            if node.name in node_names:
                raise DuplicateEntityError("node", node.name)
            node_names.add(node.name)

        counted_pods = [pod for pod in pods if self._counts_toward_node(pod)]
        pods_by_node = group_pods_by_node(counted_pods)
        for node_name in sorted(set(pods_by_node) - node_names):
            logger.warning(
                "%d pods reference node %s, which is not in the node list",
                len(pods_by_node[node_name]),
                node_name,
            )
        for node_name in sorted(set(usages) - node_names):
            logger.debug("Ignoring usage reading for unknown node %s", node_name)

        folded_nodes = [
            fold_node(node, pods_by_node.get(node.name, []), usages.get(node.name))
            for node in nodes
        ]
        unassigned_pods = [
            pod for pod in pods if not pod.node_name or pod.node_name not in node_names
        ]

        logger.debug(
            "Folded %d counted pods into %d nodes (%d unassigned)",
            len(counted_pods),
            len(folded_nodes),
            len(unassigned_pods),
        )
        return ClusterSnapshot(
            cluster=self._settings.cluster_name,
            nodes=folded_nodes,
            pods=pods,
            unassigned_pods=unassigned_pods,
            totals=fold_cluster(folded_nodes),
        )
