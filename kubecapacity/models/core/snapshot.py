"""Cluster snapshot model."""

from pydantic import BaseModel, ConfigDict, Field

from kubecapacity.constants.values import DEFAULT_CLUSTER_NAME
from kubecapacity.models.core.node_info import NodeInfo
from kubecapacity.models.core.pod_info import PodInfo
from kubecapacity.models.core.resources import ResourceSet


class ClusterSnapshot(BaseModel):
    """One-shot accounting of a cluster's nodes and pods."""

    model_config = ConfigDict(frozen=True)

    cluster: str = DEFAULT_CLUSTER_NAME
    nodes: list[NodeInfo] = []
    pods: list[PodInfo] = []
    # Pods with no host, or whose host is not among ``nodes``.
    unassigned_pods: list[PodInfo] = []
    totals: ResourceSet = Field(default_factory=ResourceSet)

    def get_node(self, name: str) -> NodeInfo | None:
        """Return the node called ``name``, if present."""
        for node in self.nodes:
            if node.name == name:
                return node
        return None
