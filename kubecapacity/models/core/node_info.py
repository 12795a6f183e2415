"""Node models."""

from pydantic import BaseModel, ConfigDict, Field

from kubecapacity.constants.values import DEFAULT_CLUSTER_NAME
from kubecapacity.models.core.resources import ResourceSet


class NUMACellInfo(BaseModel):
    """One NUMA cell of a host; not populated from node listings."""

    model_config = ConfigDict(frozen=True)

    resources: ResourceSet = Field(default_factory=ResourceSet)


class NodeInfo(BaseModel):
    """A cluster node and the accounting of its resources.

    ``resources`` covers the whole node regardless of NUMA layout.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    cluster: str = DEFAULT_CLUSTER_NAME
    resources: ResourceSet = Field(default_factory=ResourceSet)
    numa_cells: list[NUMACellInfo] = []


class NodeUsageInfo(BaseModel):
    """Live CPU and memory usage reported for one node by metrics.k8s.io.

    Pod-slot usage is not reported there; it is the count of running pods.
    """

    model_config = ConfigDict(frozen=True)

    node_name: str
    cpu: float = Field(default=0.0, ge=0)  # cores
    memory: float = Field(default=0.0, ge=0)  # bytes
