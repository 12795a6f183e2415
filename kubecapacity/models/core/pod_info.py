"""Pod models."""

from pydantic import BaseModel, ConfigDict, Field

from kubecapacity.constants.values import DEFAULT_CLUSTER_NAME
from kubecapacity.models.core.resources import ResourceRequests


class PodInfo(BaseModel):
    """A pod and the requests/limits summed over its containers."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = ""
    cluster: str = DEFAULT_CLUSTER_NAME
    node_name: str | None = None  # hosting node, None while unscheduled
    phase: str | None = None
    resource_requests: ResourceRequests = Field(default_factory=ResourceRequests)
