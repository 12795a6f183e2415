"""Pod parser for cluster controller - parses pod data into structured formats."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from kubecapacity.constants.enums import ResourceKind
from kubecapacity.constants.values import (
    CONTAINER_LIMITS_PATH,
    CONTAINER_REQUESTS_PATH,
    DEFAULT_CLUSTER_NAME,
    NAME_PATH,
    NAMESPACE_PATH,
    POD_CONTAINERS_PATH,
    POD_NODE_NAME_PATH,
    POD_PHASE_PATH,
)
from kubecapacity.controllers.cluster.parsers.attribute_tree import (
    nested_list,
    nested_mapping,
    optional_string,
    required_string,
)
from kubecapacity.exceptions import (
    MalformedEntityError,
    MalformedQuantityError,
    UnknownResourceKindError,
)
from kubecapacity.models.core.pod_info import PodInfo
from kubecapacity.models.core.resources import (
    UNBOUNDED,
    WORKLOAD_RESOURCE_KINDS,
    BoundedCeiling,
    Ceiling,
    ResourceRequest,
    ResourceRequests,
    sum_ceilings,
)
from kubecapacity.utils.resource_parser import parse_quantity


class PodParser:
    """Parses pod data into structured formats."""

    def __init__(self, cluster: str = DEFAULT_CLUSTER_NAME) -> None:
        """Initialize pod parser.

        Args:
            cluster: Cluster name stamped on every parsed pod
        """
        self._cluster = cluster

    @staticmethod
    def _parse_amount(value: Any, kind: ResourceKind, pod_name: str | None) -> float:
        try:
            return parse_quantity(kind, value)
        except MalformedQuantityError as exc:
            raise MalformedQuantityError(exc.value, exc.kind, pod_name) from exc

    def parse_containers(
        self, pod: Mapping[str, Any], pod_name: str | None = None
    ) -> list[Mapping[str, Any]]:
        """Return ``spec.containers``, checking each entry is a mapping."""
        containers = nested_list(pod, POD_CONTAINERS_PATH, pod_name)
        for index, container in enumerate(containers):
            if not isinstance(container, Mapping):
                raise MalformedEntityError(
                    f"spec.containers[{index}] must be a mapping, "
                    f"got {type(container).__name__}",
                    pod_name,
                )
        return containers

    def parse_request(
        self,
        containers: list[Mapping[str, Any]],
        kind: ResourceKind | str,
        pod_name: str | None = None,
    ) -> ResourceRequest:
        """Sum container requests/limits for one resource kind.

        The floor is the sum of declared requests (containers without one add
        nothing). The ceiling is unbounded as soon as one container declares
        no limit, since that container may consume the whole node. A pod with
        no containers requests nothing.

        Raises:
            UnknownResourceKindError: If ``kind`` is not cpu or memory.
        """
        resource_kind = ResourceKind.parse(kind)
        if resource_kind not in WORKLOAD_RESOURCE_KINDS:
            raise UnknownResourceKindError(resource_kind.value)

        floor = 0.0
        ceilings: list[Ceiling] = []
        for container in containers:
            requests = nested_mapping(container, CONTAINER_REQUESTS_PATH, pod_name)
            limits = nested_mapping(container, CONTAINER_LIMITS_PATH, pod_name)

            requested = requests.get(resource_kind.value)
            if requested is not None:
                floor += self._parse_amount(requested, resource_kind, pod_name)

            limit = limits.get(resource_kind.value)
            if limit is None:
                ceilings.append(UNBOUNDED)
            else:
                ceilings.append(
                    BoundedCeiling(value=self._parse_amount(limit, resource_kind, pod_name))
                )

        return ResourceRequest(floor=floor, ceiling=sum_ceilings(ceilings))

    def parse_pod(self, pod: Mapping[str, Any]) -> PodInfo:
        """Parse a single pod into PodInfo.

        Args:
            pod: Raw pod dictionary from API

        Returns:
            PodInfo object.
        """
        pod_name = required_string(pod, NAME_PATH)
        containers = self.parse_containers(pod, pod_name)
        requests = ResourceRequests(
            **{
                kind.value: self.parse_request(containers, kind, pod_name)
                for kind in WORKLOAD_RESOURCE_KINDS
            }
        )
        return PodInfo(
            name=pod_name,
            namespace=optional_string(pod, NAMESPACE_PATH, pod_name) or "",
            cluster=self._cluster,
            node_name=optional_string(pod, POD_NODE_NAME_PATH, pod_name) or None,
            phase=optional_string(pod, POD_PHASE_PATH, pod_name),
            resource_requests=requests,
        )

    def parse_pods(self, pods: Iterable[Mapping[str, Any]]) -> list[PodInfo]:
        """Parse every pod, failing on the first malformed one."""
        return [self.parse_pod(pod) for pod in pods]
