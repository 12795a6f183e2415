"""Node parser for cluster controller - parses node data into structured formats."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from kubecapacity.constants.enums import ResourceKind
from kubecapacity.constants.values import (
    DEFAULT_CLUSTER_NAME,
    NAME_PATH,
    NODE_ALLOCATABLE_PATH,
    NODE_CAPACITY_PATH,
)
from kubecapacity.controllers.cluster.parsers.attribute_tree import (
    required_string,
    required_value,
)
from kubecapacity.exceptions import MalformedQuantityError
from kubecapacity.models.core.node_info import NodeInfo
from kubecapacity.models.core.resources import ResourceAmount, ResourceSet
from kubecapacity.utils.resource_parser import parse_quantity


class NodeParser:
    """Parses node data into structured formats."""

    def __init__(self, cluster: str = DEFAULT_CLUSTER_NAME) -> None:
        """Initialize node parser.

        Args:
            cluster: Cluster name stamped on every parsed node
        """
        self._cluster = cluster

    def parse_resource_value(
        self,
        node: Mapping[str, Any],
        category_path: tuple[str, ...],
        kind: ResourceKind | str,
        node_name: str | None = None,
    ) -> float:
        """Parse one quantity such as ``status.capacity.memory``.

        Raises:
            UnknownResourceKindError: If ``kind`` is not cpu, memory or pods.
            MissingRequiredFieldError: If the path is absent.
            MalformedQuantityError: If the value does not parse.
        """
        resource_kind = ResourceKind.parse(kind)
        raw = required_value(node, (*category_path, resource_kind.value), node_name)
        try:
            return parse_quantity(resource_kind, raw)
        except MalformedQuantityError as exc:
            raise MalformedQuantityError(exc.value, exc.kind, node_name) from exc

    def parse_resource_amount(
        self,
        node: Mapping[str, Any],
        kind: ResourceKind | str,
        node_name: str | None = None,
    ) -> ResourceAmount:
        """Parse capacity and allocatable of one resource kind."""
        return ResourceAmount(
            capacity=self.parse_resource_value(node, NODE_CAPACITY_PATH, kind, node_name),
            allocatable=self.parse_resource_value(
                node, NODE_ALLOCATABLE_PATH, kind, node_name
            ),
        )

    def parse_node(self, node: Mapping[str, Any]) -> NodeInfo:
        """Parse a single node into NodeInfo.

        Requested and used amounts start at zero; they are filled in when the
        node's pods are folded in.

        Args:
            node: Raw node dictionary from API

        Returns:
            NodeInfo object.
        """
        node_name = required_string(node, NAME_PATH)
        resources = ResourceSet(
            **{
                kind.value: self.parse_resource_amount(node, kind, node_name)
                for kind in ResourceKind
            }
        )
        return NodeInfo(name=node_name, cluster=self._cluster, resources=resources)

    def parse_nodes(self, nodes: Iterable[Mapping[str, Any]]) -> list[NodeInfo]:
        """Parse every node, failing on the first malformed one."""
        return [self.parse_node(node) for node in nodes]
