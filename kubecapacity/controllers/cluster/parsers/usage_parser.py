"""Usage parser for cluster controller - parses node metrics into structured formats."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from kubecapacity.constants.values import NAME_PATH, USAGE_PATH
from kubecapacity.controllers.cluster.parsers.attribute_tree import (
    nested_mapping,
    required_string,
)
from kubecapacity.exceptions import MalformedQuantityError
from kubecapacity.models.core.node_info import NodeUsageInfo
from kubecapacity.utils.resource_parser import parse_cpu_usage, size_string_to_bytes


class UsageParser:
    """Parses metrics.k8s.io NodeMetrics items into NodeUsageInfo."""

    def parse_usage(self, metrics: Mapping[str, Any]) -> NodeUsageInfo:
        """Parse a single NodeMetrics item.

        Readings absent from ``usage`` are reported as zero.
        """
        node_name = required_string(metrics, NAME_PATH)
        usage = nested_mapping(metrics, USAGE_PATH, node_name)
        try:
            cpu = usage.get("cpu")
            memory = usage.get("memory")
            return NodeUsageInfo(
                node_name=node_name,
                cpu=parse_cpu_usage(cpu) if cpu is not None else 0.0,
                memory=size_string_to_bytes(memory) if memory is not None else 0.0,
            )
        except MalformedQuantityError as exc:
            raise MalformedQuantityError(exc.value, exc.kind, node_name) from exc

    def parse_usages(self, items: Iterable[Mapping[str, Any]]) -> dict[str, NodeUsageInfo]:
        """Parse NodeMetrics items into a lookup keyed by node name."""
        usages: dict[str, NodeUsageInfo] = {}
        for item in items:
            usage = self.parse_usage(item)
            usages[usage.node_name] = usage
        return usages
