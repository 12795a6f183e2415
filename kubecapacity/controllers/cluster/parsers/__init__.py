"""Parsers turning raw API objects into typed records."""

from kubecapacity.controllers.cluster.parsers.node_parser import NodeParser
from kubecapacity.controllers.cluster.parsers.pod_parser import PodParser
from kubecapacity.controllers.cluster.parsers.usage_parser import UsageParser

__all__ = ["NodeParser", "PodParser", "UsageParser"]
