"""Controllers module for the accounting engine.

This module provides the cluster controller and the parsers/aggregator it
delegates to.
"""

from __future__ import annotations

from kubecapacity.controllers.cluster import (
    ClusterController,
    NodeParser,
    PodParser,
    UsageParser,
)

__all__ = [
    "ClusterController",
    "NodeParser",
    "PodParser",
    "UsageParser",
]
