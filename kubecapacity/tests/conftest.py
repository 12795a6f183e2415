"""Shared fixtures building raw API objects for parser and controller tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


def make_node_item(
    name: str = "node-1",
    cpu: str = "4",
    memory: str = "16Gi",
    pods: str = "110",
    allocatable_cpu: str | None = None,
    allocatable_memory: str | None = None,
    allocatable_pods: str | None = None,
) -> dict[str, Any]:
    """Create a node as returned by ``kubectl get nodes -o json``."""
    return {
        "apiVersion": "v1",
        "kind": "Node",
        "metadata": {"name": name, "labels": {"kubernetes.io/hostname": name}},
        "status": {
            "capacity": {"cpu": cpu, "memory": memory, "pods": pods},
            "allocatable": {
                "cpu": allocatable_cpu or cpu,
                "memory": allocatable_memory or memory,
                "pods": allocatable_pods or pods,
            },
        },
    }


def make_container(
    name: str = "app",
    requests: dict[str, str] | None = None,
    limits: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Create a container spec; omitted requests/limits are left out entirely."""
    resources: dict[str, Any] = {}
    if requests is not None:
        resources["requests"] = requests
    if limits is not None:
        resources["limits"] = limits
    return {"name": name, "image": "nginx:1.25", "resources": resources}


def make_pod_item(
    name: str = "pod-1",
    namespace: str = "default",
    node_name: str | None = "node-1",
    containers: list[dict[str, Any]] | None = None,
    phase: str = "Running",
) -> dict[str, Any]:
    """Create a pod as returned by ``kubectl get pods -o json``."""
    spec: dict[str, Any] = {
        "containers": containers if containers is not None else [make_container()],
    }
    if node_name is not None:
        spec["nodeName"] = node_name
    return {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": {"name": name, "namespace": namespace},
        "spec": spec,
        "status": {"phase": phase},
    }


def make_node_metrics(
    name: str = "node-1", cpu: str = "250000000n", memory: str = "1048576Ki"
) -> dict[str, Any]:
    """Create a metrics.k8s.io NodeMetrics item."""
    return {
        "kind": "NodeMetrics",
        "apiVersion": "metrics.k8s.io/v1beta1",
        "metadata": {"name": name},
        "timestamp": "2024-05-01T12:00:00Z",
        "window": "20s",
        "usage": {"cpu": cpu, "memory": memory},
    }


@pytest.fixture
def node_item() -> Callable[..., dict[str, Any]]:
    """Factory for raw node objects."""
    return make_node_item


@pytest.fixture
def pod_item() -> Callable[..., dict[str, Any]]:
    """Factory for raw pod objects."""
    return make_pod_item


@pytest.fixture
def container() -> Callable[..., dict[str, Any]]:
    """Factory for raw container specs."""
    return make_container


@pytest.fixture
def node_metrics() -> Callable[..., dict[str, Any]]:
    """Factory for raw NodeMetrics objects."""
    return make_node_metrics
