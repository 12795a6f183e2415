"""Utility functions and classes for the accounting engine."""

from kubecapacity.utils.report_generator import SnapshotReportGenerator
from kubecapacity.utils.resource_parser import (
    bytes_to_size_string,
    parse_cpu,
    parse_cpu_usage,
    parse_pod_count,
    parse_quantity,
    size_string_to_bytes,
)
from kubecapacity.utils.utilization import (
    UtilizationSummary,
    effective_ceiling,
    percent_of_allocatable,
    summarize_amount,
    utilization_level,
)

__all__ = [
    # Report
    "SnapshotReportGenerator",
    # Units
    "bytes_to_size_string",
    "parse_cpu",
    "parse_cpu_usage",
    "parse_pod_count",
    "parse_quantity",
    "size_string_to_bytes",
    # Utilization
    "UtilizationSummary",
    "effective_ceiling",
    "percent_of_allocatable",
    "summarize_amount",
    "utilization_level",
]
