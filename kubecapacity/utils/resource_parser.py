"""Resource parsing utilities for CPU, memory and pod-slot values.

Provides functions to convert Kubernetes quantity strings into canonical units:
- CPU: parsed to cores (float)
- Memory: parsed to bytes (float), and rendered back into compact size strings
- Pods: parsed to a plain count (float)
"""

from __future__ import annotations

import logging
import re

from kubecapacity.constants.enums import ResourceKind
from kubecapacity.constants.values import (
    BINARY_SIZE_SUFFIXES,
    BYTE_SUFFIX,
    CPU_USAGE_DIVISORS,
    DECIMAL_SIZE_SUFFIXES,
    KB,
    KI,
    MILLICORE_SUFFIX,
    MILLICORES_PER_CORE,
    SIZE_DISPLAY_LADDER,
    SIZE_DISPLAY_OVERFLOW_UNIT,
)
from kubecapacity.exceptions import MalformedQuantityError

logger = logging.getLogger(__name__)

# Module-level constants to avoid re-creating on every function call.
# Suffix multipliers for size_string_to_bytes() to convert to bytes.
_SIZE_MULTIPLIERS: dict[str, float] = {
    **{suffix: KI ** power for power, suffix in enumerate(BINARY_SIZE_SUFFIXES, start=1)},
    **{suffix: KB ** power for power, suffix in enumerate(DECIMAL_SIZE_SUFFIXES, start=1)},
    BYTE_SUFFIX: 1.0,
}

# A decimal magnitude is accepted so that bytes_to_size_string() output
# ("1.5Ki", "64.0Mi") parses back.
_SIZE_PATTERN = re.compile(r"([0-9]+(?:\.[0-9]+)?)(.*)", re.DOTALL)
_CPU_PATTERN = re.compile(r"([0-9]+)(m?)")
_COUNT_PATTERN = re.compile(r"[0-9]+")
_CPU_USAGE_PATTERN = re.compile(r"([0-9]+(?:\.[0-9]+)?)([num]?)")


def _quantity_text(value: object, kind: str) -> str:
    """Return a quantity as stripped text, accepting ints from typed payloads."""
    if isinstance(value, bool):
        raise MalformedQuantityError(value, kind)
    if isinstance(value, int):
        return str(value)
    if not isinstance(value, str):
        raise MalformedQuantityError(value, kind)
    return value.strip()


def size_string_to_bytes(value: str | int) -> float:
    """Convert a size string to bytes.

    Handles the following formats:
    - Bare integer: "1021" -> 1021
    - Bytes: "12B" -> 12
    - Binary units: "1Ki" -> 1024, "64Mi" -> 67108864
    - Decimal units: "64Mb" -> 64000000
    - Decimal magnitudes: "1.5Ki" -> 1536

    A numeric prefix followed by an unrecognized suffix is returned unscaled,
    e.g. "5Qx" -> 5.

    Args:
        value: Size string (e.g. "512Mi", "16331276Ki")

    Returns:
        Size in bytes as float.

    Raises:
        MalformedQuantityError: If the value has no leading integer.
    """
    text = _quantity_text(value, ResourceKind.MEMORY.value)
    match = _SIZE_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedQuantityError(value, ResourceKind.MEMORY.value)

    base = float(match.group(1))
    suffix = match.group(2)
    if not suffix:
        return base

    multiplier = _SIZE_MULTIPLIERS.get(suffix)
    if multiplier is None:
        logger.warning(
            "Unrecognized size suffix %r in %r; using %s unscaled", suffix, text, match.group(1)
        )
        return base
    return base * multiplier


def bytes_to_size_string(value: float) -> str:
    """Render a byte count as a short size string.

    Examples: 1021 -> "1021B", 1024 -> "1.0Ki", 67108864 -> "64.0Mi".

    The rendering is lossy: one decimal place is kept once the value reaches
    1Ki, so re-parsing the result only recovers the same order of magnitude.
    """
    if abs(value) < KI:
        return f"{int(value)}B"
    value /= KI
    for unit in SIZE_DISPLAY_LADDER:
        if abs(value) < KI:
            return f"{value:3.1f}{unit}"
        value /= KI
    return f"{value:.1f}{SIZE_DISPLAY_OVERFLOW_UNIT}"


def parse_cpu(value: str | int) -> float:
    """Parse a CPU request, limit or capacity to cores.

    - Whole cores: "2" -> 2.0
    - Millicores: "250m" -> 0.25

    Raises:
        MalformedQuantityError: For anything else (including decimals).
    """
    text = _quantity_text(value, ResourceKind.CPU.value)
    match = _CPU_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedQuantityError(value, ResourceKind.CPU.value)
    amount = float(int(match.group(1)))
    if match.group(2) == MILLICORE_SUFFIX:
        return amount / MILLICORES_PER_CORE
    return amount


def parse_pod_count(value: str | int) -> float:
    """Parse a pod-slot count ("110" -> 110.0)."""
    text = _quantity_text(value, ResourceKind.PODS.value)
    if _COUNT_PATTERN.fullmatch(text) is None:
        raise MalformedQuantityError(value, ResourceKind.PODS.value)
    return float(int(text))


def parse_cpu_usage(value: str | int) -> float:
    """Parse a live CPU usage reading to cores.

    Usage telemetry is finer grained than requests, so decimals and the
    nanocore/microcore suffixes are accepted:
    - Nanocores: "500000000n" -> 0.5
    - Microcores: "500000u" -> 0.5
    - Millicores: "100m" -> 0.1
    - Decimal: "1.5" -> 1.5
    """
    text = _quantity_text(value, ResourceKind.CPU.value)
    match = _CPU_USAGE_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedQuantityError(value, ResourceKind.CPU.value)
    amount = float(match.group(1))
    for suffix, divisor in CPU_USAGE_DIVISORS:
        if match.group(2) == suffix:
            return amount / divisor
    return amount


def parse_quantity(kind: ResourceKind | str, value: str | int) -> float:
    """Parse ``value`` using the grammar of resource ``kind``.

    Raises:
        UnknownResourceKindError: If ``kind`` is not cpu, memory or pods.
        MalformedQuantityError: If ``value`` does not match the grammar.
    """
    resource_kind = ResourceKind.parse(kind)
    if resource_kind is ResourceKind.MEMORY:
        return size_string_to_bytes(value)
    if resource_kind is ResourceKind.CPU:
        return parse_cpu(value)
    return parse_pod_count(value)
