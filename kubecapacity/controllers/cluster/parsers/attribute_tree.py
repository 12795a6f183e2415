"""Helpers for walking raw API objects (nested dicts and lists).

Every read of untyped entity data goes through these functions, so parsers
only ever see values of the expected shape or an ExtractionError.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kubecapacity.exceptions import MalformedEntityError, MissingRequiredFieldError


def _dotted(path: tuple[str, ...]) -> str:
    return ".".join(path)


def nested_value(item: Any, path: tuple[str, ...], entity: str | None = None) -> Any:
    """Return the value at ``path`` or None when any segment is absent.

    Raises:
        MalformedEntityError: If an intermediate segment is not a mapping.
    """
    current = item
    for depth, key in enumerate(path):
        if not isinstance(current, Mapping):
            raise MalformedEntityError(
                f"{_dotted(path[:depth]) or '<root>'} must be a mapping, "
                f"got {type(current).__name__}",
                entity,
            )
        current = current.get(key)
        if current is None:
            return None
    return current


def required_value(item: Any, path: tuple[str, ...], entity: str | None = None) -> Any:
    """Return the value at ``path``, raising when it is absent."""
    value = nested_value(item, path, entity)
    if value is None:
        raise MissingRequiredFieldError(path, entity)
    return value


def nested_mapping(
    item: Any, path: tuple[str, ...], entity: str | None = None
) -> Mapping[str, Any]:
    """Return the mapping at ``path``; an absent mapping reads as empty."""
    value = nested_value(item, path, entity)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise MalformedEntityError(
            f"{_dotted(path)} must be a mapping, got {type(value).__name__}", entity
        )
    return value


def nested_list(item: Any, path: tuple[str, ...], entity: str | None = None) -> list[Any]:
    """Return the list at ``path``; an absent list reads as empty."""
    value = nested_value(item, path, entity)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedEntityError(
            f"{_dotted(path)} must be a list, got {type(value).__name__}", entity
        )
    return value


def optional_string(
    item: Any, path: tuple[str, ...], entity: str | None = None
) -> str | None:
    """Return the string at ``path`` or None when absent."""
    value = nested_value(item, path, entity)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedEntityError(
            f"{_dotted(path)} must be a string, got {type(value).__name__}", entity
        )
    return value


def required_string(item: Any, path: tuple[str, ...], entity: str | None = None) -> str:
    """Return the non-empty string at ``path``."""
    value = optional_string(item, path, entity)
    if not value:
        raise MissingRequiredFieldError(path, entity)
    return value
