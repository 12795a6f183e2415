"""Utilization helpers for the presentation layer.

Percentages are always taken against allocatable. A zero allocatable raises
ZeroAllocatableError; NaN and inf are never returned.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from kubecapacity.constants.defaults import (
    CRITICAL_THRESHOLD_DEFAULT,
    WARNING_THRESHOLD_DEFAULT,
)
from kubecapacity.constants.enums import UtilizationLevel
from kubecapacity.exceptions import ZeroAllocatableError
from kubecapacity.models.core.resources import ResourceAmount
from kubecapacity.models.state.app_settings import AccountingSettings


class UtilizationSummary(BaseModel):
    """Percentages of allocatable for one resource amount."""

    model_config = ConfigDict(frozen=True)

    floor_pct: float
    ceiling_pct: float
    used_pct: float
    ceiling_unbounded: bool
    floor_level: UtilizationLevel
    ceiling_level: UtilizationLevel
    used_level: UtilizationLevel


def percent_of_allocatable(amount: float, allocatable: float) -> float:
    """Return ``amount`` as a percentage of ``allocatable``.

    Raises:
        ZeroAllocatableError: If ``allocatable`` is zero.
    """
    if allocatable == 0:
        raise ZeroAllocatableError(amount)
    return amount / allocatable * 100


def effective_ceiling(resource: ResourceAmount) -> float:
    """Numeric ceiling; an unbounded ceiling counts as everything allocatable."""
    return resource.requested_ceiling.resolve(resource.allocatable)


def utilization_level(
    pct: float,
    warning: float = WARNING_THRESHOLD_DEFAULT,
    critical: float = CRITICAL_THRESHOLD_DEFAULT,
) -> UtilizationLevel:
    """Classify a percentage; levels start strictly above each threshold."""
    if pct > critical:
        return UtilizationLevel.CRITICAL
    if pct > warning:
        return UtilizationLevel.WARNING
    return UtilizationLevel.OK


def summarize_amount(
    resource: ResourceAmount, settings: AccountingSettings | None = None
) -> UtilizationSummary:
    """Compute floor/ceiling/used percentages and their levels.

    Raises:
        ZeroAllocatableError: If the resource has zero allocatable.
    """
    settings = settings or AccountingSettings()
    floor_pct = percent_of_allocatable(resource.requested_floor, resource.allocatable)
    ceiling_pct = percent_of_allocatable(effective_ceiling(resource), resource.allocatable)
    used_pct = percent_of_allocatable(resource.used, resource.allocatable)

    def level(pct: float) -> UtilizationLevel:
        return utilization_level(pct, settings.warning_threshold, settings.critical_threshold)

    return UtilizationSummary(
        floor_pct=floor_pct,
        ceiling_pct=ceiling_pct,
        used_pct=used_pct,
        ceiling_unbounded=resource.requested_ceiling.is_unbounded,
        floor_level=level(floor_pct),
        ceiling_level=level(ceiling_pct),
        used_level=level(used_pct),
    )
