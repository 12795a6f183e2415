"""Tests for utilization helpers."""

from __future__ import annotations

import pytest

from kubecapacity.constants.enums import UtilizationLevel
from kubecapacity.exceptions import ZeroAllocatableError
from kubecapacity.models.core.resources import (
    UNBOUNDED,
    BoundedCeiling,
    ResourceAmount,
)
from kubecapacity.models.state.app_settings import AccountingSettings
from kubecapacity.utils.utilization import (
    effective_ceiling,
    percent_of_allocatable,
    summarize_amount,
    utilization_level,
)


class TestPercentOfAllocatable:
    def test_percentage(self) -> None:
        assert percent_of_allocatable(2.0, 8.0) == 25.0

    def test_zero_allocatable_is_an_error(self) -> None:
        with pytest.raises(ZeroAllocatableError) as exc_info:
            percent_of_allocatable(1.0, 0.0)
        assert isinstance(exc_info.value, ZeroDivisionError)
        assert exc_info.value.amount == 1.0

    def test_zero_amount_of_zero_allocatable_is_still_an_error(self) -> None:
        with pytest.raises(ZeroAllocatableError):
            percent_of_allocatable(0.0, 0.0)


class TestEffectiveCeiling:
    def test_bounded(self) -> None:
        amount = ResourceAmount(
            capacity=8, allocatable=7, requested_ceiling=BoundedCeiling(value=3)
        )
        assert effective_ceiling(amount) == 3

    def test_unbounded_counts_as_allocatable(self) -> None:
        amount = ResourceAmount(capacity=8, allocatable=7, requested_ceiling=UNBOUNDED)
        assert effective_ceiling(amount) == 7


class TestUtilizationLevel:
    @pytest.mark.parametrize(
        ("pct", "expected"),
        [
            (0.0, UtilizationLevel.OK),
            (75.0, UtilizationLevel.OK),
            (75.5, UtilizationLevel.WARNING),
            (85.0, UtilizationLevel.WARNING),
            (85.01, UtilizationLevel.CRITICAL),
            (150.0, UtilizationLevel.CRITICAL),
        ],
    )
    def test_default_thresholds(self, pct: float, expected: UtilizationLevel) -> None:
        assert utilization_level(pct) is expected

    def test_custom_thresholds(self) -> None:
        assert utilization_level(55.0, warning=50.0, critical=60.0) is UtilizationLevel.WARNING


class TestSummarizeAmount:
    def test_summary(self) -> None:
        amount = ResourceAmount(
            capacity=10,
            allocatable=10,
            requested_floor=5,
            requested_ceiling=UNBOUNDED,
            used=8,
        )

        summary = summarize_amount(amount)

        assert summary.floor_pct == 50.0
        assert summary.ceiling_pct == 100.0
        assert summary.used_pct == 80.0
        assert summary.ceiling_unbounded is True
        assert summary.floor_level is UtilizationLevel.OK
        assert summary.ceiling_level is UtilizationLevel.CRITICAL
        assert summary.used_level is UtilizationLevel.WARNING

    def test_summary_uses_settings_thresholds(self) -> None:
        amount = ResourceAmount(capacity=10, allocatable=10, requested_floor=5)
        settings = AccountingSettings(warning_threshold=30, critical_threshold=40)

        summary = summarize_amount(amount, settings)

        assert summary.floor_level is UtilizationLevel.CRITICAL
        assert summary.ceiling_level is UtilizationLevel.OK

    def test_summary_of_zero_allocatable(self) -> None:
        with pytest.raises(ZeroAllocatableError):
            summarize_amount(ResourceAmount())
