"""Accounting settings models."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from kubecapacity.constants.defaults import (
    CRITICAL_THRESHOLD_DEFAULT,
    EXCLUDE_TERMINATED_PODS_DEFAULT,
    WARNING_THRESHOLD_DEFAULT,
)
from kubecapacity.constants.limits import THRESHOLD_MAX, THRESHOLD_MIN
from kubecapacity.constants.values import DEFAULT_CLUSTER_NAME

logger = logging.getLogger(__name__)


class AccountingSettings(BaseModel):
    """Accounting settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Name stamped on every node and pod record of a snapshot
    cluster_name: str = DEFAULT_CLUSTER_NAME

    # Utilization thresholds (percent of allocatable)
    warning_threshold: float = Field(
        default=WARNING_THRESHOLD_DEFAULT, ge=THRESHOLD_MIN, le=THRESHOLD_MAX
    )
    critical_threshold: float = Field(
        default=CRITICAL_THRESHOLD_DEFAULT, ge=THRESHOLD_MIN, le=THRESHOLD_MAX
    )

    # Skip Succeeded/Failed pods when folding requests into nodes
    exclude_terminated_pods: bool = EXCLUDE_TERMINATED_PODS_DEFAULT

    @model_validator(mode="after")
    def _check_threshold_order(self) -> AccountingSettings:
        if self.critical_threshold < self.warning_threshold:
            raise ValueError(
                f"critical_threshold ({self.critical_threshold}) must not be "
                f"below warning_threshold ({self.warning_threshold})"
            )
        return self


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


def load_settings(path: str | Path | None = None) -> AccountingSettings:
    """Load settings from a YAML file.

    A missing ``path`` (or no path at all) yields the defaults.

    Raises:
        ConfigLoadError: If the file cannot be read, is not a YAML mapping,
            or holds invalid values.
    """
    if path is None:
        return AccountingSettings()

    settings_path = Path(path)
    if not settings_path.exists():
        logger.debug("Settings file %s not found; using defaults", settings_path)
        return AccountingSettings()

    try:
        with settings_path.open(encoding="utf-8") as handle:
            raw = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigLoadError(f"Failed to read settings from {settings_path}: {exc}") from exc

    if raw is None:
        return AccountingSettings()
    if not isinstance(raw, dict):
        raise ConfigLoadError(
            f"Settings file {settings_path} must contain a mapping, got {type(raw).__name__}"
        )

    try:
        return AccountingSettings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc
