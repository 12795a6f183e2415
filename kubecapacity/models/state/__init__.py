"""Settings models."""

from kubecapacity.models.state.app_settings import (
    AccountingSettings,
    ConfigError,
    ConfigLoadError,
    load_settings,
)

__all__ = [
    "AccountingSettings",
    "ConfigError",
    "ConfigLoadError",
    "load_settings",
]
