"""Tests for accounting settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from kubecapacity.constants.defaults import (
    CRITICAL_THRESHOLD_DEFAULT,
    WARNING_THRESHOLD_DEFAULT,
)
from kubecapacity.models.state.app_settings import (
    AccountingSettings,
    ConfigError,
    ConfigLoadError,
    load_settings,
)


class TestAccountingSettings:
    def test_defaults(self) -> None:
        settings = AccountingSettings()
        assert settings.cluster_name == "default"
        assert settings.warning_threshold == WARNING_THRESHOLD_DEFAULT
        assert settings.critical_threshold == CRITICAL_THRESHOLD_DEFAULT
        assert settings.exclude_terminated_pods is False

    def test_threshold_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            AccountingSettings(warning_threshold=-1)
        with pytest.raises(ValidationError):
            AccountingSettings(critical_threshold=101)

    def test_critical_below_warning(self) -> None:
        with pytest.raises(ValidationError, match="critical_threshold"):
            AccountingSettings(warning_threshold=90, critical_threshold=80)

    def test_equal_thresholds_are_allowed(self) -> None:
        settings = AccountingSettings(warning_threshold=80, critical_threshold=80)
        assert settings.critical_threshold == 80

    def test_is_frozen(self) -> None:
        settings = AccountingSettings()
        with pytest.raises(ValidationError):
            settings.cluster_name = "other"  # type: ignore[misc]


class TestLoadSettings:
    def test_no_path(self) -> None:
        assert load_settings() == AccountingSettings()

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_settings(tmp_path / "absent.yaml") == AccountingSettings()

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == AccountingSettings()

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            "cluster_name: prod-eu\n"
            "warning_threshold: 60\n"
            "critical_threshold: 90\n"
            "exclude_terminated_pods: true\n",
            encoding="utf-8",
        )
        settings = load_settings(str(path))
        assert settings.cluster_name == "prod-eu"
        assert settings.warning_threshold == 60.0
        assert settings.critical_threshold == 90.0
        assert settings.exclude_terminated_pods is True

    def test_partial_file_keeps_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("cluster_name: staging\n", encoding="utf-8")
        settings = load_settings(path)
        assert settings.cluster_name == "staging"
        assert settings.warning_threshold == WARNING_THRESHOLD_DEFAULT

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("cluster_name: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Failed to read"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- cluster_name\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="must contain a mapping"):
            load_settings(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("warning_threshold: 150\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Invalid settings"):
            load_settings(path)

    def test_load_error_is_config_error(self) -> None:
        assert issubclass(ConfigLoadError, ConfigError)
