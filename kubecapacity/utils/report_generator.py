"""Snapshot export to JSON and YAML."""

from __future__ import annotations

import json
import logging
from typing import Any

import yaml

from kubecapacity.constants.enums import ReportFormat
from kubecapacity.models.core.snapshot import ClusterSnapshot

logger = logging.getLogger(__name__)


class SnapshotReportGenerator:
    """Serialize a ClusterSnapshot for machine-readable output."""

    def __init__(self, snapshot: ClusterSnapshot):
        self.snapshot = snapshot

    def to_dict(self) -> dict[str, Any]:
        """Return plain JSON-compatible data, including derived ``reserved``."""
        return self.snapshot.model_dump(mode="json")

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def render(self, fmt: ReportFormat | str) -> str:
        """Render in ``fmt`` ("json" or "yaml").

        Raises:
            ValueError: For any other format.
        """
        try:
            report_format = ReportFormat(fmt)
        except ValueError:
            raise ValueError(
                f"invalid output format {fmt!r}; choose one of "
                f"{', '.join(f.value for f in ReportFormat)}"
            ) from None
        logger.debug(
            "Rendering snapshot of %d nodes as %s",
            len(self.snapshot.nodes),
            report_format.value,
        )
        if report_format is ReportFormat.JSON:
            return self.to_json()
        return self.to_yaml()
