"""Tests for usage parser."""

from __future__ import annotations

import pytest

from kubecapacity.controllers.cluster.parsers.usage_parser import UsageParser
from kubecapacity.exceptions import MalformedQuantityError, MissingRequiredFieldError


class TestUsageParser:
    """Tests for UsageParser class."""

    @pytest.fixture
    def parser(self) -> UsageParser:
        """Create UsageParser instance."""
        return UsageParser()

    def test_parse_usage(self, parser: UsageParser, node_metrics) -> None:
        """Test parse_usage converts nanocores and Ki."""
        usage = parser.parse_usage(node_metrics(name="node-1"))
        assert usage.node_name == "node-1"
        assert usage.cpu == 0.25
        assert usage.memory == 1024**3

    def test_extra_readings_are_ignored(self, parser: UsageParser, node_metrics) -> None:
        """Test readings other than cpu and memory are not parsed."""
        item = node_metrics()
        item["usage"]["pods"] = "not-a-count"
        usage = parser.parse_usage(item)
        assert usage.cpu == 0.25
        assert not hasattr(usage, "pods")

    def test_missing_usage(self, parser: UsageParser, node_metrics) -> None:
        """Test absent readings are reported as zero."""
        item = node_metrics()
        del item["usage"]
        usage = parser.parse_usage(item)
        assert usage.cpu == 0.0
        assert usage.memory == 0.0

    def test_malformed_usage_names_node(self, parser: UsageParser, node_metrics) -> None:
        """Test a malformed reading is reported against its node."""
        with pytest.raises(MalformedQuantityError) as exc_info:
            parser.parse_usage(node_metrics(name="node-9", cpu="fast"))
        assert exc_info.value.entity == "node-9"

    def test_missing_name(self, parser: UsageParser, node_metrics) -> None:
        """Test a reading without a node name is rejected."""
        item = node_metrics()
        del item["metadata"]
        with pytest.raises(MissingRequiredFieldError):
            parser.parse_usage(item)

    def test_parse_usages(self, parser: UsageParser, node_metrics) -> None:
        """Test parse_usages keys readings by node name."""
        usages = parser.parse_usages(
            [node_metrics(name="a", cpu="1"), node_metrics(name="b", cpu="500m")]
        )
        assert set(usages) == {"a", "b"}
        assert usages["a"].cpu == 1.0
        assert usages["b"].cpu == 0.5
