"""Tests for metric parser."""

from __future__ import annotations

import pytest

from meshtable.controllers.metrics.parsers.metric_parser import MetricParser
from meshtable.models.metrics import MetricRecord


class TestMetricParser:
    """Tests for MetricParser class."""

    @pytest.fixture
    def parser(self) -> MetricParser:
        """Create MetricParser instance."""
        return MetricParser()

    def test_parse_record(self, parser: MetricParser) -> None:
        """Test parse_record maps camelCase API fields."""
        record = parser.parse_record(
            {
                "name": "web",
                "namespace": "emojivoto",
                "type": "deployment",
                "added": True,
                "pods": {"meshedPods": "1", "totalPods": "1"},
                "requestRate": 1.5,
                "latency": {"P50": 2.0, "P95": 5.0},
                "errors": {},
            }
        )

        assert isinstance(record, MetricRecord)
        assert record.name == "web"
        assert record.pods.total_pods == 1
        assert record.request_rate == 1.5
        assert record.latency == {"P50": 2.0, "P95": 5.0}

    def test_parse_record_passes_models_through(self, parser: MetricParser) -> None:
        """Test parse_record returns existing models unchanged."""
        record = MetricRecord(name="web")

        assert parser.parse_record(record) is record

    def test_parse_record_rejects_non_mapping(self, parser: MetricParser) -> None:
        """Test parse_record returns None for non-mapping entries."""
        assert parser.parse_record(42) is None
        assert parser.parse_record("web") is None

    def test_parse_record_rejects_invalid(self, parser: MetricParser) -> None:
        """Test parse_record returns None on validation errors."""
        assert parser.parse_record({"name": "web", "successRate": "very good"}) is None

    def test_parse_records_skips_invalid(self, parser: MetricParser) -> None:
        """Test parse_records keeps valid records in order and counts skips."""
        records = parser.parse_records(
            [
                {"name": "a"},
                {"name": "broken", "pods": "many"},
                None,
                {"name": "b"},
            ]
        )

        assert [record.name for record in records] == ["a", "b"]
        assert parser.skipped == 2

    def test_parse_records_none(self, parser: MetricParser) -> None:
        """Test parse_records handles a missing payload."""
        assert parser.parse_records(None) == []
        assert parser.skipped == 0

    def test_parse_record_null_errors(self, parser: MetricParser) -> None:
        """Test parse_record treats null errors as no errors."""
        records = parser.parse_records([{"name": "a", "type": "deployment", "errors": None}])

        assert [record.name for record in records] == ["a"]
        assert records[0].errors == {}
        assert parser.skipped == 0
