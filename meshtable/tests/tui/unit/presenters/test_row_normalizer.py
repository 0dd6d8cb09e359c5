"""Unit tests for metric row normalization."""

from __future__ import annotations

import copy

import pytest

from meshtable.models.metrics import MetricRecord, MetricRow
from meshtable.screens.metrics.presenter import normalize_metrics


def _raw_record(name: str, **overrides) -> dict:
    record = {
        "name": name,
        "namespace": "emojivoto",
        "type": "deployment",
        "added": True,
        "pods": {"meshedPods": 1, "totalPods": 1},
        "successRate": 0.99,
        "requestRate": 2.5,
        "latency": {"P50": 12.0, "P95": 40.0, "P99": 88.0},
        "errors": {},
    }
    record.update(overrides)
    return record


@pytest.mark.unit
@pytest.mark.fast
class TestNormalizeMetrics:
    """Tests for normalize_metrics."""

    def test_empty_input_returns_empty_list(self) -> None:
        assert normalize_metrics([]) == []

    def test_preserves_cardinality_and_order(self) -> None:
        records = [_raw_record("web"), _raw_record("emoji"), _raw_record("voting")]

        rows = normalize_metrics(records)

        assert len(rows) == len(records)
        assert [row.name for row in rows] == ["web", "emoji", "voting"]
        assert all(isinstance(row, MetricRow) for row in rows)

    def test_promotes_present_quantiles(self) -> None:
        rows = normalize_metrics([_raw_record("web", latency={"P50": 12.0, "P99": 88.0})])

        row = rows[0]
        assert row.P50 == 12.0
        assert row.P99 == 88.0
        assert row.P95 is None
        assert row.latency == {"P50": 12.0, "P99": 88.0}

    def test_promotes_unknown_quantile_labels(self) -> None:
        rows = normalize_metrics([_raw_record("web", latency={"P999": 120.0})])

        row = rows[0]
        assert row.quantile("P999") == 120.0
        assert getattr(row, "P999") == 120.0
        assert row.quantile("P50") is None

    def test_missing_latency_adds_no_fields(self) -> None:
        rows = normalize_metrics([_raw_record("web", latency=None)])

        row = rows[0]
        assert row.latency is None
        assert row.P50 is None
        assert not row.model_extra

    def test_quantile_named_like_a_field_is_not_promoted(self) -> None:
        rows = normalize_metrics([_raw_record("web", latency={"name": 5.0, "P50": 1.0})])

        assert rows[0].name == "web"
        assert rows[0].P50 == 1.0
        assert rows[0].latency == {"name": 5.0, "P50": 1.0}

    def test_does_not_mutate_raw_input(self) -> None:
        records = [_raw_record("web"), _raw_record("emoji", errors={"pod-1": [{"message": "boom"}]})]
        snapshot = copy.deepcopy(records)

        normalize_metrics(records)

        assert records == snapshot

    def test_does_not_mutate_model_input(self) -> None:
        record = MetricRecord.model_validate(_raw_record("web"))
        before = record.model_dump()

        normalize_metrics([record])

        assert record.model_dump() == before
        assert not hasattr(record, "P50")

    def test_rows_do_not_alias_input(self) -> None:
        record = MetricRecord.model_validate(_raw_record("web", errors={"pod-1": ["boom"]}))

        row = normalize_metrics([record])[0]
        row.latency["P50"] = 999.0
        row.errors["pod-1"].append("bang")

        assert record.latency["P50"] == 12.0
        assert record.errors == {"pod-1": ["boom"]}

    def test_normalizing_twice_is_idempotent(self) -> None:
        rows = normalize_metrics([_raw_record("web")])

        again = normalize_metrics(rows)

        assert [row.model_dump() for row in again] == [row.model_dump() for row in rows]

    def test_null_errors_normalize_to_empty(self) -> None:
        rows = normalize_metrics([_raw_record("web", errors=None)])

        assert len(rows) == 1
        assert rows[0].errors == {}
        assert rows[0].has_errors is False
