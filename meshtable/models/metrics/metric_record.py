"""Metric record and normalized row models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from meshtable.constants.values import QUANTILE_LABELS

_RECORD_CONFIG = ConfigDict(populate_by_name=True, alias_generator=to_camel)
_PROMOTED_FIELDS = frozenset(QUANTILE_LABELS)


class PodStats(BaseModel):
    """Meshed vs. total pod counts for one resource."""

    model_config = _RECORD_CONFIG

    meshed_pods: int = 0
    total_pods: int = 0


class TcpStats(BaseModel):
    """TCP connection and byte counters."""

    model_config = _RECORD_CONFIG

    open_connections: int | None = None
    read_rate: float | None = None
    write_rate: float | None = None


class TrafficSplitStats(BaseModel):
    """Apex/leaf routing entry of a traffic split."""

    model_config = _RECORD_CONFIG

    apex: str | None = None
    leaf: str | None = None
    weight: int | float | str | None = None


class MetricRecord(BaseModel):
    """Observed telemetry for one resource over the current window."""

    model_config = _RECORD_CONFIG

    # Identity
    name: str = ""
    namespace: str | None = None
    type: str = ""

    # Mesh membership
    added: bool = False
    pods: PodStats | None = None

    # HTTP stats
    success_rate: float | None = None
    request_rate: float | None = None
    latency: dict[str, float | None] | None = None

    # TCP / traffic split stats
    tcp: TcpStats | None = None
    ts_stats: TrafficSplitStats | None = None

    # Diagnostics, keyed by source (container, proxy, ...)
    errors: dict[str, Any] = Field(default_factory=dict)

    @field_validator("errors", mode="before")
    @classmethod
    def _null_errors_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


class MetricRow(MetricRecord):
    """Metric record with latency quantiles promoted to top-level fields.

    The well-known quantiles are typed fields. Any other quantile label found
    in ``latency`` is kept as an extra attribute of the same name.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="allow",
    )

    P50: float | None = Field(default=None, alias="P50")
    P95: float | None = Field(default=None, alias="P95")
    P99: float | None = Field(default=None, alias="P99")

    def quantile(self, label: str) -> float | None:
        """Return the promoted value for a quantile label, or None."""
        if label in _PROMOTED_FIELDS:
            return getattr(self, label)
        extra = self.model_extra or {}
        return extra.get(label)
