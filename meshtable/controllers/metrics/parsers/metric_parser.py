"""Metric parser - parses raw metric snapshot entries into MetricRecord models."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from meshtable.models.metrics import MetricRecord

logger = logging.getLogger(__name__)


class MetricParser:
    """Parses raw metric records (camelCase API payloads) into models."""

    def __init__(self) -> None:
        """Initialize metric parser."""
        self._skipped = 0

    @property
    def skipped(self) -> int:
        """Number of entries skipped by the last parse_records call."""
        return self._skipped

    def parse_record(self, raw: Any) -> MetricRecord | None:
        """Parse a single raw record.

        Args:
            raw: Mapping as produced by the metrics API.

        Returns:
            MetricRecord, or None if the entry is not a valid record.
        """
        if isinstance(raw, MetricRecord):
            return raw
        if not isinstance(raw, Mapping):
            logger.warning("Skipping metric entry of type %s", type(raw).__name__)
            return None
        try:
            return MetricRecord.model_validate(dict(raw))
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid metric record %r: %d validation error(s)",
                raw.get("name", "<unnamed>"),
                exc.error_count(),
            )
            return None

    def parse_records(self, raw_records: Iterable[Any] | None) -> list[MetricRecord]:
        """Parse raw records, keeping the order of the valid ones."""
        self._skipped = 0
        records: list[MetricRecord] = []
        for raw in raw_records or []:
            record = self.parse_record(raw)
            if record is None:
                self._skipped += 1
                continue
            records.append(record)
        if self._skipped:
            logger.warning("Skipped %d of %d metric records", self._skipped, self._skipped + len(records))
        return records
