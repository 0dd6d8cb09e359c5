"""Metric snapshot parsers."""

from meshtable.controllers.metrics.parsers.metric_parser import MetricParser

__all__ = ["MetricParser"]
