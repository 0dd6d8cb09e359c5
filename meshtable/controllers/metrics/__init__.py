"""Metrics controller package."""

from meshtable.controllers.metrics.parsers import MetricParser

__all__ = ["MetricParser"]
