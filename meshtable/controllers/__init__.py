"""Controllers for metric snapshot data."""

from meshtable.controllers.metrics import MetricParser

__all__ = ["MetricParser"]
