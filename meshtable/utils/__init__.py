"""Utility helpers for MeshTable."""

from meshtable.utils.formatters import (
    format_byte_rate,
    format_count,
    format_latency,
    format_success_rate,
)
from meshtable.utils.links import (
    LinkFactory,
    PrefixedLink,
    grafana_link,
    jaeger_link,
)
from meshtable.utils.resource_names import (
    FriendlyTitle,
    display_name,
    friendly_title,
    short_resource_name,
)

__all__ = [
    "FriendlyTitle",
    "LinkFactory",
    "PrefixedLink",
    "display_name",
    "format_byte_rate",
    "format_count",
    "format_latency",
    "format_success_rate",
    "friendly_title",
    "grafana_link",
    "jaeger_link",
    "short_resource_name",
]
