"""Link factory and dashboard link builders.

Links are rendered as rich Text whose style carries the target URL, so any
rich-aware surface (Textual tables included) can make them clickable.
"""

from __future__ import annotations

import json
from typing import Protocol
from urllib.parse import urlencode

from rich.console import RenderableType
from rich.style import Style
from rich.text import Text

from meshtable.constants.values import (
    GRAFANA_DASHBOARD_PATH,
    GRAFANA_LINK_LABEL,
    JAEGER_LINK_LABEL,
    JAEGER_SEARCH_PATH,
)


class LinkFactory(Protocol):
    """Builds an internal navigation link for a path."""

    def __call__(self, path: str, label: str | Text) -> RenderableType: ...


class PrefixedLink:
    """Link factory that prepends a fixed path prefix to every link."""

    def __init__(self, path_prefix: str = "") -> None:
        self._path_prefix = path_prefix.rstrip("/")

    @property
    def path_prefix(self) -> str:
        return self._path_prefix

    def url_for(self, path: str) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self._path_prefix}{path}"

    def __call__(self, path: str, label: str | Text) -> Text:
        text = label.copy() if isinstance(label, Text) else Text(str(label))
        text.stylize(Style(link=self.url_for(path)))
        return text


def _dashboard_names(resource_kind: str) -> tuple[str, str]:
    kind = resource_kind.lower()
    return kind.replace(" ", "_"), kind.replace(" ", "-")


def grafana_link(
    link_factory: LinkFactory,
    *,
    name: str,
    namespace: str | None,
    resource_kind: str,
) -> RenderableType:
    """Build a deep link to the Grafana dashboard of one resource."""
    variable_name, dashboard = _dashboard_names(resource_kind)
    query = {f"var-{variable_name}": name}
    if namespace:
        query["var-namespace"] = namespace
    path = f"{GRAFANA_DASHBOARD_PATH.format(dashboard=dashboard)}?{urlencode(query)}"
    return link_factory(path, GRAFANA_LINK_LABEL)


def jaeger_link(
    link_factory: LinkFactory,
    *,
    name: str,
    namespace: str | None,
    resource_kind: str,
) -> RenderableType:
    """Build a deep link to the Jaeger trace search for one resource."""
    variable_name, _ = _dashboard_names(resource_kind)
    tags = {f"linkerd.io/proxy-{variable_name}": name}
    if namespace:
        tags["linkerd.io/workload-ns"] = namespace
    query = {"service": namespace or name, "tags": json.dumps(tags, sort_keys=True)}
    path = f"{JAEGER_SEARCH_PATH}?{urlencode(query)}"
    return link_factory(path, JAEGER_LINK_LABEL)
