"""Unit tests for the link factory and dashboard links."""

from __future__ import annotations

import json
from urllib.parse import parse_qs, urlsplit

import pytest
from rich.text import Text

from meshtable.utils.links import PrefixedLink, grafana_link, jaeger_link


def _link_of(text: Text) -> str:
    return text.spans[0].style.link


@pytest.mark.unit
@pytest.mark.fast
class TestPrefixedLink:
    """Tests for PrefixedLink."""

    def test_prefix_trailing_slash_stripped(self) -> None:
        link = PrefixedLink("/proxy/")

        assert link.path_prefix == "/proxy"
        assert link.url_for("/namespaces/emojivoto") == "/proxy/namespaces/emojivoto"

    def test_relative_path_gets_leading_slash(self) -> None:
        assert PrefixedLink().url_for("namespaces") == "/namespaces"

    def test_call_returns_linked_text(self) -> None:
        text = PrefixedLink("/p")("/pods/web", "web")

        assert text.plain == "web"
        assert _link_of(text) == "/p/pods/web"

    def test_call_keeps_label_styles(self) -> None:
        label = Text("web", style="bold")

        text = PrefixedLink()("/pods/web", label)

        assert text.style == "bold"
        assert label.spans == []


@pytest.mark.unit
@pytest.mark.fast
class TestDashboardLinks:
    """Tests for grafana_link and jaeger_link."""

    def test_grafana_link(self) -> None:
        text = grafana_link(PrefixedLink(), name="web", namespace="emojivoto", resource_kind="deployment")

        assert text.plain == "grafana"
        url = urlsplit(_link_of(text))
        assert url.path == "/grafana/d/linkerd-deployment"
        assert parse_qs(url.query) == {"var-deployment": ["web"], "var-namespace": ["emojivoto"]}

    def test_grafana_link_without_namespace(self) -> None:
        text = grafana_link(PrefixedLink(), name="emojivoto", namespace=None, resource_kind="namespace")

        query = parse_qs(urlsplit(_link_of(text)).query)
        assert query == {"var-namespace": ["emojivoto"]}

    def test_jaeger_link(self) -> None:
        text = jaeger_link(PrefixedLink("/ui"), name="web", namespace="emojivoto", resource_kind="pod")

        assert text.plain == "jaeger"
        url = urlsplit(_link_of(text))
        assert url.path == "/ui/jaeger/search"
        query = parse_qs(url.query)
        assert query["service"] == ["emojivoto"]
        assert json.loads(query["tags"][0]) == {
            "linkerd.io/proxy-pod": "web",
            "linkerd.io/workload-ns": "emojivoto",
        }
