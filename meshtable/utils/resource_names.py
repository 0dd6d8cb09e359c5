"""Human-friendly names for mesh resource kinds."""

from __future__ import annotations

from typing import Any, NamedTuple

_SHORT_NAMES: dict[str, str] = {
    "authority": "au",
    "cronjob": "cj",
    "daemonset": "ds",
    "deployment": "deploy",
    "job": "job",
    "namespace": "ns",
    "pod": "po",
    "replicaset": "rs",
    "replicationcontroller": "rc",
    "service": "svc",
    "statefulset": "sts",
    "trafficsplit": "ts",
}

# Compound kind names that are not split on case boundaries.
_WORD_SPLITS: dict[str, str] = {
    "cronjob": "Cron Job",
    "daemonset": "Daemon Set",
    "replicaset": "Replica Set",
    "replicationcontroller": "Replication Controller",
    "statefulset": "Stateful Set",
    "trafficsplit": "Traffic Split",
    "multi_resource": "Multi Resource",
}

_IRREGULAR_PLURALS: dict[str, str] = {
    "authority": "Authorities",
}


class FriendlyTitle(NamedTuple):
    """Singular and plural display titles for a resource kind."""

    singular: str
    plural: str


def _singular_kind(kind: str) -> str:
    kind = kind.strip().lower()
    if kind == "authorities":
        return "authority"
    if kind.endswith("s") and kind[:-1] in _SHORT_NAMES:
        return kind[:-1]
    return kind


def friendly_title(kind: str) -> FriendlyTitle:
    """Return display titles for a singular or plural kind string.

    Examples:
        "deployment" -> ("Deployment", "Deployments")
        "trafficsplits" -> ("Traffic Split", "Traffic Splits")
        "authority" -> ("Authority", "Authorities")
    """
    singular_kind = _singular_kind(str(kind or ""))
    singular = _WORD_SPLITS.get(singular_kind)
    if singular is None:
        singular = " ".join(part.capitalize() for part in singular_kind.replace("-", "_").split("_") if part)
    plural = _IRREGULAR_PLURALS.get(singular_kind, f"{singular}s")
    return FriendlyTitle(singular=singular, plural=plural)


def short_resource_name(kind: str) -> str:
    """Return the kubectl-style short name for a kind, or the kind itself."""
    singular_kind = _singular_kind(str(kind or ""))
    return _SHORT_NAMES.get(singular_kind, singular_kind)


def display_name(row: Any) -> str:
    """Return "short-kind/name" for a row, e.g. "deploy/web"."""
    return f"{short_resource_name(getattr(row, 'type', ''))}/{getattr(row, 'name', '')}"
