"""Resource kind variant used to compose metrics tables."""

from __future__ import annotations

from dataclasses import dataclass

from meshtable.constants.enums import ResourceVariant

_SPECIAL_VARIANTS: dict[str, ResourceVariant] = {
    variant.value: variant
    for variant in ResourceVariant
    if variant is not ResourceVariant.WORKLOAD
}


@dataclass(frozen=True)
class ResourceKind:
    """A resource kind string tagged with its table-composition variant."""

    name: str
    variant: ResourceVariant

    @classmethod
    def parse(cls, kind: str | ResourceKind) -> ResourceKind:
        """Tag a kind string. Unrecognized kinds become workload kinds."""
        if isinstance(kind, ResourceKind):
            return kind
        name = str(kind or "")
        return cls(name=name, variant=_SPECIAL_VARIANTS.get(name, ResourceVariant.WORKLOAD))

    @property
    def is_authority(self) -> bool:
        return self.variant is ResourceVariant.AUTHORITY

    @property
    def is_traffic_split(self) -> bool:
        return self.variant is ResourceVariant.TRAFFIC_SPLIT

    @property
    def is_multi_resource(self) -> bool:
        return self.variant is ResourceVariant.MULTI_RESOURCE

    @property
    def is_namespace(self) -> bool:
        return self.variant is ResourceVariant.NAMESPACE

    def __str__(self) -> str:
        return self.name
