"""Reference data models.

Read-only datasets consumed by the wizard: the administrative region
hierarchy (district -> municipality -> parish) and the average price
per m² for each municipality.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_PRICE_PER_M2 = 1500.0


def _sorted(values) -> tuple[str, ...]:
    return tuple(sorted(values, key=str.casefold))


class RegionCatalog(BaseModel):
    """Three-level location hierarchy.

    Lists are returned sorted alphabetically to ease selection.
    """

    sub_regions_by_region: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    local_areas_by_sub_region: dict[str, tuple[str, ...]] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def from_mapping(cls, hierarchy: dict[str, dict[str, list[str]]]) -> RegionCatalog:
        """Build a catalog from ``{region: {sub_region: [local_area, ...]}}``."""
        sub_regions: dict[str, tuple[str, ...]] = {}
        local_areas: dict[str, tuple[str, ...]] = {}
        for region, subs in hierarchy.items():
            sub_regions[region] = _sorted(subs)
            for sub_region, areas in subs.items():
                local_areas[sub_region] = _sorted(areas)
        return cls(sub_regions_by_region=sub_regions, local_areas_by_sub_region=local_areas)

    @property
    def regions(self) -> tuple[str, ...]:
        return _sorted(self.sub_regions_by_region)

    def sub_regions(self, region: str) -> tuple[str, ...]:
        """Municipalities of a district (empty if unknown)."""
        return self.sub_regions_by_region.get(region, ())

    def local_areas(self, sub_region: str) -> tuple[str, ...]:
        """Parishes of a municipality (empty if unknown)."""
        return self.local_areas_by_sub_region.get(sub_region, ())

    def contains(self, region: str, sub_region: str = "", local_area: str = "") -> bool:
        """Check that each non-empty level belongs to the level above it."""
        if region and region not in self.sub_regions_by_region:
            return False
        if sub_region and sub_region not in self.sub_regions(region):
            return False
        if local_area and local_area not in self.local_areas(sub_region):
            return False
        return True


class PriceTable(BaseModel):
    """Average price per m² keyed by municipality."""

    prices: dict[str, float] = Field(default_factory=dict)
    default: float = Field(default=DEFAULT_PRICE_PER_M2, gt=0)

    model_config = {"frozen": True}

    def lookup(self, sub_region: str) -> float:
        """Price per m² for a municipality, or the default when absent."""
        return self.prices.get(sub_region, self.default)

    def __len__(self) -> int:
        return len(self.prices)
