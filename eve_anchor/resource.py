"""Outposts, requested materials and the resources a planet can yield."""

from __future__ import annotations

from dataclasses import dataclass

from eve_anchor.data import Catalog, default_catalog


@dataclass
class Outpost:
    name: str
    system: str
    planets: int = 0
    arrays: int = 0


@dataclass(frozen=True)
class Material:
    resource_type_id: int
    name: str
    quantity: int
    valuation: float


@dataclass(frozen=True)
class CelestialResource:
    key: str = ""
    planet_id: int = 0
    resource_type_id: int = 0
    init_output: float = 0.0
    richness_index: int = 0
    richness_value: int = 0


def _resources_in(
    constellation_id: int, key: str | None, catalog: Catalog
) -> list[CelestialResource]:
    celestials = catalog.slice_celestials(constellation_id)
    result = []
    for planet_key, planet in catalog.planets.items():
        if planet_key not in celestials:
            continue
        if key is None:
            constellation = catalog.get_constellation(constellation_id)
            if constellation is None:
                raise KeyError(f"unknown constellation: {constellation_id}")
            key = constellation.en_name
        result.extend(
            CelestialResource(
                key=key,
                planet_id=planet.planet_id,
                resource_type_id=resource.resource_type_id,
                init_output=resource.init_output,
                richness_index=resource.richness_index,
                richness_value=resource.richness_value,
            )
            for resource in planet.resource_info.values()
        )
    return result


def celestial_resources_by_outpost(
    outpost: Outpost, catalog: Catalog | None = None
) -> list[CelestialResource]:
    """Resources of every planet in the outpost's constellation, keyed by outpost."""
    catalog = catalog or default_catalog()
    constellation_id = catalog.find_constellation_by_system(outpost.system)
    if constellation_id is None:
        raise LookupError(f"Failed to find constellation by system {outpost.system}")
    return _resources_in(constellation_id, outpost.name, catalog)


def celestial_resources_by_constellation(
    constellation_id: int, catalog: Catalog | None = None
) -> list[CelestialResource]:
    """Resources of every planet in a constellation, keyed by its name."""
    catalog = catalog or default_catalog()
    return _resources_in(constellation_id, None, catalog)