"""Turning material lists and outposts into the inputs of the harvest problem."""

from __future__ import annotations

import math
from collections import defaultdict
from typing import Iterable

from eve_anchor.data import Catalog, default_catalog
from eve_anchor.problem import Value
from eve_anchor.resource import (
    CelestialResource,
    Material,
    Outpost,
    celestial_resources_by_constellation,
)

EXPECTED_HEADER = "ID\tNames\tQuantity\tValuation "

_VALUE_FIELD_BY_NAME = {
    "Lustering Alloy": "lustering_allow",
    "Sheen Compound": "sheen_compound",
    "Gleaming Alloy": "gleaming_alloy",
    "Motley Compound": "motley_compound",
    "Precious Alloy": "precious_alloy",
    "Condensed Alloy": "condensed_alloy",
    "Fiber Composite": "fiber_composite",
    "Lucent Compound": "lucent_compound",
    "Opulent Compound": "opulent_compound",
    "Glossy Compound": "glossy_compound",
    "Reactive Gas": "reactive_gas",
    "Noble Gas": "noble_gas",
    "Crystal Compound": "crystal_compound",
    "Dark Compound": "dark_compound",
    "Base Metals": "base_metals",
    "Heavy Metals": "heavy_metals",
    "Toxic Metals": "toxic_metals",
    "Industrial Fibers": "industrial_fibers",
    "Noble Metals": "noble_metals",
    "Reactive Metals": "reactive_metals",
    "Supertensile Plastics": "supertensile_plastics",
    "Polyaramids": "polyaramids",
    "Construction Blocks": "construction_blocks",
    "Nanites": "nanites",
    "Coolant": "coolant",
    "Condensates": "condensates",
    "Silicate Glass": "silicate_glass",
    "Smartfab Units": "smartfab_units",
    "Suspended Plasma": "suspended_plasma",
    "Heavy Water": "heavy_water",
    "Plasmoids": "plasmoids",
    "Liquid Ozone": "liquid_ozone",
    "Ionic Solutions": "ionic_solutions",
    "Oxygen Isotopes": "oxygen_isotopes",
}


def _unit_value(valuation: float, quantity: int) -> float:
    if quantity == 0:
        return math.nan if valuation == 0 else math.copysign(math.inf, valuation)
    return valuation / quantity


def map_objective(materials: Iterable[Material]) -> tuple[dict[int, float], Value]:
    """Required output per resource type and the unit value of each material."""
    minimum_output: dict[int, float] = {}
    value = Value()
    for material in materials:
        minimum_output[material.resource_type_id] = (
            minimum_output.get(material.resource_type_id, 0.0) + float(material.quantity)
        )
        field_name = _VALUE_FIELD_BY_NAME.get(material.name)
        if field_name is not None:
            setattr(value, field_name, _unit_value(material.valuation, material.quantity))
    return minimum_output, value


def available_planets_by_outpost(
    outpost: Outpost, number: int, catalog: Catalog | None = None
) -> dict[int, int]:
    """Map every planet in the outpost's constellation to ``number``."""
    catalog = catalog or default_catalog()
    constellation_id = catalog.find_constellation_by_system(outpost.system)
    if constellation_id is None:
        raise LookupError(f"Failed to find constellation by system {outpost.system}")
    celestials = catalog.slice_celestials(constellation_id)
    return {key: number for key in catalog.planets if key in celestials}


def map_constellation(
    outposts: Iterable[Outpost], catalog: Catalog | None = None
) -> tuple[dict[str, int], dict[int, int], list[CelestialResource]]:
    """Arrays available per constellation and per planet, and the harvestable resources."""
    catalog = catalog or default_catalog()
    available_constellation: dict[str, int] = defaultdict(int)
    available_planet: dict[int, int] = defaultdict(int)
    resources: list[CelestialResource] = []

    for outpost in outposts:
        constellation_id = catalog.find_constellation_by_system(outpost.system)
        if constellation_id is None:
            raise LookupError(f"Failed to find constellation by system {outpost.system}")
        constellation = catalog.get_constellation(constellation_id)
        if constellation is None:
            raise KeyError(f"unknown constellation: {constellation_id}")
        planets = available_planets_by_outpost(outpost, outpost.arrays, catalog)
        available_constellation[constellation.en_name] += outpost.arrays * outpost.planets
        for key in planets:
            available_planet[key] += outpost.arrays
        resources.extend(celestial_resources_by_constellation(constellation_id, catalog))

    return dict(available_constellation), dict(available_planet), resources


def parse_material(line: str, catalog: Catalog | None = None) -> Material | None:
    """Parse one tab-separated row; None when it has fewer than four fields."""
    parts = line.split("\t")
    if len(parts) < 4:
        return None
    catalog = catalog or default_catalog()
    name = parts[1]
    resource_type_id = catalog.find_item(name)
    if resource_type_id is None:
        raise LookupError(f"unknown item: {name}")
    return Material(
        resource_type_id=resource_type_id,
        name=name,
        quantity=int(parts[2]),
        valuation=float(parts[3].strip()),
    )


def parse_decomposed_list(text: str, catalog: Catalog | None = None) -> list[Material]:
    """Parse a decomposed material list as copied from the game, header line included."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("No header line.")
    if lines[0] != EXPECTED_HEADER:
        raise ValueError("Invalid header line.")
    materials = (parse_material(line, catalog) for line in lines[1:])
    return [material for material in materials if material is not None]