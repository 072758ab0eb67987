import pytest

from eve_anchor.cache import Cache
from eve_anchor.data import Catalog, Celestial, Constellation, Item, Planet, Resource, System
from eve_anchor.problem import SolverError
from eve_anchor.resource import CelestialResource, Material, Outpost
from eve_anchor.solver import outposts_per_constellation, solve_for_constellation


def _catalog(ozone_output):
    return Catalog(
        celestials={
            40000002: Celestial(20000001, 10000001, 30000001, 1),
            40000010: Celestial(20000002, 10000001, 30000002, 1),
        },
        constellations={
            20000001: Constellation(en_name="San Matar"),
            20000002: Constellation(en_name="Mamouna"),
        },
        items={
            42001000032: Item(en_name="Silicate Glass"),
            42002000014: Item(en_name="Liquid Ozone"),
        },
        systems={
            30000001: System(en_name="Tanoo", constellation=20000001),
            30000002: System(en_name="Sooma", constellation=20000002),
        },
        planets={
            40000002: Planet(
                40000002,
                {42001000032: Resource(9.86, 0, 42001000032, 1, 1644)},
            ),
            40000010: Planet(
                40000010,
                {42002000014: Resource(ozone_output, 0, 42002000014, 2, 1298)},
            ),
        },
    )


OUTPOSTS = [
    Outpost("Outpost1", "Tanoo", planets=1, arrays=2),
    Outpost("Outpost2", "Sooma", planets=1, arrays=2),
]
MATERIALS = [
    Material(42001000032, "Silicate Glass", 1, 1011.34),
    Material(42002000014, "Liquid Ozone", 1, 166.13),
]


def test_outposts_per_constellation_counts_names():
    outposts = [
        Outpost("Outpost1", "Tanoo"),
        Outpost("Outpost1", "Tanoo"),
        Outpost("Outpost2", "Sooma"),
    ]
    assert dict(outposts_per_constellation(outposts)) == {"Outpost1": 2, "Outpost2": 1}


def test_solve_places_every_available_array():
    cache = Cache(60)
    result = solve_for_constellation(OUTPOSTS, MATERIALS, 1.0, cache, _catalog(50000.0))
    quantities = {resource.planet_id: quantity for resource, quantity in result}
    assert quantities[40000002] == pytest.approx(2.0, abs=1e-6)
    assert quantities[40000010] == pytest.approx(2.0, abs=1e-6)
    keys = {resource.key for resource, _ in result}
    assert keys == {"San Matar", "Mamouna"}


def test_solve_result_includes_expected_resource():
    cache = Cache(60)
    result = solve_for_constellation(OUTPOSTS, MATERIALS, 1.0, cache, _catalog(50000.0))
    expected = CelestialResource(
        key="San Matar",
        planet_id=40000002,
        resource_type_id=42001000032,
        init_output=9.86,
        richness_index=1,
        richness_value=1644,
    )
    assert expected in [resource for resource, _ in result]


def test_solve_stores_result_in_cache():
    cache = Cache(60)
    result = solve_for_constellation(OUTPOSTS, MATERIALS, 1.0, cache, _catalog(50000.0))
    assert cache.get("2-2-1") == result


def test_solve_returns_cached_value():
    cache = Cache(60)
    sentinel = [(CelestialResource(key="cached"), 5.0)]
    cache.set("2-2-7", sentinel)
    result = solve_for_constellation(OUTPOSTS, MATERIALS, 7.0, cache, _catalog(50000.0))
    assert result == sentinel


def test_solve_raises_when_fuel_cannot_be_met():
    cache = Cache(60)
    with pytest.raises(SolverError):
        solve_for_constellation(OUTPOSTS, MATERIALS, 1.0, cache, _catalog(29.2))
    assert cache.get("2-2-1") is None