import pytest

from eve_anchor.data import Catalog, Celestial, Constellation, Planet, Resource, System
from eve_anchor.resource import (
    CelestialResource,
    Material,
    Outpost,
    celestial_resources_by_constellation,
    celestial_resources_by_outpost,
)


@pytest.fixture
def catalog():
    inside = Planet(
        planet_id=40000002,
        resource_info={
            42001000020: Resource(3.5, 1, 42001000020, 3, 1123),
            42002000012: Resource(154.2, 5, 42002000012, 2, 1285),
        },
    )
    outside = Planet(
        planet_id=40000099,
        resource_info={42001000029: Resource(9.9, 0, 42001000029, 3, 1238)},
    )
    return Catalog(
        celestials={
            40000002: Celestial(20000001, 10000001, 30000001, 1),
            40000099: Celestial(20000002, 10000001, 30000002, 1),
        },
        constellations={
            20000001: Constellation(en_name="San Matar"),
            20000002: Constellation(en_name="Mamouna"),
        },
        systems={
            30000001: System(en_name="Tanoo", constellation=20000001),
            30000002: System(en_name="Sooma", constellation=20000002),
        },
        planets={40000002: inside, 40000099: outside},
    )


def test_by_outpost_uses_outpost_name_as_key(catalog):
    outpost = Outpost(name="Outpost1", system="Tanoo", planets=26, arrays=12)
    resources = celestial_resources_by_outpost(outpost, catalog)
    assert {r.key for r in resources} == {"Outpost1"}
    assert {r.resource_type_id for r in resources} == {42001000020, 42002000012}
    assert {r.planet_id for r in resources} == {40000002}


def test_by_outpost_copies_resource_fields(catalog):
    outpost = Outpost(name="Outpost1", system="Tanoo")
    resources = celestial_resources_by_outpost(outpost, catalog)
    heavy_water = next(r for r in resources if r.resource_type_id == 42002000012)
    assert heavy_water == CelestialResource(
        key="Outpost1",
        planet_id=40000002,
        resource_type_id=42002000012,
        init_output=154.2,
        richness_index=2,
        richness_value=1285,
    )


def test_by_outpost_unknown_system_raises(catalog):
    with pytest.raises(KeyError):
        celestial_resources_by_outpost(Outpost(name="X", system="Nowhere"), catalog)


def test_by_constellation_uses_constellation_name(catalog):
    resources = celestial_resources_by_constellation(20000002, catalog)
    assert [r.key for r in resources] == ["Mamouna"]
    assert resources[0].planet_id == 40000099


def test_by_constellation_without_planets_is_empty(catalog):
    assert celestial_resources_by_constellation(20000999, catalog) == []


def test_material_equality():
    a = Material(42001000000, "Lustering Alloy", 4, 10100069.2)
    b = Material(42001000000, "Lustering Alloy", 4, 10100069.2)
    assert a == b