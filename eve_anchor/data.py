"""Static game data: celestials, constellations, items, systems and planets."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, TypeVar

DEFAULT_DATA_DIR = Path("target") / "data"

CELESTIALS_FILE = "celestials.json"
ITEMS_FILE = "all_items_info.json"
CONSTELLATIONS_FILE = "constellations_r.json"
PLANETS_FILE = "planet_exploit_resource.json"
SYSTEMS_FILE = "systems_r.json"

_T = TypeVar("_T")


def _from_mapping(cls: type[_T], raw: Mapping[str, Any]) -> _T:
    """Build a dataclass from a mapping, ignoring keys it does not know."""
    names = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    return cls(**{key: value for key, value in raw.items() if key in names})


@dataclass(frozen=True)
class Celestial:
    constellation_id: int
    region_id: int
    solar_system_id: int
    celestial_index: int


@dataclass(frozen=True)
class Constellation:
    zh_name: str = ""
    en_name: str = ""
    de_name: str = ""
    fr_name: str = ""
    ja_name: str = ""
    por_name: str = ""
    ru_name: str = ""
    spa_name: str = ""
    zhcn_name: str = ""


@dataclass(frozen=True)
class Item:
    zh_name: str = ""
    en_name: str = ""
    de_name: str = ""
    fr_name: str = ""
    ja_name: str = ""
    por_name: str = ""
    ru_name: str = ""
    spa_name: str = ""
    zhcn_name: str = ""
    kr_name: str = ""


@dataclass(frozen=True)
class System:
    zh_name: str = ""
    en_name: str = ""
    de_name: str = ""
    fr_name: str = ""
    ja_name: str = ""
    por_name: str = ""
    ru_name: str = ""
    spa_name: str = ""
    zhcn_name: str = ""
    constellation: int = 0


@dataclass(frozen=True)
class Resource:
    init_output: float = 0.0
    location_index: int = 0
    resource_type_id: int = 0
    richness_index: int = 0
    richness_value: int = 0


@dataclass
class Planet:
    planet_id: int = 0
    resource_info: dict[int, Resource] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Planet":
        return cls(
            planet_id=raw["planet_id"],
            resource_info={
                int(key): _from_mapping(Resource, value)
                for key, value in raw["resource_info"].items()
            },
        )


def _read_table(path: Path) -> dict[int, Any]:
    with path.open(encoding="utf-8") as handle:
        raw = json.load(handle)
    return {int(key): value for key, value in raw.items()}


@dataclass
class Catalog:
    """All static tables, keyed by their numeric identifiers."""

    celestials: dict[int, Celestial] = field(default_factory=dict)
    constellations: dict[int, Constellation] = field(default_factory=dict)
    items: dict[int, Item] = field(default_factory=dict)
    systems: dict[int, System] = field(default_factory=dict)
    planets: dict[int, Planet] = field(default_factory=dict)

    @classmethod
    def load(cls, directory: str | Path) -> "Catalog":
        """Read every table from the JSON files in ``directory``."""
        directory = Path(directory)
        return cls(
            celestials={
                key: _from_mapping(Celestial, value)
                for key, value in _read_table(directory / CELESTIALS_FILE).items()
            },
            constellations={
                key: _from_mapping(Constellation, value)
                for key, value in _read_table(directory / CONSTELLATIONS_FILE).items()
            },
            items={
                key: _from_mapping(Item, value)
                for key, value in _read_table(directory / ITEMS_FILE).items()
            },
            systems={
                key: _from_mapping(System, value)
                for key, value in _read_table(directory / SYSTEMS_FILE).items()
            },
            planets={
                key: Planet.from_dict(value)
                for key, value in _read_table(directory / PLANETS_FILE).items()
            },
        )

    def get_celestial(self, key: int) -> Celestial | None:
        return self.celestials.get(key)

    def get_item(self, key: int) -> Item | None:
        return self.items.get(key)

    def get_constellation(self, key: int) -> Constellation | None:
        return self.constellations.get(key)

    def get_system(self, key: int) -> System | None:
        return self.systems.get(key)

    def get_planet(self, key: int) -> Planet | None:
        return self.planets.get(key)

    def find_system(self, name: str) -> int | None:
        """Return the id of the system with this English name."""
        return next(
            (key for key, system in self.systems.items() if system.en_name == name),
            None,
        )

    def find_constellation(self, name: str) -> int | None:
        """Return the id of the constellation with this English name."""
        return next(
            (key for key, c in self.constellations.items() if c.en_name == name),
            None,
        )

    def find_item(self, name: str) -> int | None:
        """Return the id of the item with this English name."""
        return next(
            (key for key, item in self.items.items() if item.en_name == name),
            None,
        )

    def find_constellation_by_system(self, name: str) -> int | None:
        """Return the constellation of the named system.

        Raises KeyError when no system has that name.
        """
        system_id = self.find_system(name)
        if system_id is None:
            raise KeyError(f"unknown system: {name}")
        return next(
            (
                celestial.constellation_id
                for celestial in self.celestials.values()
                if celestial.solar_system_id == system_id
            ),
            None,
        )

    def slice_celestials(self, constellation_id: int) -> dict[int, Celestial]:
        """Return the celestials that lie in the given constellation."""
        return {
            key: celestial
            for key, celestial in self.celestials.items()
            if celestial.constellation_id == constellation_id
        }

    def system_by_planet(self, key: int) -> System | None:
        """Return the system a planet lies in; KeyError for an unknown planet."""
        celestial = self.celestials.get(key)
        if celestial is None:
            raise KeyError(f"unknown celestial: {key}")
        return self.get_system(celestial.solar_system_id)


@lru_cache(maxsize=None)
def default_catalog() -> Catalog:
    """Load, once, the catalog from the default data directory."""
    return Catalog.load(DEFAULT_DATA_DIR)