"""Linear programme that allocates extraction arrays to planetary resources."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Mapping

import numpy as np
from scipy.optimize import linprog

from eve_anchor.resource import CelestialResource

DEFAULT_PLANET_LIMIT = 22


class SolverError(RuntimeError):
    """Raised when the harvest problem has no optimal solution."""


@dataclass
class Value:
    """Unit valuation of each planetary material."""

    lustering_allow: float = 0.0
    sheen_compound: float = 0.0
    gleaming_alloy: float = 0.0
    motley_compound: float = 0.0
    precious_alloy: float = 0.0
    condensed_alloy: float = 0.0
    fiber_composite: float = 0.0
    lucent_compound: float = 0.0
    opulent_compound: float = 0.0
    glossy_compound: float = 0.0
    reactive_gas: float = 0.0
    noble_gas: float = 0.0
    crystal_compound: float = 0.0
    dark_compound: float = 0.0
    base_metals: float = 0.0
    heavy_metals: float = 0.0
    toxic_metals: float = 0.0
    industrial_fibers: float = 0.0
    noble_metals: float = 0.0
    reactive_metals: float = 0.0
    supertensile_plastics: float = 0.0
    polyaramids: float = 0.0
    construction_blocks: float = 0.0
    nanites: float = 0.0
    coolant: float = 0.0
    condensates: float = 0.0
    silicate_glass: float = 0.0
    smartfab_units: float = 0.0
    suspended_plasma: float = 0.0
    heavy_water: float = 0.0
    plasmoids: float = 0.0
    liquid_ozone: float = 0.0
    ionic_solutions: float = 0.0
    oxygen_isotopes: float = 0.0


_VALUE_FIELD_BY_TYPE = {
    42001000000: "lustering_allow",
    42001000001: "sheen_compound",
    42001000002: "gleaming_alloy",
    42001000003: "condensed_alloy",
    42001000004: "precious_alloy",
    42001000005: "motley_compound",
    42001000006: "fiber_composite",
    42001000007: "lucent_compound",
    42001000008: "opulent_compound",
    42001000009: "glossy_compound",
    42001000010: "crystal_compound",
    42001000011: "dark_compound",
    42002000012: "heavy_water",
    42002000013: "suspended_plasma",
    42002000014: "liquid_ozone",
    42002000015: "ionic_solutions",
    42002000016: "oxygen_isotopes",
    42002000017: "plasmoids",
    42001000018: "reactive_gas",
    42001000019: "noble_gas",
    42001000020: "base_metals",
    42001000021: "heavy_metals",
    42001000022: "noble_metals",
    42001000023: "reactive_metals",
    42001000024: "toxic_metals",
    42001000025: "industrial_fibers",
    42001000026: "supertensile_plastics",
    42001000027: "polyaramids",
    42001000028: "coolant",
    42001000029: "condensates",
    42001000030: "construction_blocks",
    42001000031: "nanites",
    42001000032: "silicate_glass",
    42001000033: "smartfab_units",
}


def get_resource_value(resource: CelestialResource, value: Value) -> float:
    """Value of one array's hourly output of ``resource``."""
    field_name = _VALUE_FIELD_BY_TYPE.get(resource.resource_type_id)
    if field_name is None:
        raise ValueError(f"Invalid attribute name: {resource.resource_type_id}")
    return getattr(value, field_name) * resource.init_output


@dataclass(frozen=True)
class Solution:
    """Optimal array counts, indexed by the variables ``add_resource`` returned."""

    values: tuple[float, ...]
    objective: float

    def value(self, variable: int) -> float:
        return self.values[variable]


class ResourceHarvestProblem:
    """Maximise harvested value subject to array, planet and output limits."""

    def __init__(
        self,
        available_key: Mapping[str, int],
        available_planet: Mapping[int, int],
        minimum_output: Mapping[int, float],
        value: Value,
        days: float,
    ) -> None:
        self.available_key = dict(available_key)
        self.available_planet = dict(available_planet)
        self.minimum_output = dict(minimum_output)
        self.value = value
        self.days = days
        self.available_array = sum(self.available_key.values())

        self._bounds: list[tuple[float, float]] = []
        self._total_value: dict[int, float] = {}
        self._consumed_key: dict[str, dict[int, float]] = defaultdict(dict)
        self._consumed_planet: dict[int, dict[int, float]] = defaultdict(dict)
        self._resource_output: dict[int, dict[int, float]] = defaultdict(dict)

    def add_fuel(
        self,
        material_id: int,
        gj_per_unit: float,
        gj_needed: float,
        to_fuel: float,
    ) -> None:
        """Raise the required output of ``material_id`` by the fuel it must supply."""
        quantity = gj_needed / gj_per_unit * 24.0 * self.days * to_fuel
        if material_id in self.minimum_output:
            self.minimum_output[material_id] += quantity
        else:
            self.minimum_output[material_id] = quantity

    def add_resource(self, resource: CelestialResource) -> int:
        """Add a variable for the arrays placed on ``resource``; return its index."""
        planet_limit = self.available_planet.get(resource.planet_id, DEFAULT_PLANET_LIMIT)
        variable = len(self._bounds)
        self._bounds.append((0.0, float(planet_limit)))

        hours = self.days * 24.0
        self._total_value[variable] = get_resource_value(resource, self.value) * hours
        self._consumed_key[resource.key][variable] = 1.0
        self._consumed_planet[resource.planet_id][variable] = 1.0
        self._resource_output[resource.resource_type_id][variable] = (
            resource.init_output * hours
        )
        return variable

    def _row(self, terms: Mapping[int, float]) -> np.ndarray:
        row = np.zeros(len(self._bounds))
        for variable, coefficient in terms.items():
            row[variable] = coefficient
        return row

    def best_production(self) -> Solution:
        """Solve the programme; raise SolverError when it has no optimum."""
        count = len(self._bounds)
        if count == 0:
            feasible = self.available_array == 0 and all(
                minimum <= 0 for minimum in self.minimum_output.values()
            )
            if not feasible:
                raise SolverError("Error solving the problem: Infeasible")
            return Solution(values=(), objective=0.0)

        objective = -self._row(self._total_value)
        a_eq = np.ones((1, count))
        b_eq = np.array([float(self.available_array)])

        rows: list[np.ndarray] = []
        limits: list[float] = []
        for key, terms in self._consumed_key.items():
            rows.append(self._row(terms))
            limits.append(float(self.available_key.get(key, 0)))
        for planet_id, terms in self._consumed_planet.items():
            rows.append(self._row(terms))
            limits.append(float(self.available_planet.get(planet_id, 0)))
        for resource_type_id, minimum in self.minimum_output.items():
            rows.append(-self._row(self._resource_output.get(resource_type_id, {})))
            limits.append(-float(minimum))

        result = linprog(
            objective,
            A_ub=np.vstack(rows) if rows else None,
            b_ub=np.array(limits) if rows else None,
            A_eq=a_eq,
            b_eq=b_eq,
            bounds=self._bounds,
            method="highs",
        )
        if result.status != 0:
            raise SolverError(f"Error solving the problem: {result.message}")
        return Solution(
            values=tuple(float(x) for x in result.x),
            objective=float(-result.fun),
        )