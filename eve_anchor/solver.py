"""Solving the harvest problem for a set of outposts."""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Iterable

import numpy as np

from eve_anchor.cache import Cache
from eve_anchor.data import Catalog, default_catalog
from eve_anchor.objective import map_constellation, map_objective
from eve_anchor.problem import ResourceHarvestProblem
from eve_anchor.resource import CelestialResource, Material, Outpost

logger = logging.getLogger(__name__)

FUEL_MATERIAL_ID = 42002000014
FUEL_GJ_PER_UNIT = 13.0
FUEL_GJ_NEEDED = 18000.0


def _format_number(value: float) -> str:
    """Shortest plain decimal form of ``value``, without a trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(float(value), trim="-")


def outposts_per_constellation(outposts: Iterable[Outpost]) -> list[tuple[str, int]]:
    """Count the outposts that carry each name."""
    counts = Counter(outpost.name for outpost in outposts)
    return list(counts.items())


def solve_for_constellation(
    outposts: Iterable[Outpost],
    materials: Iterable[Material],
    days: float,
    cache: Cache,
    catalog: Catalog | None = None,
) -> list[tuple[CelestialResource, float]]:
    """Best number of arrays on every resource the outposts can reach.

    Results are cached by outpost count, material count and days. Raises
    SolverError when the problem has no optimal solution.
    """
    outposts = list(outposts)
    materials = list(materials)
    key = f"{len(outposts)}-{len(materials)}-{_format_number(days)}"

    cached = cache.get(key)
    if cached is not None:
        logger.info("Cache hit: %s", key)
        if isinstance(cached, BaseException):
            raise cached
        return cached
    logger.info("Cache miss: %s", key)

    catalog = catalog or default_catalog()
    minimum_output, value = map_objective(materials)
    available_key, available_planet, resources = map_constellation(outposts, catalog)
    harvest = ResourceHarvestProblem(
        available_key, available_planet, minimum_output, value, days
    )
    variables = [harvest.add_resource(resource) for resource in resources]
    harvest.add_fuel(
        FUEL_MATERIAL_ID, FUEL_GJ_PER_UNIT, FUEL_GJ_NEEDED, float(len(outposts))
    )

    solution = harvest.best_production()
    result = [
        (resource, solution.value(variable))
        for resource, variable in zip(resources, variables)
    ]
    cache.set(key, result)
    return result