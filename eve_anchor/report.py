"""Plain-text tables for chat messages."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from eve_anchor.data import Catalog, default_catalog
from eve_anchor.resource import CelestialResource, Material

MESSAGE_LIMIT = 1999

BILLION = 1_000_000_000.0
MILLION = 1_000_000.0
THOUSAND = 1_000.0

_Cell = tuple[str, str]


@dataclass(frozen=True)
class SolutionRow:
    celestial: str
    resource: str
    arrays: float


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(float(value), trim="-")


def _round2(value: float) -> float:
    scaled = value * 100.0
    rounded = math.floor(abs(scaled) + 0.5)
    return math.copysign(rounded, scaled) / 100.0


def _render(rows: Sequence[Sequence[_Cell]], padding: int, separator: str) -> str:
    """Lay out rows of (text, alignment) cells in aligned columns."""
    widths = [max(len(text) for text, _ in column) for column in zip(*rows)]
    pad = " " * padding
    return "".join(
        separator.join(
            f"{pad}{text:{align}{width}}{pad}"
            for (text, align), width in zip(row, widths)
        )
        + "\n"
        for row in rows
    )


def _fence(table: str) -> str:
    data = table.encode("utf-8")
    if len(data) >= MESSAGE_LIMIT:
        try:
            table = data[:MESSAGE_LIMIT].decode("utf-8")
        except UnicodeDecodeError:
            pass
    return f"```\n{table}\n```"


def format_value(value: float) -> str:
    """Abbreviate large values with a K, M or B suffix."""
    if value >= BILLION:
        return f"{value / BILLION:.3f}B"
    if value >= MILLION:
        return f"{value / MILLION:.3f}M"
    if value >= THOUSAND:
        return f"{value / THOUSAND:.3f}K"
    return _format_number(value)


def solution_table(
    key: str,
    values: Iterable[tuple[CelestialResource, float]],
    catalog: Catalog | None = None,
) -> str:
    """Table of the non-zero allocations for ``key``, sorted by celestial."""
    catalog = catalog or default_catalog()
    rows = []
    for resource, quantity in values:
        arrays = _round2(quantity)
        if arrays == 0.0 or resource.key != key:
            continue
        system = catalog.system_by_planet(resource.planet_id)
        celestial = catalog.get_celestial(resource.planet_id)
        item = catalog.get_item(resource.resource_type_id)
        if system is None or celestial is None or item is None:
            raise KeyError(f"unknown celestial resource: {resource}")
        rows.append(
            SolutionRow(
                celestial=f"{system.en_name} {celestial.celestial_index}",
                resource=item.en_name,
                arrays=arrays,
            )
        )
    rows.sort(key=lambda row: (row.celestial, row.resource, row.arrays))

    cells: list[list[_Cell]] = [
        [("Celestial", "<"), ("Resource", "<"), ("Arrays", "<")]
    ]
    cells.extend(
        [(row.celestial, "<"), (row.resource, "<"), (_format_number(row.arrays), "<")]
        for row in rows
    )
    return _fence(_render(cells, padding=0, separator=" "))


def material_table(requirements: Iterable[Material]) -> str:
    """Table of material names, quantities and valuations."""
    cells: list[list[_Cell]] = [[("Name", "<"), ("Quantity", "<"), ("Valuation", "<")]]
    cells.extend(
        [
            (material.name, "<"),
            (format_value(float(material.quantity)), ">"),
            (format_value(material.valuation), ">"),
        ]
        for material in requirements
    )
    return _fence(_render(cells, padding=1, separator=""))