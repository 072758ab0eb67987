"""Checks that requested materials can be harvested at all."""

from __future__ import annotations

from typing import Iterable, Sequence

from eve_anchor.data import Catalog, default_catalog
from eve_anchor.resource import Material, Outpost, celestial_resources_by_outpost


class MaterialsUnavailableError(AssertionError):
    """Raised when some materials have no source near the given outposts."""

    def __init__(self, messages: Sequence[str], missing: Sequence[Material]) -> None:
        super().__init__("\n".join(messages))
        self.messages = list(messages)
        self.missing = list(missing)


def _available(material: Material, outposts: Sequence[Outpost], catalog: Catalog) -> bool:
    return any(
        resource.resource_type_id == material.resource_type_id
        for outpost in outposts
        for resource in celestial_resources_by_outpost(outpost, catalog)
    )


def assert_materials_available(
    materials: Iterable[Material],
    outposts: Iterable[Outpost],
    catalog: Catalog | None = None,
) -> None:
    """Raise MaterialsUnavailableError naming every material no outpost can reach."""
    catalog = catalog or default_catalog()
    outposts = list(outposts)
    names = ", ".join(outpost.name for outpost in outposts)
    missing = [
        material
        for material in materials
        if not _available(material, outposts, catalog)
    ]
    if missing:
        messages = [
            f"There is no known source of {material.name} for {names}"
            for material in missing
        ]
        raise MaterialsUnavailableError(messages, missing)