"""
Region Lumping
==============
Collapses regions that share a name into single surfaces.

Why is this needed?
-------------------
OBJ exporters often split one physical boundary ("inlet", "wall") into many
tagged objects. For boundary-condition assignment the user wants one surface
per name, while still seeing how many original regions it was built from.

Algorithm (order sensitive):
1. Count how many regions carry each name.
2. Walk the regions sorted by tag ascending (stable). The first region of a
   name is copied into a new surface with the next sequential tag (1, 2, ...);
   later regions of that name are appended to it, in walk order.
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Union

from meshingest.config import SURFACE_ID_PREFIX
from meshingest.model.mesh_data import ParsedMesh, RawTriangleBuffer, Region, Surface

logger = logging.getLogger(__name__)


def surface_id(position: int) -> str:
    """1-based position in the output list -> stable surface id."""
    return f"{SURFACE_ID_PREFIX}-{position}"


def count_region_names(regions: Iterable[Region]) -> Counter[str]:
    return Counter(r.name for r in regions)


def lump_regions(regions: list[Region]) -> list[Surface]:
    """
    Merge same-named regions.

    Returns:
        One surface per distinct name, ordered by their new sequential tags.
        A surface built from more than one region is marked ``is_lumped``.
    """
    counts = count_region_names(regions)

    merged: dict[str, RawTriangleBuffer] = {}
    new_tags: dict[str, int] = {}

    for region in sorted(regions, key=lambda r: r.tag):
        if region.name not in merged:
            new_tags[region.name] = len(new_tags) + 1
            merged[region.name] = region.geometry.copy()
        else:
            merged[region.name] = merged[region.name].concatenate(region.geometry)

    surfaces = []
    for position, (name, geometry) in enumerate(merged.items(), start=1):
        count = counts[name]
        surfaces.append(Surface(
            id=surface_id(position),
            name=name,
            tag=new_tags[name],
            geometry=geometry,
            is_lumped=count > 1,
            original_region_count=count,
        ))
        if count > 1:
            logger.debug(f"Lumped {count} regions named '{name}' into tag {new_tags[name]}.")

    logger.info(f"Lumped {len(regions)} regions into {len(surfaces)} surfaces.")
    return surfaces


def build_surfaces(source: Union[ParsedMesh, list[Region]], lump: bool = False) -> list[Surface]:
    """
    Turn parsed regions into surfaces.

    Without lumping every region becomes its own surface with its original
    tag and geometry, ``is_lumped=False`` and ``original_region_count=1``.
    """
    regions = source.regions if isinstance(source, ParsedMesh) else source
    if lump:
        return lump_regions(regions)

    return [
        Surface(id=surface_id(position), name=r.name, tag=r.tag, geometry=r.geometry)
        for position, r in enumerate(regions, start=1)
    ]
