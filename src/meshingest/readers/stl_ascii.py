"""
ASCII STL Reader
================
Line-oriented grammar::

    solid <name>
      facet normal nx ny nz
        outer loop
          vertex x y z   (x3)
        endloop
      endfacet
    endsolid <name>

Only ``facet normal`` and ``vertex`` lines carry data; every other line is
ignored.
"""
from __future__ import annotations

import logging

import numpy as np

from meshingest.model.mesh_data import RawTriangleBuffer
from meshingest.readers.numeric import parse_xyz

logger = logging.getLogger(__name__)

ZERO_NORMAL = (0.0, 0.0, 0.0)


def read_ascii_stl(data: bytes | str, strict: bool = False) -> RawTriangleBuffer:
    """
    Decode an ASCII STL into triangle soup.

    Each vertex gets the normal of the most recent ``facet normal`` line. A
    vertex that appears before any facet line gets a zero normal.

    Args:
        data: Raw bytes (decoded as UTF-8, BOM stripped, invalid bytes replaced) or text.
        strict: Raise MalformedNumericToken on non-numeric tokens instead of
            storing NaN.
    """
    text = bytes(data).decode("utf-8-sig", errors="replace") if isinstance(data, (bytes, bytearray, memoryview)) else data

    positions: list[tuple[float, float, float]] = []
    normals: list[tuple[float, float, float]] = []
    pending_normal: tuple[float, float, float] | None = None
    orphan_vertices = 0

    for line_number, line in enumerate(text.splitlines(), start=1):
        trimmed = line.strip()

        if trimmed.startswith("facet normal"):
            pending_normal = parse_xyz(trimmed.split(), 2, line_number, strict)
        elif trimmed.startswith("vertex"):
            positions.append(parse_xyz(trimmed.split(), 1, line_number, strict))
            if pending_normal is None:
                orphan_vertices += 1
                normals.append(ZERO_NORMAL)
            else:
                normals.append(pending_normal)

    if orphan_vertices:
        logger.warning(f"{orphan_vertices} vertices appear before any 'facet normal' line, using zero normals.")

    leftover = len(positions) % 3
    if leftover:
        logger.warning(f"Dropping {leftover} trailing vertices that do not complete a triangle.")
        del positions[-leftover:]
        del normals[-leftover:]

    logger.info(f"Parsed ASCII STL: {len(positions) // 3} triangles.")
    return RawTriangleBuffer(
        positions=np.array(positions, dtype=np.float32).reshape(-1),
        normals=np.array(normals, dtype=np.float32).reshape(-1),
    )
