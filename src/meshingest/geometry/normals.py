"""
Face Normals
============
Builds flat-shaded triangle soup from indexed faces and reduces triangle soup
to one representative normal.
"""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

import numpy as np

from meshingest.model.geometry_primitives import Vector, Z_AXIS
from meshingest.model.mesh_data import RawTriangleBuffer

if TYPE_CHECKING:
    import numpy.typing as npt
    from meshingest.geometry.normalize import Normalization

logger = logging.getLogger(__name__)


def unit_face_normals(triangles: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Normalized ``(v1 - v0) x (v2 - v0)`` for an (N, 3, 3) array of triangles.

    Degenerate triangles (zero-length cross product) get a zero normal.
    """
    tri = np.asarray(triangles, dtype=np.float64).reshape(-1, 3, 3)
    cross = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
    length = np.linalg.norm(cross, axis=1)
    out = np.zeros_like(cross)
    nonzero = length > 0.0
    out[nonzero] = cross[nonzero] / length[nonzero, None]
    return out


def faces_to_buffer(
    vertices: npt.ArrayLike,
    faces: npt.ArrayLike,
    normalization: Optional[Normalization] = None,
) -> RawTriangleBuffer:
    """
    Expand 1-based triangle index triples into flat-shaded triangle soup.

    Args:
        vertices: (V, 3) vertex table.
        faces: (F, 3) 1-based vertex indices, already validated against the table.
        normalization: Transform applied to every vertex before the normals
            are computed. None keeps the raw coordinates.

    Returns:
        A buffer with 9 position and 9 normal values per face; each face's
        normal is repeated for its three corners.
    """
    table = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
    idx = np.asarray(faces, dtype=np.int64).reshape(-1, 3)
    if idx.shape[0] == 0:
        return RawTriangleBuffer.empty()

    if normalization is not None:
        table = normalization.transform(table)

    tri = table[idx - 1]
    normals = unit_face_normals(tri)

    degenerate = int(np.count_nonzero(~normals.any(axis=1)))
    if degenerate:
        logger.debug(f"{degenerate} degenerate triangle(s) received a zero normal.")

    return RawTriangleBuffer(
        positions=tri.reshape(-1),
        normals=np.repeat(normals, 3, axis=0).reshape(-1),
    )


def area_weighted_normal(geometry: Optional[RawTriangleBuffer]) -> Vector:
    """
    Representative unit normal of a triangle soup.

    Each triangle contributes the re-normalized mean of its three vertex
    normals, weighted by its area. The sum is divided by the total area and
    normalized again.

    Returns:
        The unit normal, or (0, 0, 1) for missing or empty geometry, zero total
        area, or a zero-length result.
    """
    if geometry is None or geometry.triangle_count == 0:
        return Z_AXIS

    tri = geometry.as_triangles().astype(np.float64)
    cross = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
    area = 0.5 * np.linalg.norm(cross, axis=1)

    avg = geometry.normals_as_triangles().astype(np.float64).sum(axis=1) / 3.0
    avg_len = np.linalg.norm(avg, axis=1)
    nonzero = avg_len > 0.0
    avg[nonzero] /= avg_len[nonzero, None]

    total_area = float(area.sum())
    if not total_area > 0.0:
        return Z_AXIS

    weighted = (avg * area[:, None]).sum(axis=0) / total_area
    result = Vector.from_array(weighted)
    if not result.magnitude > 0.0:
        return Z_AXIS
    return result.normalize()
