"""
VTK Utilities
Helper functions that turn triangle-soup surfaces into PyVista datasets.
"""
from __future__ import annotations

import logging
from typing import Iterable, TYPE_CHECKING

import numpy as np
import pyvista as pv

from meshingest.geometry.normals import area_weighted_normal

if TYPE_CHECKING:
    import numpy.typing as npt
    from meshingest.model.mesh_data import RawTriangleBuffer, Surface

logger = logging.getLogger(__name__)


class VtkUtils:
    @staticmethod
    def triangle_cells(triangle_count: int) -> npt.NDArray[np.int_]:
        """
        VTK face connectivity for triangle soup: ``[3, i, i+1, i+2, 3, ...]``.
        """
        corners = np.arange(3 * triangle_count, dtype=np.int_).reshape(-1, 3)
        sizes = np.full((triangle_count, 1), 3, dtype=np.int_)
        return np.hstack([sizes, corners]).ravel()

    @staticmethod
    def buffer_to_polydata(geometry: RawTriangleBuffer) -> pv.PolyData:
        """Convert a triangle buffer to PolyData with per-point "Normals"."""
        if geometry.triangle_count == 0:
            return pv.PolyData()

        points = geometry.positions.reshape(-1, 3)
        pd = pv.PolyData(points, VtkUtils.triangle_cells(geometry.triangle_count))
        pd.point_data["Normals"] = geometry.normals.reshape(-1, 3)
        return pd

    @staticmethod
    def surface_to_polydata(surface: Surface) -> pv.PolyData:
        """
        PolyData for one surface. The boundary tag, name and lumping info are
        stored as field data so they survive a round trip through VTK files.
        """
        pd = VtkUtils.buffer_to_polydata(surface.geometry)
        pd.field_data["tag"] = np.array([surface.tag])
        pd.field_data["name"] = np.array([surface.name])
        pd.field_data["original_region_count"] = np.array([surface.original_region_count])
        return pd

    @staticmethod
    def surfaces_to_multiblock(surfaces: Iterable[Surface]) -> pv.MultiBlock:
        """One block per surface, keyed by surface id."""
        blocks = pv.MultiBlock()
        for surface in surfaces:
            blocks.append(VtkUtils.surface_to_polydata(surface), surface.id)
        logger.debug(f"Built MultiBlock with {blocks.n_blocks} surfaces.")
        return blocks

    @staticmethod
    def visualization_plane(surface: Surface, size: float = 2.0) -> pv.PolyData:
        """
        Square plane through the surface centroid, oriented along the
        area-weighted surface normal. Used to place slicing/visualization planes.
        """
        normal = area_weighted_normal(surface.geometry)
        if surface.geometry.triangle_count:
            center = surface.geometry.positions.reshape(-1, 3).astype(np.float64).mean(axis=0)
        else:
            center = np.zeros(3)
        return pv.Plane(center=center, direction=normal.to_tuple(), i_size=size, j_size=size)
