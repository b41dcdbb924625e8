"""
Global Normalization
====================
Centers a mesh on the origin and scales it uniformly so that its longest
bounding-box edge has a fixed length (10 units by default).

The bounding box is always computed over every vertex of a file, never per
region, so that the relative proportions between regions survive.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from meshingest.config import NORMALIZED_SIZE
from meshingest.model.geometry_primitives import Vector

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Normalization:
    """
    The transform ``p' = (p - center) * scale`` together with the bounds it
    was derived from.
    """
    center: Vector
    scale: float
    bounds_min: Vector
    bounds_max: Vector

    @property
    def size(self) -> Vector:
        return self.bounds_max - self.bounds_min

    @property
    def is_degenerate(self) -> bool:
        s = self.size
        return max(s.x, s.y, s.z) == 0.0

    def transform(self, points: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Return transformed copies of an (N, 3) array of points."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        return (pts - self.center.to_array()) * self.scale

    def apply_inplace(self, positions: npt.NDArray[np.float32]) -> None:
        """
        Rewrite a flat float32 position buffer in place.

        The arithmetic runs in float64 and is rounded to float32 once.
        """
        if positions.size == 0:
            return
        pts = positions.reshape(-1, 3)
        pts[...] = self.transform(pts)


def compute_normalization(
    points: npt.ArrayLike,
    target_size: float = NORMALIZED_SIZE,
    degenerate_scale: float = 1.0,
) -> Normalization:
    """
    Compute the global center and uniform scale for a set of points.

    Args:
        points: Any array reshapeable to (N, 3); flat position buffers work as is.
        target_size: Length of the longest bounding-box edge after the transform.
        degenerate_scale: Scale returned when the longest edge is zero
            (single point, coincident vertices, or no points at all).

    Returns:
        The Normalization; ``center = (min + max) / 2`` and
        ``scale = target_size / max(size)``.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)

    if pts.shape[0] == 0:
        logger.warning(f"No vertices to normalize, using identity center and scale {degenerate_scale}.")
        origin = Vector(0.0, 0.0, 0.0)
        return Normalization(origin, degenerate_scale, origin, origin)

    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    center = (lo + hi) / 2.0
    max_dim = float(np.max(hi - lo))

    if max_dim == 0.0:
        # Zero extent: no finite scale exists
        logger.warning(
            f"Degenerate bounding box (all vertices at {center.tolist()}), "
            f"falling back to scale {degenerate_scale}."
        )
        scale = degenerate_scale
    else:
        scale = target_size / max_dim

    logger.debug(f"Bounds min={lo.tolist()} max={hi.tolist()} center={center.tolist()} scale={scale:.6g}")
    return Normalization(
        center=Vector.from_array(center),
        scale=scale,
        bounds_min=Vector.from_array(lo),
        bounds_max=Vector.from_array(hi),
    )
