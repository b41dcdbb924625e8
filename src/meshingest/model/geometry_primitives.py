"""
Geometric Primitives shared by the readers and the normal utilities.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A point or direction in model space (normalization centers, bounds,
    representative surface normals).
    """
    x: float
    y: float
    z: float

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0, 0.0)
        return self / mag

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Vector:
        x, y, z = (float(v) for v in np.asarray(values, dtype=np.float64).reshape(3))
        return cls(x, y, z)


Z_AXIS = Vector(0.0, 0.0, 1.0)
