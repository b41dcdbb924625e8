"""
Mesh Data Model
===============
Defines the triangle-soup containers produced by the readers.

Why is this file needed?
------------------------
1. Contract: every reader returns the same shapes, so normalization, lumping
   and visualization never need to know which file format was parsed.
2. Invariants: RawTriangleBuffer checks its own layout on construction
   (parallel float32 arrays, 9 values per triangle) so a broken buffer cannot
   travel further than the reader that produced it.

Classes:
    RawTriangleBuffer: Flat positions + normals (non-indexed, flat shaded).
    Region: A named, tagged piece of geometry straight out of a reader.
    ParsedMesh: All regions of one file plus the normalization parameters.
    Surface: A region after the (optional) lumping step.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

from meshingest.model.geometry_primitives import Vector

if TYPE_CHECKING:
    import numpy.typing as npt

FLOATS_PER_VERTEX = 3
FLOATS_PER_TRIANGLE = 9


class MeshFormat(StrEnum):
    STL_BINARY = "stl-binary"
    STL_ASCII = "stl-ascii"
    OBJ = "obj"


@dataclass
class RawTriangleBuffer:
    """
    Non-indexed triangle soup.

    ``positions`` and ``normals`` are flat float32 arrays holding 9 values per
    triangle (3 vertices x xyz). Shared vertices are duplicated, never welded.
    """
    positions: npt.NDArray[np.float32]
    normals: npt.NDArray[np.float32]

    def __post_init__(self) -> None:
        self.positions = np.ascontiguousarray(self.positions, dtype=np.float32).reshape(-1)
        self.normals = np.ascontiguousarray(self.normals, dtype=np.float32).reshape(-1)

        if self.positions.size != self.normals.size:
            raise ValueError(
                f"Position/normal length mismatch: {self.positions.size} != {self.normals.size}."
            )
        if self.positions.size % FLOATS_PER_TRIANGLE != 0:
            raise ValueError(
                f"Buffer length {self.positions.size} is not a multiple of {FLOATS_PER_TRIANGLE}."
            )

    @classmethod
    def empty(cls) -> RawTriangleBuffer:
        return cls(np.empty(0, dtype=np.float32), np.empty(0, dtype=np.float32))

    @property
    def vertex_count(self) -> int:
        return self.positions.size // FLOATS_PER_VERTEX

    @property
    def triangle_count(self) -> int:
        return self.positions.size // FLOATS_PER_TRIANGLE

    def as_triangles(self) -> npt.NDArray[np.float32]:
        """(N, 3, 3) view of the positions: triangle, corner, axis."""
        return self.positions.reshape(-1, 3, 3)

    def normals_as_triangles(self) -> npt.NDArray[np.float32]:
        return self.normals.reshape(-1, 3, 3)

    def copy(self) -> RawTriangleBuffer:
        return RawTriangleBuffer(self.positions.copy(), self.normals.copy())

    def concatenate(self, other: RawTriangleBuffer) -> RawTriangleBuffer:
        """Return a new buffer with ``other``'s triangles appended after ours."""
        return RawTriangleBuffer(
            np.concatenate((self.positions, other.positions)),
            np.concatenate((self.normals, other.normals)),
        )


@dataclass
class Region:
    """
    A tagged piece of geometry.

    ``name`` is the OBJ group name (or the STL filename stem), ``tag`` the
    positive mesh-boundary identifier used to attach boundary conditions.
    """
    name: str
    tag: int
    geometry: RawTriangleBuffer


@dataclass
class ParsedMesh:
    regions: list[Region]
    global_center: Vector
    global_scale: float
    source_format: MeshFormat
    total_vertices: int = field(init=False)
    total_faces: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_vertices = sum(r.geometry.vertex_count for r in self.regions)
        self.total_faces = sum(r.geometry.triangle_count for r in self.regions)


@dataclass
class Surface:
    """
    A region as handed to the surface-assembly layer.

    Invariant: a surface that is not lumped always stems from exactly one region.
    """
    id: str
    name: str
    tag: int
    geometry: RawTriangleBuffer
    is_lumped: bool = False
    original_region_count: int = 1

    def __post_init__(self) -> None:
        if self.original_region_count < 1:
            raise ValueError(f"Surface '{self.name}' must stem from at least one region.")
        if not self.is_lumped and self.original_region_count != 1:
            raise ValueError(
                f"Surface '{self.name}' is not lumped but claims "
                f"{self.original_region_count} original regions."
            )


@dataclass
class MeshImport:
    """Return object of the file loader: surfaces plus aggregate counts."""
    source: str
    surfaces: list[Surface]
    parsed: ParsedMesh

    @property
    def total_vertices(self) -> int:
        return self.parsed.total_vertices

    @property
    def total_faces(self) -> int:
        return self.parsed.total_faces

    @property
    def global_center(self) -> Vector:
        return self.parsed.global_center

    @property
    def global_scale(self) -> float:
        return self.parsed.global_scale
