"""Shared builders for synthetic STL / OBJ inputs."""
from __future__ import annotations

import struct
from typing import Callable, Optional

import numpy as np
import pytest

# Unit cube centered at the origin, 12 outward-facing triangles
CUBE_CORNERS = np.array([
    [-0.5, -0.5, -0.5], [0.5, -0.5, -0.5], [0.5, 0.5, -0.5], [-0.5, 0.5, -0.5],
    [-0.5, -0.5, 0.5], [0.5, -0.5, 0.5], [0.5, 0.5, 0.5], [-0.5, 0.5, 0.5],
])
CUBE_FACES = np.array([
    [0, 2, 1], [0, 3, 2],  # bottom
    [4, 5, 6], [4, 6, 7],  # top
    [0, 1, 5], [0, 5, 4],  # front
    [2, 3, 7], [2, 7, 6],  # back
    [1, 2, 6], [1, 6, 5],  # right
    [3, 0, 4], [3, 4, 7],  # left
])


def face_normals(triangles: np.ndarray) -> np.ndarray:
    tri = np.asarray(triangles, dtype=np.float64).reshape(-1, 3, 3)
    cross = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
    length = np.linalg.norm(cross, axis=1, keepdims=True)
    return np.divide(cross, length, out=np.zeros_like(cross), where=length > 0)


def build_binary_stl(
    triangles,
    normals=None,
    header: bytes = b"",
    padding: bytes = b"",
    declared_count: Optional[int] = None,
) -> bytes:
    tris = np.asarray(triangles, dtype=np.float32).reshape(-1, 3, 3)
    if normals is None:
        normals = face_normals(tris)
    count = len(tris) if declared_count is None else declared_count

    out = bytearray(header.ljust(80, b"\0")[:80])
    out += struct.pack("<I", count)
    for tri, nrm in zip(tris, np.asarray(normals, dtype=np.float32)):
        out += struct.pack("<12fH", *nrm, *tri.ravel(), 0)
    return bytes(out) + padding


def build_ascii_stl(triangles, normals=None, name: str = "part") -> bytes:
    tris = np.asarray(triangles, dtype=np.float64).reshape(-1, 3, 3)
    if normals is None:
        normals = face_normals(tris)

    lines = [f"solid {name}"]
    for tri, n in zip(tris, normals):
        lines.append(f"  facet normal {n[0]:.6e} {n[1]:.6e} {n[2]:.6e}")
        lines.append("    outer loop")
        for v in tri:
            lines.append(f"      vertex {v[0]:.6e} {v[1]:.6e} {v[2]:.6e}")
        lines.append("    endloop")
        lines.append("  endfacet")
    lines.append(f"endsolid {name}")
    return "\n".join(lines).encode("ascii")


@pytest.fixture
def cube_triangles() -> np.ndarray:
    return CUBE_CORNERS[CUBE_FACES]


@pytest.fixture
def binary_stl() -> Callable[..., bytes]:
    return build_binary_stl


@pytest.fixture
def ascii_stl() -> Callable[..., bytes]:
    return build_ascii_stl
