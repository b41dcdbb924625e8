import numpy as np
import pytest

from meshingest.model.mesh_data import MeshFormat, ParsedMesh, RawTriangleBuffer, Region
from meshingest.model.geometry_primitives import Vector


def test_buffer_requires_parallel_arrays():
    with pytest.raises(ValueError, match="mismatch"):
        RawTriangleBuffer(np.zeros(9), np.zeros(18))


def test_buffer_requires_whole_triangles():
    with pytest.raises(ValueError, match="multiple of 9"):
        RawTriangleBuffer(np.zeros(6), np.zeros(6))


def test_buffer_counts_and_concatenate():
    a = RawTriangleBuffer(np.arange(9), np.zeros(9))
    b = RawTriangleBuffer(np.arange(18), np.ones(18))

    c = a.concatenate(b)

    assert (c.triangle_count, c.vertex_count) == (3, 9)
    assert c.positions.dtype == np.float32
    assert a.triangle_count == 1


def test_parsed_mesh_totals():
    regions = [
        Region("a", 1, RawTriangleBuffer(np.zeros(18), np.zeros(18))),
        Region("b", 2, RawTriangleBuffer.empty()),
    ]
    parsed = ParsedMesh(regions, Vector(0, 0, 0), 1.0, MeshFormat.OBJ)

    assert parsed.total_faces == 2
    assert parsed.total_vertices == 6
    assert parsed.total_vertices == 3 * parsed.total_faces


def test_vector_requires_all_three_components():
    with pytest.raises(TypeError):
        Vector(1.0, 2.0)


def test_vector_normalize_and_zero_vector():
    assert Vector(0.0, 3.0, 4.0).normalize().to_tuple() == pytest.approx((0.0, 0.6, 0.8))
    assert Vector(0.0, 0.0, 0.0).normalize() == Vector(0.0, 0.0, 0.0)
    assert Vector.from_array(np.array([1, 2, 3])) == Vector(1.0, 2.0, 3.0)
