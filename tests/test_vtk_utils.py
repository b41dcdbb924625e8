import numpy as np
import pytest

pv = pytest.importorskip("pyvista")

from meshingest import ParseOptions, load_mesh_bytes  # noqa: E402
from meshingest.model.mesh_data import RawTriangleBuffer, Surface  # noqa: E402
from meshingest.view.vtk_utils import VtkUtils  # noqa: E402


def square_surface(tag=4, name="floor"):
    positions = np.array([0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 0, 0, 1, 1, 0, 0, 1, 0], dtype=np.float32)
    normals = np.tile(np.array([0, 0, 1], dtype=np.float32), 6)
    return Surface(id="mesh-surface-1", name=name, tag=tag, geometry=RawTriangleBuffer(positions, normals))


def test_triangle_cells_layout():
    np.testing.assert_array_equal(VtkUtils.triangle_cells(2), [3, 0, 1, 2, 3, 3, 4, 5])


def test_surface_to_polydata():
    pd = VtkUtils.surface_to_polydata(square_surface())

    assert pd.n_points == 6
    assert pd.n_cells == 2
    np.testing.assert_allclose(pd.point_data["Normals"], np.tile([0, 0, 1], (6, 1)))
    assert pd.field_data["tag"][0] == 4
    assert pd.field_data["name"][0] == "floor"


def test_empty_surface_gives_empty_polydata():
    surface = Surface(id="s", name="empty", tag=1, geometry=RawTriangleBuffer.empty())
    pd = VtkUtils.surface_to_polydata(surface)
    assert pd.n_points == 0


def test_multiblock_has_one_block_per_surface(binary_stl, cube_triangles):
    result = load_mesh_bytes(binary_stl(cube_triangles), "cube.stl", ParseOptions())
    blocks = VtkUtils.surfaces_to_multiblock(result.surfaces + [square_surface()])
    assert blocks.n_blocks == 2


def test_visualization_plane_follows_area_weighted_normal():
    plane = VtkUtils.visualization_plane(square_surface(), size=1.0)
    normal = np.asarray(plane.point_normals[0])
    np.testing.assert_allclose(np.abs(normal), [0, 0, 1], atol=1e-6)
    np.testing.assert_allclose(plane.center, [0.5, 0.5, 0.0], atol=1e-6)


def test_package_root_exposes_vtk_utils():
    import meshingest

    assert meshingest.VtkUtils is VtkUtils
