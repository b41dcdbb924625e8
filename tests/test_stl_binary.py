import numpy as np
import pytest

from meshingest.config import STL_RECORD_SIZE
from meshingest.errors import CorruptBinaryStl
from meshingest.readers.stl_binary import STL_RECORD_DTYPE, is_binary_stl, read_binary_stl, read_triangle_count


def test_decode_recovers_triangles_and_normals(binary_stl):
    rng = np.random.default_rng(7)
    triangles = rng.uniform(-100, 100, size=(25, 3, 3)).astype(np.float32)
    normals = rng.uniform(-1, 1, size=(25, 3)).astype(np.float32)

    buf = read_binary_stl(binary_stl(triangles, normals))

    assert buf.triangle_count == 25
    assert buf.positions.dtype == np.float32
    np.testing.assert_array_equal(buf.as_triangles(), triangles)
    # one normal per face, repeated for each corner
    np.testing.assert_array_equal(buf.normals_as_triangles(), np.repeat(normals[:, None, :], 3, axis=1))


def test_triangle_count_read_from_offset_80(binary_stl, cube_triangles):
    data = binary_stl(cube_triangles)
    assert read_triangle_count(data) == 12
    assert len(data) == 84 + 12 * 50


def test_truncated_buffer_fails_before_decoding(binary_stl, cube_triangles):
    data = binary_stl(cube_triangles)[:-30]

    with pytest.raises(CorruptBinaryStl) as exc:
        read_binary_stl(data)

    assert exc.value.expected == 684
    assert exc.value.actual == 654
    assert exc.value.triangle_count == 12


def test_declared_count_larger_than_buffer(binary_stl, cube_triangles):
    data = binary_stl(cube_triangles, declared_count=1000)
    with pytest.raises(CorruptBinaryStl):
        read_binary_stl(data)


def test_buffer_shorter_than_preamble():
    with pytest.raises(CorruptBinaryStl):
        read_binary_stl(b"\0" * 83)


def test_zero_triangles_gives_empty_buffer(binary_stl):
    buf = read_binary_stl(binary_stl(np.empty((0, 3, 3))))
    assert buf.triangle_count == 0
    assert buf.normals.size == 0


def test_trailing_padding_is_ignored(binary_stl, cube_triangles):
    buf = read_binary_stl(binary_stl(cube_triangles, padding=b"\0" * 40))
    assert buf.triangle_count == 12


@pytest.mark.parametrize("extra, expected", [
    (0, True),
    (99, True),
    (100, False),
])
def test_size_heuristic_tolerance(binary_stl, cube_triangles, extra, expected):
    data = binary_stl(cube_triangles, padding=b"\0" * extra)
    assert is_binary_stl(data) is expected


def test_size_heuristic_short_buffer_is_not_binary():
    assert is_binary_stl(b"solid x") is False
    assert is_binary_stl(b"\0" * 83) is False


def test_record_dtype_matches_on_disk_record_size():
    assert STL_RECORD_DTYPE.itemsize == STL_RECORD_SIZE
