"""
Binary STL Reader
=================
Layout (little-endian):
    80 bytes   header (free text, may start with "solid")
    uint32     triangle count N
    N x 50     records: normal (3 x f32), 3 vertices (9 x f32), uint16 attribute

The buffer length is validated against N before anything is decoded, so a
truncated file fails with CorruptBinaryStl instead of reading past the end.
"""
from __future__ import annotations

import logging
import struct

import numpy as np

from meshingest.config import (
    BINARY_SIZE_TOLERANCE, STL_HEADER_SIZE, STL_PREAMBLE_SIZE, STL_RECORD_SIZE,
)
from meshingest.errors import CorruptBinaryStl
from meshingest.model.mesh_data import RawTriangleBuffer

logger = logging.getLogger(__name__)

STL_RECORD_DTYPE = np.dtype([
    ("normal", "<f4", (3,)),
    ("vertices", "<f4", (3, 3)),
    ("attribute", "<u2"),
])


def read_triangle_count(data: bytes) -> int:
    """The uint32 triangle count stored right after the 80-byte header."""
    if len(data) < STL_PREAMBLE_SIZE:
        raise CorruptBinaryStl(expected=STL_PREAMBLE_SIZE, actual=len(data))
    return struct.unpack_from("<I", data, STL_HEADER_SIZE)[0]


def expected_size(triangle_count: int) -> int:
    return STL_PREAMBLE_SIZE + triangle_count * STL_RECORD_SIZE


def is_binary_stl(data: bytes) -> bool:
    """
    Size heuristic: the file length must be within BINARY_SIZE_TOLERANCE bytes
    of ``84 + N * 50``. Anything shorter than 84 bytes is never binary.
    """
    if len(data) < STL_PREAMBLE_SIZE:
        return False
    expected = expected_size(read_triangle_count(data))
    return abs(len(data) - expected) < BINARY_SIZE_TOLERANCE


def read_binary_stl(data: bytes) -> RawTriangleBuffer:
    """
    Decode a binary STL into triangle soup.

    The face normal of every record is written to all three of its vertices.

    Raises:
        CorruptBinaryStl: buffer shorter than the header or than the declared
            triangle count requires.
    """
    triangle_count = read_triangle_count(data)
    expected = expected_size(triangle_count)
    if len(data) < expected:
        raise CorruptBinaryStl(expected=expected, actual=len(data), triangle_count=triangle_count)

    logger.info(f"Parsing binary STL: {triangle_count} triangles, {len(data)} bytes.")
    if len(data) > expected:
        logger.debug(f"Ignoring {len(data) - expected} trailing bytes after the last record.")
    if triangle_count == 0:
        return RawTriangleBuffer.empty()

    records = np.frombuffer(memoryview(data), dtype=STL_RECORD_DTYPE, count=triangle_count, offset=STL_PREAMBLE_SIZE)
    positions = records["vertices"].astype(np.float32).reshape(-1)
    normals = np.repeat(records["normal"].astype(np.float32), 3, axis=0).reshape(-1)

    return RawTriangleBuffer(positions=positions, normals=normals)
