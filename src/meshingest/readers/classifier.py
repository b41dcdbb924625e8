"""
Format detection.

STL vs OBJ is decided by the file extension. Binary vs ASCII STL is decided by
content: a file is ASCII only if its 80-byte header starts with "solid"
(case-insensitive) AND the binary size heuristic says it is not binary. Some
binary exporters write "solid" into the header, so the size check wins.
"""
from __future__ import annotations

import logging
from pathlib import PurePath

from meshingest.config import ASCII_STL_KEYWORD, STL_HEADER_SIZE, SUPPORTED_EXTENSIONS
from meshingest.errors import UnsupportedFormat
from meshingest.model.mesh_data import MeshFormat
from meshingest.readers.stl_binary import is_binary_stl

logger = logging.getLogger(__name__)


def mesh_extension(filename: str) -> str:
    """Lower-cased extension including the dot; raises UnsupportedFormat otherwise."""
    ext = PurePath(filename).suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(ext)
    return ext


def has_ascii_header(data: bytes) -> bool:
    header = bytes(data[:STL_HEADER_SIZE]).decode("utf-8-sig", errors="replace")
    return header.lower().startswith(ASCII_STL_KEYWORD)


def detect_format(filename: str, data: bytes) -> MeshFormat:
    ext = mesh_extension(filename)
    if ext == ".obj":
        return MeshFormat.OBJ

    binary = is_binary_stl(data)
    fmt = MeshFormat.STL_ASCII if has_ascii_header(data) and not binary else MeshFormat.STL_BINARY
    logger.info(f"'{filename}' ({len(data)} bytes) detected as {fmt}.")
    return fmt
