"""
Mesh Loader (Pipeline Orchestration)
====================================
Runs a parse call from raw bytes to surfaces.

Why is this file needed?
------------------------
1. Dispatch: it picks the reader for a file via the format classifier.
2. Normalization: it computes ONE bounding box over all vertices of a file and
   applies it to every region, exactly once, before any region is returned.
3. I/O boundary: reading the file is the only blocking step; the async
   variant moves it to a worker thread and then runs the rest synchronously.

Every call allocates fresh buffers; nothing is cached between calls.
"""
from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path, PurePath
from typing import Optional, Union

from meshingest.config import ParseOptions, STL_REGION_TAG
from meshingest.errors import MeshParseError
from meshingest.geometry.normalize import compute_normalization
from meshingest.geometry.normals import faces_to_buffer
from meshingest.model.mesh_data import MeshFormat, MeshImport, ParsedMesh, Region
from meshingest.readers.classifier import detect_format
from meshingest.readers.obj import read_obj
from meshingest.readers.stl_ascii import read_ascii_stl
from meshingest.readers.stl_binary import read_binary_stl
from meshingest.surfaces.lumping import build_surfaces

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _parse_stl(data: bytes, filename: str, fmt: MeshFormat, options: ParseOptions) -> ParsedMesh:
    if fmt == MeshFormat.STL_ASCII:
        geometry = read_ascii_stl(data, strict=options.strict_numbers)
    else:
        geometry = read_binary_stl(data)

    norm = compute_normalization(geometry.positions, options.target_size, options.degenerate_scale)
    norm.apply_inplace(geometry.positions)

    region = Region(name=PurePath(filename).stem, tag=STL_REGION_TAG, geometry=geometry)
    return ParsedMesh(
        regions=[region],
        global_center=norm.center,
        global_scale=norm.scale,
        source_format=fmt,
    )


def _parse_obj(data: bytes, options: ParseOptions) -> ParsedMesh:
    doc = read_obj(data, strict=options.strict_numbers)

    # Normalization covers the whole vertex table, before normals are computed
    norm = compute_normalization(doc.vertices, options.target_size, options.degenerate_scale)

    regions = []
    for obj_region in doc.regions:
        geometry = faces_to_buffer(doc.vertices, obj_region.faces_array(), norm)
        regions.append(Region(name=obj_region.name, tag=obj_region.tag, geometry=geometry))
        logger.debug(f"Region '{obj_region.name}' (tag {obj_region.tag}): {len(obj_region.faces)} faces")

    return ParsedMesh(
        regions=regions,
        global_center=norm.center,
        global_scale=norm.scale,
        source_format=MeshFormat.OBJ,
    )


def parse_mesh(data: bytes, filename: str, options: Optional[ParseOptions] = None) -> ParsedMesh:
    """
    Decode and normalize a mesh held in memory.

    Args:
        data: Complete file contents.
        filename: Declared file name; used for the extension and, for STL,
            as the region name (extension stripped).
        options: Parse switches; defaults to ParseOptions().

    Raises:
        UnsupportedFormat, CorruptBinaryStl, MalformedNumericToken,
        InvalidFaceIndex: see meshingest.errors.
    """
    options = options or ParseOptions()
    logger.info(f"Parsing mesh '{filename}' ({len(data)} bytes)")

    fmt = detect_format(filename, data)
    if fmt == MeshFormat.OBJ:
        parsed = _parse_obj(data, options)
    else:
        parsed = _parse_stl(data, filename, fmt, options)

    logger.info(
        f"Parsed '{filename}': {len(parsed.regions)} regions, "
        f"{parsed.total_vertices} vertices, {parsed.total_faces} faces"
    )
    return parsed


def load_mesh_bytes(data: bytes, filename: str, options: Optional[ParseOptions] = None) -> MeshImport:
    """Parse in-memory bytes and assemble surfaces (lumped if requested)."""
    options = options or ParseOptions()
    parsed = parse_mesh(data, filename, options)
    surfaces = build_surfaces(parsed, lump=options.lump_regions)
    return MeshImport(source=filename, surfaces=surfaces, parsed=parsed)


def _read_bytes(path: PathLike) -> bytes:
    file_path = Path(path)
    try:
        return file_path.read_bytes()
    except OSError as e:
        logger.exception(f"Failed to read mesh file '{file_path}': {e}")
        raise


def load_mesh_file(path: PathLike, options: Optional[ParseOptions] = None) -> MeshImport:
    """Read a .stl/.obj file from disk and run the full pipeline."""
    file_path = Path(path)
    data = _read_bytes(file_path)
    try:
        return load_mesh_bytes(data, file_path.name, options)
    except MeshParseError as e:
        logger.error(f"Could not parse '{file_path}': {e}")
        raise


async def load_mesh_file_async(path: PathLike, options: Optional[ParseOptions] = None) -> MeshImport:
    """
    Async variant of load_mesh_file.

    Only the file read is awaited (in a worker thread); decoding,
    normalization and lumping then run to completion without suspension.
    """
    file_path = Path(path)
    data = await asyncio.to_thread(_read_bytes, file_path)
    try:
        return load_mesh_bytes(data, file_path.name, options)
    except MeshParseError as e:
        logger.error(f"Could not parse '{file_path}': {e}")
        raise
