"""
meshingest
==========
Turns STL (binary or ASCII) and OBJ files into normalized, tagged
triangle-soup surfaces ready for rendering and boundary-condition assignment.

Typical use::

    from meshingest import ParseOptions, load_mesh_file

    result = load_mesh_file("inlet_outlet.obj", ParseOptions(lump_regions=True))
    for surface in result.surfaces:
        print(surface.tag, surface.name, surface.geometry.triangle_count)

The package never configures logging handlers itself; call
meshingest.setup_logging() to see its log output. VtkUtils (PyVista
conversion) is imported on first access, so pyvista is only needed for preview.
"""
from importlib.metadata import PackageNotFoundError, version

from meshingest.config import ParseOptions
from meshingest.controller.loader import (
    load_mesh_bytes, load_mesh_file, load_mesh_file_async, parse_mesh,
)
from meshingest.errors import (
    CorruptBinaryStl, InvalidFaceIndex, MalformedNumericToken, MeshParseError, UnsupportedFormat,
)
from meshingest.geometry.normalize import Normalization, compute_normalization
from meshingest.geometry.normals import area_weighted_normal, faces_to_buffer
from meshingest.logging_config import setup_logging
from meshingest.model.geometry_primitives import Vector
from meshingest.model.mesh_data import (
    MeshFormat, MeshImport, ParsedMesh, RawTriangleBuffer, Region, Surface,
)
from meshingest.readers import (
    detect_format, is_binary_stl, read_ascii_stl, read_binary_stl, read_obj,
)
from meshingest.surfaces.lumping import build_surfaces, lump_regions

try:
    __version__ = version("meshingest")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"


def __getattr__(name):
    # pyvista is only imported when the preview helpers are asked for
    if name == "VtkUtils":
        from meshingest.view.vtk_utils import VtkUtils
        return VtkUtils
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "CorruptBinaryStl",
    "InvalidFaceIndex",
    "MalformedNumericToken",
    "MeshFormat",
    "MeshImport",
    "MeshParseError",
    "Normalization",
    "ParseOptions",
    "ParsedMesh",
    "RawTriangleBuffer",
    "Region",
    "Surface",
    "UnsupportedFormat",
    "Vector",
    "area_weighted_normal",
    "build_surfaces",
    "compute_normalization",
    "detect_format",
    "faces_to_buffer",
    "is_binary_stl",
    "load_mesh_bytes",
    "load_mesh_file",
    "load_mesh_file_async",
    "lump_regions",
    "parse_mesh",
    "read_ascii_stl",
    "read_binary_stl",
    "read_obj",
    "setup_logging",
]
