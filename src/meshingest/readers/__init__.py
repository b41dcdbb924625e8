"""
File-format readers. Each reader turns raw bytes (or text) into raw,
un-normalized geometry; normalization happens once per file in the loader.
"""
from meshingest.readers.classifier import detect_format, mesh_extension
from meshingest.readers.obj import ObjDocument, ObjRegion, read_obj
from meshingest.readers.stl_ascii import read_ascii_stl
from meshingest.readers.stl_binary import is_binary_stl, read_binary_stl, read_triangle_count

__all__ = [
    "ObjDocument",
    "ObjRegion",
    "detect_format",
    "is_binary_stl",
    "mesh_extension",
    "read_ascii_stl",
    "read_binary_stl",
    "read_obj",
    "read_triangle_count",
]
