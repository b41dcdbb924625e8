"""
Parse Errors
============
Every failure raised while turning mesh bytes into regions derives from
MeshParseError, which is itself a ValueError so callers that only care about
"bad input" can catch the built-in type.
"""
from __future__ import annotations

from typing import Optional


class MeshParseError(ValueError):
    """Base class for all mesh ingestion errors."""


class UnsupportedFormat(MeshParseError):
    """The file extension is neither .stl nor .obj."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        shown = extension or "<none>"
        super().__init__(f"Unsupported mesh format: '{shown}'. Expected one of .stl, .obj.")


class CorruptBinaryStl(MeshParseError):
    """The buffer is shorter than its declared triangle count requires."""

    def __init__(self, expected: int, actual: int, triangle_count: Optional[int] = None) -> None:
        self.expected = expected
        self.actual = actual
        self.triangle_count = triangle_count
        if triangle_count is None:
            msg = f"Binary STL too short: need at least {expected} bytes, got {actual}."
        else:
            msg = (
                f"Binary STL truncated: header declares {triangle_count} triangles "
                f"({expected} bytes) but the buffer holds {actual} bytes."
            )
        super().__init__(msg)


class MalformedNumericToken(MeshParseError):
    """A float token could not be parsed (strict mode only)."""

    def __init__(self, token: Optional[str], line_number: int) -> None:
        self.token = token
        self.line_number = line_number
        if token is None:
            msg = f"Line {line_number}: missing numeric value."
        else:
            msg = f"Line {line_number}: '{token}' is not a number."
        super().__init__(msg)


class InvalidFaceIndex(MeshParseError):
    """An OBJ face refers to a vertex that does not exist."""

    def __init__(self, token: str, line_number: int, vertex_count: Optional[int] = None) -> None:
        self.token = token
        self.line_number = line_number
        self.vertex_count = vertex_count
        if vertex_count is None:
            msg = f"Line {line_number}: face index '{token}' is not an integer."
        else:
            msg = (
                f"Line {line_number}: face index '{token}' is out of range "
                f"(vertex table has {vertex_count} entries, indices are 1-based)."
            )
        super().__init__(msg)
