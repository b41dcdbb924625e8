"""
Configuration & Constants
=========================
This module serves as the central registry for file-format constants and
per-call parsing options.

Why is this file needed?
------------------------
1. Single source: the binary STL layout, the normalization target and the OBJ
   defaults are used by several readers and must agree.
2. Explicit options: parsing has no global state. Everything that changes the
   behavior of a parse call travels in a ParseOptions instance.

Exports:
    NORMALIZED_SIZE (float): Length of the longest bounding-box edge after normalization.
    ParseOptions: Per-call switches (lumping, numeric strictness, scaling).
"""
from __future__ import annotations

from dataclasses import dataclass

# Binary STL layout: 80-byte header, uint32 triangle count, 50-byte records
STL_HEADER_SIZE: int = 80
STL_COUNT_SIZE: int = 4
STL_PREAMBLE_SIZE: int = STL_HEADER_SIZE + STL_COUNT_SIZE
STL_RECORD_SIZE: int = 50

# Writers sometimes append padding after the last record
BINARY_SIZE_TOLERANCE: int = 100

ASCII_STL_KEYWORD: str = "solid"

# Longest bounding-box edge after normalization
NORMALIZED_SIZE: float = 10.0

# OBJ defaults
DEFAULT_GROUP_NAME: str = "default"
DEFAULT_OBJECT_NAME: str = "tag_1"
DEFAULT_TAG: int = 1

# STL files always yield exactly one region with this tag
STL_REGION_TAG: int = 1

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset({".stl", ".obj"})

SURFACE_ID_PREFIX: str = "mesh-surface"


@dataclass(frozen=True)
class ParseOptions:
    """
    Switches for a single parse call.

    Attributes:
        lump_regions: Merge regions that share a name into one surface.
        strict_numbers: Raise MalformedNumericToken instead of producing NaN
            for unparsable float tokens.
        target_size: Length of the longest bounding-box edge after normalization.
        degenerate_scale: Scale used when the bounding box has zero extent
            (single point, coincident vertices or no vertices at all).
    """
    lump_regions: bool = False
    strict_numbers: bool = False
    target_size: float = NORMALIZED_SIZE
    degenerate_scale: float = 1.0

    def __post_init__(self) -> None:
        if self.target_size <= 0.0:
            raise ValueError(f"target_size must be positive, got {self.target_size}.")
        if self.degenerate_scale <= 0.0:
            raise ValueError(f"degenerate_scale must be positive, got {self.degenerate_scale}.")
