"""
OBJ Reader
==========
Supported subset:
    v x y z          vertex (global, 1-based table in file order)
    g <name>         current group name ("default" if omitted)
    o <name>         tag taken from a ``tag_<digits>`` pattern in the name
    f a b c [d]      triangle or quad; ``a/t/n`` suffixes are ignored

Faces are collected per region, keyed by (group name, tag). Quads are split
into (v0, v1, v2) and (v0, v2, v3); polygons with any other vertex count are
dropped. Comments (#), blank lines and other directives are ignored.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from meshingest.config import DEFAULT_GROUP_NAME, DEFAULT_OBJECT_NAME, DEFAULT_TAG
from meshingest.errors import InvalidFaceIndex
from meshingest.readers.numeric import parse_xyz

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r"tag_(\d+)", re.IGNORECASE)

Triangle = tuple[int, int, int]


@dataclass
class ObjRegion:
    """Triangles (1-based index triples) that share one (group, tag) pair."""
    name: str
    tag: int
    faces: list[Triangle] = field(default_factory=list)
    face_lines: list[int] = field(default_factory=list)

    @property
    def key(self) -> str:
        return f"{self.name}_{self.tag}"

    def add(self, triangle: Triangle, line_number: int) -> None:
        self.faces.append(triangle)
        self.face_lines.append(line_number)

    def faces_array(self) -> npt.NDArray[np.int64]:
        return np.array(self.faces, dtype=np.int64).reshape(-1, 3)


@dataclass
class ObjDocument:
    vertices: npt.NDArray[np.float64]
    regions: list[ObjRegion]

    @property
    def face_count(self) -> int:
        return sum(len(r.faces) for r in self.regions)

    def region(self, key: str) -> ObjRegion:
        for r in self.regions:
            if r.key == key:
                return r
        raise KeyError(key)


def _face_index(token: str, line_number: int) -> int:
    head = token.split("/")[0]
    try:
        return int(head)
    except ValueError:
        raise InvalidFaceIndex(token, line_number) from None


def _validate_indices(doc: ObjDocument) -> None:
    n = len(doc.vertices)
    for region in doc.regions:
        if not region.faces:
            continue
        idx = region.faces_array()
        bad = (idx < 1) | (idx > n)
        if bad.any():
            row = int(np.argmax(bad.any(axis=1)))
            value = int(idx[row][bad[row]][0])
            raise InvalidFaceIndex(str(value), region.face_lines[row], vertex_count=n)


def read_obj(data: bytes | str, strict: bool = False) -> ObjDocument:
    """
    Parse OBJ text into a vertex table and ordered regions.

    Regions keep the order in which their (group, tag) pair was first seen,
    either through an ``o`` line or through the first face that needed it.

    Raises:
        InvalidFaceIndex: a face index is not an integer or points outside
            the vertex table.
        MalformedNumericToken: strict mode only, a vertex coordinate is not
            a number.
    """
    text = bytes(data).decode("utf-8-sig", errors="replace") if isinstance(data, (bytes, bytearray, memoryview)) else data

    vertices: list[tuple[float, float, float]] = []
    regions: dict[tuple[str, int], ObjRegion] = {}
    group_name = DEFAULT_GROUP_NAME
    tag = DEFAULT_TAG
    dropped = 0

    def current_region() -> ObjRegion:
        key = (group_name, tag)
        if key not in regions:
            regions[key] = ObjRegion(name=group_name, tag=tag)
            logger.debug(f"New region: '{group_name}' with tag {tag}")
        return regions[key]

    for line_number, line in enumerate(text.splitlines(), start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        parts = trimmed.split()
        cmd = parts[0]

        if cmd == "v":
            vertices.append(parse_xyz(parts, 1, line_number, strict))
        elif cmd == "g":
            group_name = parts[1] if len(parts) > 1 else DEFAULT_GROUP_NAME
        elif cmd == "o":
            object_name = parts[1] if len(parts) > 1 else DEFAULT_OBJECT_NAME
            match = TAG_PATTERN.search(object_name)
            if match:
                tag = int(match.group(1))
            current_region()
        elif cmd == "f":
            region = current_region()
            idx = [_face_index(token, line_number) for token in parts[1:]]
            if len(idx) == 3:
                region.add((idx[0], idx[1], idx[2]), line_number)
            elif len(idx) == 4:
                region.add((idx[0], idx[1], idx[2]), line_number)
                region.add((idx[0], idx[2], idx[3]), line_number)
            else:
                dropped += 1

    if dropped:
        logger.warning(f"Dropped {dropped} faces that are neither triangles nor quads.")

    doc = ObjDocument(
        vertices=np.array(vertices, dtype=np.float64).reshape(-1, 3),
        regions=list(regions.values()),
    )
    _validate_indices(doc)

    logger.info(f"Parsed OBJ: {len(doc.vertices)} vertices, {doc.face_count} triangles, {len(doc.regions)} regions.")
    return doc
