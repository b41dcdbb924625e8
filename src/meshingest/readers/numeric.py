"""
Float token parsing shared by the text readers.

Policy: in lenient mode (the default) a token that is missing or not a number
becomes NaN and parsing continues. In strict mode it raises
MalformedNumericToken with the 1-based line number.
"""
from __future__ import annotations

import math
from typing import Sequence

from meshingest.errors import MalformedNumericToken


def parse_float(token: str | None, line_number: int, strict: bool = False) -> float:
    if token is not None:
        try:
            return float(token)
        except ValueError:
            pass
    if strict:
        raise MalformedNumericToken(token, line_number)
    return math.nan


def parse_xyz(parts: Sequence[str], start: int, line_number: int, strict: bool = False) -> tuple[float, float, float]:
    """Parse three consecutive tokens beginning at ``parts[start]``."""
    def token(i: int) -> str | None:
        return parts[i] if i < len(parts) else None

    return (
        parse_float(token(start), line_number, strict),
        parse_float(token(start + 1), line_number, strict),
        parse_float(token(start + 2), line_number, strict),
    )
