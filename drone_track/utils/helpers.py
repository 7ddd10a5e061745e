"""Shared helper functions used by both parser front ends.

Centralises coordinate value parsing so delimited-text rows and KML
coordinate tuples accept exactly the same numeric grammar.
"""

from __future__ import annotations

import math
import re

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
# Rejects thousands separators, underscores, nan/inf and unit or percent symbols.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_coordinate_value(text: str) -> float | None:
    """Parse a coordinate as a locale-independent base-10 float.

    Args:
        text: Raw field text. Surrounding whitespace is ignored.

    Returns:
        The value, or ``None`` if the text is not a finite decimal number
        (e.g. ``""``, ``"1,5"``, ``"12%"``, ``"nan"``, ``"1e999"``).
    """
    candidate = text.strip()
    if not _DECIMAL_RE.fullmatch(candidate):
        return None
    value = float(candidate)
    if not math.isfinite(value):
        return None
    return value
