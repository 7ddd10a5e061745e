"""Coordinate text normalization for KML parsing.

Parses a KML ``<coordinates>`` string (``lon,lat[,alt]`` tuples separated by
whitespace) into ``(lon, lat)`` pairs. A tuple is dropped when it has fewer
than two components or a component is not a number; the remaining tuples
are unaffected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from drone_track.parsers.parse_kml._constants import MIN_COORDINATE_COMPONENTS
from drone_track.utils.helpers import parse_coordinate_value

if TYPE_CHECKING:
    from collections.abc import Callable

    from drone_track.models.coordinates import Coordinate


def parse_coordinates_text(
    text: str, on_skip: Callable[[str, str], None] | None = None
) -> list[Coordinate]:
    """Parse KML coordinate text to ``(lon, lat)`` tuples, dropping bad tuples.

    Args:
        text: Raw ``<coordinates>`` text.
        on_skip: Called with ``(point, reason)`` for each dropped tuple.
    """
    coords: list[Coordinate] = []
    for point in text.split():
        parts = point.split(",")
        if len(parts) < MIN_COORDINATE_COMPONENTS:
            if on_skip is not None:
                on_skip(point, "fewer than 2 components")
            continue
        lon = parse_coordinate_value(parts[0])
        lat = parse_coordinate_value(parts[1])
        if lon is None or lat is None:
            if on_skip is not None:
                on_skip(point, "non-numeric longitude or latitude")
            continue
        coords.append((lon, lat))
    return coords
