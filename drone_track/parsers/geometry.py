"""Geometry assembly shared by both parser front ends.

Turns a flat ``[lon0, lat0, lon1, lat1, ...]`` list into a shapely
``LineString``. shapely is only called once the preconditions hold: an even
number of values describing at least two points.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from drone_track.core.constants import MIN_LINE_POINTS
from drone_track.core.exceptions import ContractError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shapely.geometry import LineString

logger = logging.getLogger("drone_track.parsers.geometry")


class InsufficientCoordinatesError(ValidationError):
    """Raised when fewer than two coordinate pairs are available for a path.

    Attributes:
        count: Number of coordinate pairs actually collected.
    """

    default_stage = "assemble_geometry"
    default_code = "INSUFFICIENT_COORDINATES"

    def __init__(self, count: int, **kwargs: object) -> None:
        self.count = count
        msg = (
            f"Not enough valid coordinates to form a LineString: "
            f"found {count} point(s), need at least {MIN_LINE_POINTS}"
        )
        super().__init__(msg, **kwargs)


class GeometryContractError(ContractError):
    """Raised when the flat coordinate list has an odd number of values."""

    default_stage = "assemble_geometry"
    default_code = "GEOMETRY_CONTRACT_VIOLATED"


def assemble_line_string(flat_coords: Sequence[float]) -> LineString:
    """Build a ``LineString`` from a flat ``(lon, lat)`` value list.

    Args:
        flat_coords: ``[lon0, lat0, lon1, lat1, ...]`` in path order.

    Returns:
        An immutable 2-D ``LineString``.

    Raises:
        GeometryContractError: If ``flat_coords`` has an odd length.
        InsufficientCoordinatesError: If it describes fewer than two points.
    """
    from shapely.geometry import LineString

    if len(flat_coords) % 2:
        msg = f"Flat coordinate list must have an even length, got {len(flat_coords)} value(s)"
        raise GeometryContractError(msg)

    point_count = len(flat_coords) // 2
    if point_count < MIN_LINE_POINTS:
        raise InsufficientCoordinatesError(point_count)

    points = list(zip(flat_coords[0::2], flat_coords[1::2], strict=True))
    line = LineString(points)
    logger.debug("Assembled LineString | points=%d", point_count)
    return line
