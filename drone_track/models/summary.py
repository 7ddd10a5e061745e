"""Pydantic summary model for an assembled flight path.

The summary is a read-only view of the ``LineString`` returned by a parser:
type name, point count, bounding envelope, planar length, and the first and
last points. It exists so callers can log or serialise a parse result
without depending on shapely directly.

All coordinates are WGS 84 (EPSG:4326) ``[lon, lat]`` pairs. ``length`` is
the planar length in degrees as reported by the geometry library, not a
geodesic distance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from drone_track.core.constants import WGS84_CRS

if TYPE_CHECKING:
    from shapely.geometry import LineString


class FlightPathSummary(BaseModel):
    """Summary of a flight-path geometry.

    Attributes:
        geometry_type: Geometry type name, ``"LineString"`` for parser output.
        num_points: Number of vertices in the path.
        bounding_box: ``[min_lon, min_lat, max_lon, max_lat]``.
        length: Planar path length in coordinate units (degrees).
        start: First point as ``[lon, lat]``.
        end: Last point as ``[lon, lat]``.
        crs: Coordinate reference system EPSG code.
        source_file: Name of the log the path was extracted from.
    """

    geometry_type: str = "LineString"
    num_points: int = 0
    bounding_box: list[float] = Field(default_factory=list)
    length: float = 0.0
    start: list[float] = Field(default_factory=list)
    end: list[float] = Field(default_factory=list)
    crs: str = WGS84_CRS
    source_file: str = ""


def summarize(line: LineString, *, source_file: str = "") -> FlightPathSummary:
    """Build a ``FlightPathSummary`` from an assembled ``LineString``."""
    coords = list(line.coords)
    return FlightPathSummary(
        geometry_type=line.geom_type,
        num_points=len(coords),
        bounding_box=list(line.bounds),
        length=line.length,
        start=list(coords[0][:2]) if coords else [],
        end=list(coords[-1][:2]) if coords else [],
        source_file=source_file,
    )
