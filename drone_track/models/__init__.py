"""Data models and schemas.

Defines the data structures used throughout the parsers:
- Delimiter / Schema / DetectionResult: Detected layout of a delimited log
- CoordinateSequence: Ordered ``(lon, lat)`` coordinates of a flight path
- Placemark: A named flight segment read from a KML document
- FlightPathSummary: Read-only summary of an assembled path
"""

from drone_track.models.coordinates import Coordinate, CoordinateSequence
from drone_track.models.placemark import Placemark
from drone_track.models.schema import Delimiter, DetectionResult, Schema
from drone_track.models.summary import FlightPathSummary, summarize

__all__ = [
    "Coordinate",
    "CoordinateSequence",
    "Delimiter",
    "DetectionResult",
    "FlightPathSummary",
    "Placemark",
    "Schema",
    "summarize",
]
