"""Data model for a KML flight-log Placemark.

Drone flight-log KML files split the track into Placemarks, one per flight
segment. Each carries a name, a free-text description, and the raw
``LineString/coordinates`` text of that segment.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Placemark:
    """A single Placemark read from a flight-log KML document.

    Attributes:
        name: Placemark name (e.g. ``"Flight Mode: P-GPS"``).
        description: Placemark description text.
        coordinates_text: Unparsed ``lon,lat[,alt]`` tuples separated by whitespace.
    """

    name: str
    description: str = ""
    coordinates_text: str = ""

    def matches(self, name_filter: str) -> bool:
        """Whether the name contains ``name_filter`` (case-sensitive)."""
        return name_filter in self.name
