"""Drone flight-path extraction.

Reads drone-control log exports (delimited text or KML/KMZ archives),
locates the latitude/longitude data without a known schema, and assembles
the flight path as a shapely ``LineString``.
"""

__version__ = "0.1.0"
