"""Shared constants for KML/KMZ parsing."""

from __future__ import annotations

# First two bytes of a zip local file header ("PK")
ZIP_SIGNATURE = b"PK"

# Entry extension selected from a KMZ archive (compared as stored)
KML_EXTENSION = ".kml"

# lon and lat are the first two comma-separated components of a tuple
MIN_COORDINATE_COMPONENTS = 2

# Fixed document shape: kml/Document/Folder/Placemark
ROOT_TAG = "kml"
DOCUMENT_TAG = "Document"
FOLDER_TAG = "Folder"
PLACEMARK_TAG = "Placemark"
NAME_TAG = "name"
DESCRIPTION_TAG = "description"
LINESTRING_TAG = "LineString"
COORDINATES_TAG = "coordinates"
