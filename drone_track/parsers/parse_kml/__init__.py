"""KML/KMZ flight-log parsing: composable pipeline.

Extracts the flight path from KML flight-log exports, zipped (KMZ) or not.

The parsing pipeline is split into focused stages:
- **_container**: zip signature detection and KMZ unwrapping
- **_validation**: exception types and safe XML parsing
- **_lxml_parser**: reading Placemarks from the fixed document shape
- **_normalization**: parsing ``<coordinates>`` text

Only Placemarks whose name contains the configured filter (``"Flight Mode"``
by default) contribute points; the logging apps put the flight track there
and use other Placemarks for home points and annotations. Points from all
matching Placemarks are concatenated in document order.

Unlike the tabular path the whole input is buffered: both the zip directory
and the XML document need random access.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, BinaryIO

from drone_track.core.config import ParserConfig
from drone_track.core.constants import MIN_LINE_POINTS
from drone_track.core.events import LoggingListener, ParseListener
from drone_track.core.exceptions import StreamReadError
from drone_track.models.coordinates import CoordinateSequence
from drone_track.parsers.geometry import InsufficientCoordinatesError, assemble_line_string
from drone_track.parsers.parse_kml._constants import ZIP_SIGNATURE
from drone_track.parsers.parse_kml._container import extract_kml_from_kmz, is_kmz
from drone_track.parsers.parse_kml._lxml_parser import iter_placemarks
from drone_track.parsers.parse_kml._normalization import parse_coordinates_text
from drone_track.parsers.parse_kml._validation import (
    KmlParseError,
    KmzArchiveError,
    parse_kml_root,
)

if TYPE_CHECKING:
    from shapely.geometry import LineString

logger = logging.getLogger("drone_track.parsers.parse_kml")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "ZIP_SIGNATURE",
    "KmlParseError",
    "KmzArchiveError",
    "extract_kml_coordinates",
    "extract_kml_from_kmz",
    "is_kmz",
    "iter_placemarks",
    "parse_coordinates_text",
    "parse_kml",
    "parse_kml_root",
]


def parse_kml(
    source: BinaryIO | bytes,
    *,
    config: ParserConfig | None = None,
    listener: ParseListener | None = None,
    source_filename: str = "",
) -> LineString:
    """Parse a KML or KMZ flight log into a ``LineString``.

    Args:
        source: Readable binary stream (or the raw bytes) of the log.
        config: Parser configuration; defaults to ``ParserConfig()``.
        listener: Receives Placemark and point skip events; defaults to a
            ``LoggingListener``.
        source_filename: Name of the log, used in log messages only.

    Returns:
        The flight path as ``(lon, lat)`` vertices in document order.

    Raises:
        KmzArchiveError: If a zip-framed input is not a valid archive or
            has no ``.kml`` entry.
        KmlParseError: If the KML is empty, not valid XML, or not KML.
        InsufficientCoordinatesError: If matching Placemarks yield fewer
            than two points.
        StreamReadError: If reading the stream fails.
    """
    coords = extract_kml_coordinates(
        source, config=config, listener=listener, source_filename=source_filename
    )
    return assemble_line_string(coords.to_flat())


def extract_kml_coordinates(
    source: BinaryIO | bytes,
    *,
    config: ParserConfig | None = None,
    listener: ParseListener | None = None,
    source_filename: str = "",
) -> CoordinateSequence:
    """Extract the ordered ``(lon, lat)`` coordinates of a KML/KMZ flight log.

    Same contract as ``parse_kml`` without the final geometry assembly.
    The returned sequence always holds at least two coordinates.
    """
    config = config or ParserConfig()
    listener = listener or LoggingListener(logger)
    label = source_filename or "<stream>"

    data = _read_all(source)
    kmz = is_kmz(data)
    if kmz:
        data = extract_kml_from_kmz(data)

    root = parse_kml_root(data)

    coords = CoordinateSequence()
    matched = 0
    for placemark in iter_placemarks(root):
        if not placemark.matches(config.placemark_name_filter):
            listener.on_placemark_skipped(placemark.name)
            continue
        matched += 1
        on_skip = partial(listener.on_point_skipped, placemark.name)
        coords.extend(parse_coordinates_text(placemark.coordinates_text, on_skip))

    logger.info(
        "Parsed KML log | source=%s | kmz=%s | placemarks=%d | points=%d",
        label,
        kmz,
        matched,
        len(coords),
    )
    if len(coords) < MIN_LINE_POINTS:
        raise InsufficientCoordinatesError(len(coords))
    return coords


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_all(source: BinaryIO | bytes) -> bytes:
    if isinstance(source, bytes | bytearray):
        return bytes(source)
    try:
        return source.read()
    except OSError as exc:
        msg = f"Error reading KML input: {exc}"
        raise StreamReadError(msg) from exc
