"""Front-end selection by file name.

Callers that know which kind of log they hold can call ``parse_tabular`` or
``parse_kml`` directly. ``parse_flight_log`` picks one from the file
extension for callers that only have a name and a stream.
"""

from __future__ import annotations

import logging
import posixpath
from typing import TYPE_CHECKING, BinaryIO

from drone_track.core.exceptions import FlightTrackError, UnsupportedFormatError
from drone_track.parsers.parse_kml import parse_kml
from drone_track.parsers.parse_tabular import parse_tabular

if TYPE_CHECKING:
    from collections.abc import Callable

    from shapely.geometry import LineString

    from drone_track.core.config import ParserConfig
    from drone_track.core.events import ParseListener

logger = logging.getLogger("drone_track.parsers.dispatch")

KML_EXTENSIONS = frozenset({".kml", ".kmz"})
TABULAR_EXTENSIONS = frozenset({".csv", ".txt", ".tsv", ".log"})


def select_parser(source_filename: str) -> Callable[..., LineString]:
    """Return the front end for ``source_filename`` by its extension.

    Raises:
        UnsupportedFormatError: If the extension is not a known log format.
    """
    ext = posixpath.splitext(source_filename.replace("\\", "/"))[1].lower()
    if ext in KML_EXTENSIONS:
        return parse_kml
    if ext in TABULAR_EXTENSIONS:
        return parse_tabular
    msg = (
        f"Unsupported flight log '{source_filename}': expected one of "
        f"{sorted(KML_EXTENSIONS | TABULAR_EXTENSIONS)}"
    )
    raise UnsupportedFormatError(msg)


def parse_flight_log(
    source: BinaryIO | bytes,
    *,
    source_filename: str,
    config: ParserConfig | None = None,
    listener: ParseListener | None = None,
) -> LineString:
    """Parse a flight log with the front end matching its file name.

    Errors raised without a ``correlation_id`` are tagged with
    ``source_filename``.

    Raises:
        UnsupportedFormatError: If the extension is not a known log format.
        FlightTrackError: Any error raised by the selected front end.
    """
    try:
        parser = select_parser(source_filename)
        logger.info("Parsing flight log: %s (%s)", source_filename, parser.__name__)
        return parser(source, config=config, listener=listener, source_filename=source_filename)
    except FlightTrackError as exc:
        if not exc.correlation_id:
            exc.correlation_id = source_filename
        raise
