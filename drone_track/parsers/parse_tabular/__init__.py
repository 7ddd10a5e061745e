"""Delimited-text flight-log parsing: composable pipeline.

Extracts the flight path from CSV-like drone log exports whose delimiter
and column layout are not known in advance.

The parsing pipeline is split into focused stages:
- **_framing**: optional narrowing to a CSV block embedded in a larger export
- **_detection**: delimiter inference and latitude/longitude schema resolution
- **_normalization**: field splitting for literal and whitespace-run delimiters
- **_validation**: exception types and row width checks

Row handling:
- Blank lines are ignored
- A row whose width differs from the header aborts the parse under the
  ``strict`` row policy (the schema assumption is wrong for this file) and
  is skipped under ``lenient``
- A row with a non-numeric latitude or longitude is skipped; one bad value
  does not abort the file
- Fewer than two accepted rows is a failure

The input is read line by line; only the detection sample is held in memory.
"""

from __future__ import annotations

import io
import logging
from itertools import chain
from typing import TYPE_CHECKING, BinaryIO

from drone_track.core.config import ParserConfig
from drone_track.core.constants import MIN_LINE_POINTS
from drone_track.core.events import LoggingListener, ParseListener
from drone_track.core.exceptions import StreamReadError
from drone_track.models.coordinates import CoordinateSequence
from drone_track.parsers.geometry import InsufficientCoordinatesError, assemble_line_string
from drone_track.parsers.parse_tabular._constants import INPUT_ENCODING
from drone_track.parsers.parse_tabular._detection import (
    detect_delimiter,
    detect_schema,
    resolve_schema,
)
from drone_track.parsers.parse_tabular._framing import iter_embedded_block
from drone_track.parsers.parse_tabular._normalization import split_fields
from drone_track.parsers.parse_tabular._validation import (
    RowWidthError,
    SchemaDetectionError,
    TabularParseError,
    check_row_width,
)
from drone_track.utils.helpers import parse_coordinate_value

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from shapely.geometry import LineString

    from drone_track.models.schema import DetectionResult

logger = logging.getLogger("drone_track.parsers.parse_tabular")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "RowWidthError",
    "SchemaDetectionError",
    "TabularParseError",
    "detect_delimiter",
    "detect_schema",
    "extract_tabular_coordinates",
    "iter_embedded_block",
    "parse_coordinate_value",
    "parse_tabular",
    "resolve_schema",
    "split_fields",
]


def parse_tabular(
    source: BinaryIO | bytes,
    *,
    config: ParserConfig | None = None,
    listener: ParseListener | None = None,
    source_filename: str = "",
) -> LineString:
    """Parse a delimited-text flight log into a ``LineString``.

    Args:
        source: Readable binary stream (or the raw bytes) of the log.
        config: Parser configuration; defaults to ``ParserConfig()``.
        listener: Receives row accept/skip events; defaults to a
            ``LoggingListener``.
        source_filename: Name of the log, used in log messages only.

    Returns:
        The flight path as ``(lon, lat)`` vertices in file order.

    Raises:
        SchemaDetectionError: If the header has no latitude or longitude field.
        RowWidthError: If a row's width differs from the header (strict policy).
        TabularParseError: If the embedded block marker is missing.
        InsufficientCoordinatesError: If fewer than two rows are usable.
        StreamReadError: If reading the stream fails.
    """
    coords = extract_tabular_coordinates(
        source, config=config, listener=listener, source_filename=source_filename
    )
    return assemble_line_string(coords.to_flat())


def extract_tabular_coordinates(
    source: BinaryIO | bytes,
    *,
    config: ParserConfig | None = None,
    listener: ParseListener | None = None,
    source_filename: str = "",
) -> CoordinateSequence:
    """Extract the ordered ``(lon, lat)`` coordinates of a delimited-text log.

    Same contract as ``parse_tabular`` without the final geometry assembly.
    The returned sequence always holds at least two coordinates.
    """
    config = config or ParserConfig()
    listener = listener or LoggingListener(logger)
    label = source_filename or "<stream>"

    lines: Iterable[tuple[int, str]] = _iter_numbered_lines(source)
    if config.embedded_block:
        lines = iter_embedded_block(
            lines, config.embedded_block_start, config.embedded_block_end
        )
    lines = iter(lines)

    sample = _read_sample(lines, config.sample_lines)
    detection = detect_schema([line for _, line in sample])
    header_pos = next(i for i, (_, line) in enumerate(sample) if line.strip())
    rows = chain(sample[header_pos + 1 :], lines)

    coords = CoordinateSequence()
    skipped = _extract_rows(rows, detection, config.row_policy, coords, listener)

    logger.info(
        "Parsed delimited log | source=%s | accepted=%d | skipped=%d",
        label,
        len(coords),
        skipped,
    )
    if len(coords) < MIN_LINE_POINTS:
        raise InsufficientCoordinatesError(len(coords))
    return coords


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _iter_numbered_lines(source: BinaryIO | bytes) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs, 1-based, decoding as UTF-8."""
    stream = io.BytesIO(source) if isinstance(source, bytes | bytearray) else source
    text = io.TextIOWrapper(stream, encoding=INPUT_ENCODING, errors="replace", newline=None)
    try:
        yield from enumerate(text, start=1)
    except OSError as exc:
        msg = f"Error reading delimited log: {exc}"
        raise StreamReadError(msg) from exc
    finally:
        # Leave the caller's stream open
        text.detach()


def _read_sample(lines: Iterator[tuple[int, str]], limit: int) -> list[tuple[int, str]]:
    """Consume lines until ``limit`` non-blank lines (or the end) are read."""
    sample: list[tuple[int, str]] = []
    non_blank = 0
    for numbered in lines:
        sample.append(numbered)
        if numbered[1].strip():
            non_blank += 1
            if non_blank >= limit:
                break
    return sample


def _extract_rows(
    rows: Iterable[tuple[int, str]],
    detection: DetectionResult,
    row_policy: str,
    coords: CoordinateSequence,
    listener: ParseListener,
) -> int:
    """Append each usable row's coordinate to ``coords``; return the skip count."""
    schema = detection.schema
    skipped = 0
    for line_number, line in rows:
        if not line.strip():
            continue

        fields = split_fields(line, detection.delimiter)
        if not check_row_width(line_number, fields, detection.field_count, row_policy):
            skipped += 1
            listener.on_row_skipped(
                line_number,
                f"expected {detection.field_count} field(s), found {len(fields)}",
            )
            continue

        if len(fields) < schema.min_width:
            skipped += 1
            listener.on_row_skipped(line_number, "row too short for coordinate fields")
            continue

        lat = parse_coordinate_value(fields[schema.lat_index])
        lon = parse_coordinate_value(fields[schema.lon_index])
        if lat is None or lon is None:
            skipped += 1
            bad = fields[schema.lat_index] if lat is None else fields[schema.lon_index]
            field = "latitude" if lat is None else "longitude"
            listener.on_row_skipped(line_number, f"invalid {field} {bad!r}")
            continue

        coords.append(lon, lat)
        listener.on_row_accepted(line_number, lon, lat)
    return skipped
