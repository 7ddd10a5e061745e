"""Delimiter and schema detection for delimited-text logs.

Detection works on a small sample: the header line plus a handful of data
lines. The delimiter is chosen in two phases:

1. The first literal delimiter present in the header, in priority order
   comma, tab, semicolon, pipe.
2. Otherwise whitespace-run mode, if the most common field count of the
   sample data lines is within ``WHITESPACE_FIELD_TOLERANCE`` below the
   header's count. Failing that, comma.

The schema is then resolved from the header fields by exact, case-insensitive
token match, first match per direction.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from drone_track.models.schema import Delimiter, DetectionResult, Schema
from drone_track.parsers.parse_tabular._constants import (
    DEFAULT_DELIMITER,
    LATITUDE_TOKENS,
    LITERAL_DELIMITERS,
    LONGITUDE_TOKENS,
    WHITESPACE_FIELD_TOLERANCE,
)
from drone_track.parsers.parse_tabular._normalization import split_fields
from drone_track.parsers.parse_tabular._validation import SchemaDetectionError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("drone_track.parsers.parse_tabular")


def detect_delimiter(header: str, data_lines: Sequence[str] = ()) -> Delimiter:
    """Choose the field delimiter from the header and sample data lines."""
    for delimiter in LITERAL_DELIMITERS:
        if delimiter.value in header:
            return delimiter

    expected = len(header.split())
    counts = Counter(len(line.split()) for line in data_lines if line.strip())
    if not counts:
        return DEFAULT_DELIMITER

    # most_common keeps first-seen order among equal counts
    majority, _ = counts.most_common(1)[0]
    if expected - WHITESPACE_FIELD_TOLERANCE <= majority <= expected:
        return Delimiter.WHITESPACE

    logger.debug(
        "No delimiter detected | header_fields=%d | majority_fields=%d | default=%r",
        expected,
        majority,
        DEFAULT_DELIMITER.value,
    )
    return DEFAULT_DELIMITER


def resolve_schema(header_fields: Sequence[str]) -> Schema:
    """Locate the latitude and longitude fields in a header row.

    Raises:
        SchemaDetectionError: If either field is missing.
    """
    lat_index: int | None = None
    lon_index: int | None = None
    for idx, field in enumerate(header_fields):
        token = field.strip().lower()
        if lat_index is None and token in LATITUDE_TOKENS:
            lat_index = idx
        if lon_index is None and token in LONGITUDE_TOKENS:
            lon_index = idx

    if lat_index is None or lon_index is None:
        missing = [
            name
            for name, index in (("latitude", lat_index), ("longitude", lon_index))
            if index is None
        ]
        msg = (
            f"Could not find {' and '.join(missing)} column(s) in header "
            f"{list(header_fields)!r}"
        )
        raise SchemaDetectionError(msg, tuple(header_fields))

    return Schema(lat_index=lat_index, lon_index=lon_index)


def detect_schema(sample_lines: Sequence[str]) -> DetectionResult:
    """Detect delimiter and schema from a sample whose first non-blank line is the header.

    Raises:
        SchemaDetectionError: If the sample is empty or the header lacks
            a latitude or longitude field.
    """
    lines = [line for line in sample_lines if line.strip()]
    if not lines:
        raise SchemaDetectionError("Input has no header line")

    header, data_lines = lines[0], lines[1:]
    delimiter = detect_delimiter(header, data_lines)
    header_fields = tuple(split_fields(header, delimiter))
    schema = resolve_schema(header_fields)

    logger.info(
        "Detected layout | delimiter=%r | fields=%d | lat_index=%d | lon_index=%d",
        delimiter.value,
        len(header_fields),
        schema.lat_index,
        schema.lon_index,
    )
    return DetectionResult(delimiter=delimiter, schema=schema, header_fields=header_fields)
