"""Shared constants for delimited-text parsing."""

from __future__ import annotations

from drone_track.models.schema import Delimiter

# Literal delimiters checked against the header, highest priority first
LITERAL_DELIMITERS = (
    Delimiter.COMMA,
    Delimiter.TAB,
    Delimiter.SEMICOLON,
    Delimiter.PIPE,
)

DEFAULT_DELIMITER = Delimiter.COMMA

# Whitespace-run mode tolerates data lines with up to this many fewer
# fields than the header (merged or missing trailing fields)
WHITESPACE_FIELD_TOLERANCE = 2

# Exact, lower-cased header tokens
LATITUDE_TOKENS = frozenset({"lat", "latitude", "y"})
LONGITUDE_TOKENS = frozenset({"lon", "longitude", "longtitude", "lng", "x"})

# Input decoding ("utf-8-sig" drops a leading byte-order mark)
INPUT_ENCODING = "utf-8-sig"
