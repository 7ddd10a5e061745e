"""Data models for the detected layout of a delimited-text log.

A log's layout is resolved once per parse from a small sample of lines:
the field ``Delimiter`` and the ``Schema`` (positions of the latitude and
longitude fields). Both are immutable and discarded when the parse ends.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Delimiter(enum.Enum):
    """Field separator of a delimited-text log.

    Values:
        COMMA, TAB, SEMICOLON, PIPE: A literal one-character separator.
        WHITESPACE: Runs of consecutive whitespace collapse into one separator.
    """

    COMMA = ","
    TAB = "\t"
    SEMICOLON = ";"
    PIPE = "|"
    WHITESPACE = "whitespace"

    @property
    def is_literal(self) -> bool:
        """Whether this delimiter is a single literal character."""
        return self is not Delimiter.WHITESPACE


@dataclass(frozen=True, slots=True)
class Schema:
    """Zero-based positions of the coordinate fields within a row.

    Attributes:
        lat_index: Index of the latitude field.
        lon_index: Index of the longitude field.
    """

    lat_index: int
    lon_index: int

    @property
    def min_width(self) -> int:
        """Smallest row width that contains both coordinate fields."""
        return max(self.lat_index, self.lon_index) + 1


@dataclass(frozen=True, slots=True)
class DetectionResult:
    """Outcome of delimiter and schema detection on a sample of lines.

    Attributes:
        delimiter: The chosen field separator.
        schema: Resolved latitude/longitude field positions.
        header_fields: Header fields as split by ``delimiter``.
    """

    delimiter: Delimiter
    schema: Schema
    header_fields: tuple[str, ...]

    @property
    def field_count(self) -> int:
        """Number of fields in the header row."""
        return len(self.header_fields)
