"""Shared parser constants, single source of truth.

Centralises defaults that are used both by ``ParserConfig`` and by the
parser front ends, so the environment layer and the function defaults
cannot drift apart.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Tabular front end
# ---------------------------------------------------------------------------

DEFAULT_SAMPLE_LINES: int = 6
"""Header plus up to five data lines inspected for delimiter detection."""

MIN_SAMPLE_LINES: int = 2
"""Whitespace-run detection needs the header and at least one data line."""

ROW_POLICY_STRICT: str = "strict"
"""A data row whose width differs from the header aborts the parse."""

ROW_POLICY_LENIENT: str = "lenient"
"""A data row whose width differs from the header is skipped."""

ROW_POLICIES: frozenset[str] = frozenset({ROW_POLICY_STRICT, ROW_POLICY_LENIENT})

DEFAULT_EMBEDDED_BLOCK_START: str = "count(10HZ)"
"""Header marker of a CSV block embedded in a larger export document."""

DEFAULT_EMBEDDED_BLOCK_END: str = "</document_content>"
"""Line marker that terminates an embedded CSV block."""

# ---------------------------------------------------------------------------
# KML front end
# ---------------------------------------------------------------------------

DEFAULT_PLACEMARK_NAME_FILTER: str = "Flight Mode"
"""Placemarks whose name contains this substring carry the flight track."""

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

MIN_LINE_POINTS: int = 2
"""A line geometry needs at least two points."""

WGS84_CRS: str = "EPSG:4326"
