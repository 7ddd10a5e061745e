"""Parse event listeners.

Parsers report per-row and per-point decisions through a ``ParseListener``
instead of printing diagnostics. Listeners observe; they never change what
a parser returns. ``LoggingListener`` is used when the caller passes none.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("drone_track.core.events")


class ParseListener:
    """Receives parse events. Every hook is a no-op by default."""

    def on_row_accepted(self, line_number: int, lon: float, lat: float) -> None:
        """A tabular row contributed the coordinate ``(lon, lat)``."""

    def on_row_skipped(self, line_number: int, reason: str) -> None:
        """A tabular row was skipped without failing the parse."""

    def on_point_skipped(self, placemark_name: str, point: str, reason: str) -> None:
        """A KML coordinate tuple was dropped."""

    def on_placemark_skipped(self, placemark_name: str) -> None:
        """A KML Placemark did not match the flight-path name filter."""


class LoggingListener(ParseListener):
    """Forwards parse events to DEBUG-level log records."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def on_row_accepted(self, line_number: int, lon: float, lat: float) -> None:
        self._log.debug("Row accepted | line=%d | lon=%s | lat=%s", line_number, lon, lat)

    def on_row_skipped(self, line_number: int, reason: str) -> None:
        self._log.debug("Row skipped | line=%d | reason=%s", line_number, reason)

    def on_point_skipped(self, placemark_name: str, point: str, reason: str) -> None:
        self._log.debug(
            "Point skipped | placemark=%s | point=%r | reason=%s", placemark_name, point, reason
        )

    def on_placemark_skipped(self, placemark_name: str) -> None:
        self._log.debug("Placemark skipped | name=%s", placemark_name)
