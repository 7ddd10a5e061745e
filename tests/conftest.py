"""Shared pytest fixtures for the drone-track test suite."""

from __future__ import annotations

import io
import zipfile
from pathlib import Path

import pytest

from drone_track.core.events import ParseListener

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


# ---------------------------------------------------------------------------
# Sample log fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def comma_csv(data_dir: Path) -> Path:
    """Comma-separated export with a dropout row and a blank line."""
    return data_dir / "litchi_export.csv"


@pytest.fixture()
def whitespace_log(data_dir: Path) -> Path:
    """Whitespace-aligned export with no literal delimiter."""
    return data_dir / "whitespace_export.txt"


@pytest.fixture()
def embedded_block_log(data_dir: Path) -> Path:
    """Export whose CSV block is embedded in a larger document."""
    return data_dir / "embedded_10hz.txt"


@pytest.fixture()
def flight_kml(data_dir: Path) -> Path:
    """KML flight log with two flight-mode Placemarks and a home point."""
    return data_dir / "flight_log.kml"


@pytest.fixture()
def flight_kmz(flight_kml: Path) -> bytes:
    """``flight_log.kml`` zipped as a KMZ archive."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("files/readme.txt", "not a kml")
        zf.writestr("doc.kml", flight_kml.read_bytes())
    return buf.getvalue()


# ---------------------------------------------------------------------------
# Listener fixture
# ---------------------------------------------------------------------------


class RecordingListener(ParseListener):
    """Collects every parse event for assertions."""

    def __init__(self) -> None:
        self.accepted: list[tuple[int, float, float]] = []
        self.skipped_rows: list[tuple[int, str]] = []
        self.skipped_points: list[tuple[str, str, str]] = []
        self.skipped_placemarks: list[str] = []

    def on_row_accepted(self, line_number: int, lon: float, lat: float) -> None:
        self.accepted.append((line_number, lon, lat))

    def on_row_skipped(self, line_number: int, reason: str) -> None:
        self.skipped_rows.append((line_number, reason))

    def on_point_skipped(self, placemark_name: str, point: str, reason: str) -> None:
        self.skipped_points.append((placemark_name, point, reason))

    def on_placemark_skipped(self, placemark_name: str) -> None:
        self.skipped_placemarks.append(placemark_name)


@pytest.fixture()
def recorder() -> RecordingListener:
    """A listener that records all parse events."""
    return RecordingListener()
