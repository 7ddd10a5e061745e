"""Tests for the KML/KMZ parser front end.

Covers:
- Flight-mode Placemark filtering and document-order concatenation
- KMZ detection and unwrapping (first .kml entry, case as stored)
- Malformed coordinate tuples dropped without affecting later tuples
- Empty, non-XML, and non-KML input rejection
- Insufficient points and container failures
"""

from __future__ import annotations

import io
import zipfile
from typing import TYPE_CHECKING

import pytest
from shapely.geometry import LineString

from drone_track.core.config import ParserConfig
from drone_track.core.exceptions import StreamReadError
from drone_track.parsers.geometry import InsufficientCoordinatesError
from drone_track.parsers.parse_kml import (
    KmlParseError,
    KmzArchiveError,
    extract_kml_coordinates,
    extract_kml_from_kmz,
    is_kmz,
    parse_coordinates_text,
    parse_kml,
)

if TYPE_CHECKING:
    from pathlib import Path

    from tests.conftest import RecordingListener

FLIGHT_COORDS = [
    (113.9412, 22.5431),
    (113.9413, 22.5432),
    (113.9414, 22.5433),
    (113.9415, 22.5434),
    (113.9416, 22.5435),
]


def _kml(placemarks: str, *, namespace: bool = True) -> bytes:
    xmlns = ' xmlns="http://www.opengis.net/kml/2.2"' if namespace else ""
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f"<kml{xmlns}><Document><Folder>{placemarks}</Folder></Document></kml>"
    ).encode()


def _placemark(name: str, coords: str) -> str:
    return (
        f"<Placemark><name>{name}</name><description>d</description>"
        f"<LineString><coordinates>{coords}</coordinates></LineString></Placemark>"
    )


def _zip(entries: dict[str, bytes]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buf.getvalue()


class TestFlightLogKml:
    """Parsing of a realistic flight-log KML."""

    def test_flight_mode_placemarks_in_order(
        self, flight_kml: Path, recorder: RecordingListener
    ) -> None:
        with flight_kml.open("rb") as fh:
            line = parse_kml(fh, listener=recorder, source_filename=flight_kml.name)

        assert isinstance(line, LineString)
        assert list(line.coords) == FLIGHT_COORDS
        assert recorder.skipped_placemarks == ["Home Point", "flight mode: lowercase"]
        assert recorder.skipped_points == [
            ("Flight Mode: ATTI", "bogus", "fewer than 2 components"),
        ]

    def test_kmz_gives_same_path(self, flight_kmz: bytes) -> None:
        line = parse_kml(io.BytesIO(flight_kmz))
        assert list(line.coords) == FLIGHT_COORDS

    def test_custom_name_filter(self, flight_kml: Path) -> None:
        config = ParserConfig(placemark_name_filter="Home")
        coords = extract_kml_coordinates(flight_kml.read_bytes(), config=config)
        assert coords.to_list() == [(0.0, 0.0), (1.0, 1.0)]

    def test_kml_without_namespace(self) -> None:
        data = _kml(_placemark("Flight Mode: GPS", "1,2 3,4"), namespace=False)
        assert extract_kml_coordinates(data).to_list() == [(1.0, 2.0), (3.0, 4.0)]

    def test_repeated_parses_are_identical(self, flight_kmz: bytes) -> None:
        assert extract_kml_coordinates(flight_kmz) == extract_kml_coordinates(flight_kmz)


class TestPlacemarkFilter:
    """Only names containing 'Flight Mode' contribute points."""

    def test_non_matching_placemarks_contribute_nothing(self) -> None:
        data = _kml(
            _placemark("Waypoint 1", "9,9 8,8")
            + _placemark("Flight Mode: P-GPS", "1,1 2,2")
            + _placemark("Landing", "7,7")
        )
        assert extract_kml_coordinates(data).to_list() == [(1.0, 1.0), (2.0, 2.0)]

    def test_points_concatenate_across_placemarks(self) -> None:
        data = _kml(
            _placemark("Flight Mode: A", "1,1")
            + _placemark("Flight Mode: B", "2,2 3,3")
        )
        assert extract_kml_coordinates(data).to_list() == [(1.0, 1.0), (2.0, 2.0), (3.0, 3.0)]

    def test_placemarks_outside_folder_are_ignored(self) -> None:
        data = (
            b'<kml xmlns="http://www.opengis.net/kml/2.2"><Document>'
            + _placemark("Flight Mode: GPS", "1,2 3,4").encode()
            + b"</Document></kml>"
        )
        with pytest.raises(InsufficientCoordinatesError) as exc_info:
            parse_kml(data)
        assert exc_info.value.count == 0

    def test_single_point_is_insufficient(self) -> None:
        with pytest.raises(InsufficientCoordinatesError) as exc_info:
            parse_kml(_kml(_placemark("Flight Mode: GPS", "1,2")))
        assert exc_info.value.count == 1


class TestCoordinateText:
    """Parsing of <coordinates> text."""

    def test_altitude_is_dropped(self) -> None:
        assert parse_coordinates_text("1,2,30 3,4,40") == [(1.0, 2.0), (3.0, 4.0)]

    def test_point_without_comma_is_dropped(self) -> None:
        assert parse_coordinates_text("1,2 3 4,5") == [(1.0, 2.0), (4.0, 5.0)]

    def test_non_numeric_point_is_skipped_not_zeroed(self) -> None:
        skipped: list[tuple[str, str]] = []
        coords = parse_coordinates_text(
            "1,2 x,5 6,7", lambda point, reason: skipped.append((point, reason))
        )
        assert coords == [(1.0, 2.0), (6.0, 7.0)]
        assert skipped == [("x,5", "non-numeric longitude or latitude")]

    def test_newlines_and_tabs_separate_points(self) -> None:
        assert parse_coordinates_text("\n\t1,2\n\t\t3,4\n") == [(1.0, 2.0), (3.0, 4.0)]

    def test_empty_text(self) -> None:
        assert parse_coordinates_text("   ") == []


class TestKmzContainer:
    """KMZ detection and unwrapping."""

    def test_zip_signature(self) -> None:
        assert is_kmz(b"PK\x03\x04rest")
        assert not is_kmz(b"<?xml version")
        assert not is_kmz(b"P")
        assert not is_kmz(b"")

    def test_first_kml_entry_is_used(self) -> None:
        archive = _zip({"images/icon.png": b"\x89PNG", "a.kml": b"first", "b.kml": b"second"})
        assert extract_kml_from_kmz(archive) == b"first"

    def test_extension_match_is_case_sensitive(self) -> None:
        archive = _zip({"DOC.KML": _kml(_placemark("Flight Mode: A", "1,1 2,2"))})
        with pytest.raises(KmzArchiveError, match="No KML file found in KMZ archive"):
            extract_kml_from_kmz(archive)

    def test_no_kml_entry(self) -> None:
        with pytest.raises(KmzArchiveError) as exc_info:
            parse_kml(_zip({"notes.txt": b"hello"}))
        assert exc_info.value.code == "KMZ_ARCHIVE_INVALID"
        assert "No KML file found" in str(exc_info.value)

    def test_corrupt_archive(self) -> None:
        with pytest.raises(KmzArchiveError, match="Not a valid KMZ archive"):
            parse_kml(b"PK\x03\x04this is not a zip file")

    def test_corrupt_compressed_payload(self, flight_kml: Path) -> None:
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr("doc.kml", flight_kml.read_bytes())
        raw = bytearray(buf.getvalue())
        # Local header (30 bytes) + "doc.kml" ends at 37; damage the deflate stream
        for pos in range(40, 60):
            raw[pos] ^= 0xFF

        with pytest.raises(KmzArchiveError, match="Not a valid KMZ archive") as exc_info:
            parse_kml(bytes(raw))
        assert exc_info.value.code == "KMZ_ARCHIVE_INVALID"

    def test_unsupported_compression_method(self) -> None:
        raw = bytearray(_zip({"doc.kml": _kml(_placemark("Flight Mode: A", "1,1 2,2"))}))
        # Compression method field of the central directory entry
        central = raw.find(b"PK\x01\x02")
        raw[central + 10 : central + 12] = (99).to_bytes(2, "little")

        with pytest.raises(KmzArchiveError, match="Not a valid KMZ archive"):
            extract_kml_from_kmz(bytes(raw))


class TestMalformedInput:
    """Rejection of input that is not a KML document."""

    def test_empty(self) -> None:
        with pytest.raises(KmlParseError, match="empty"):
            parse_kml(b"  \n")

    def test_not_xml(self) -> None:
        with pytest.raises(KmlParseError, match="Not valid XML"):
            parse_kml(b"lat,lon\n1,2\n")

    def test_unclosed_tags(self) -> None:
        with pytest.raises(KmlParseError, match="Not valid XML"):
            parse_kml(b"<kml><Document><Folder></kml>")

    def test_wrong_root(self) -> None:
        with pytest.raises(KmlParseError, match="Not a KML file"):
            parse_kml(b"<gpx><trk/></gpx>")

    def test_parse_errors_are_validation_category(self) -> None:
        with pytest.raises(KmlParseError) as exc_info:
            parse_kml(b"<gpx/>")
        assert exc_info.value.category == "validation"
        assert exc_info.value.stage == "parse_kml"

    def test_read_error_is_wrapped(self) -> None:
        class _Broken(io.BytesIO):
            def read(self, *args: object) -> bytes:  # type: ignore[override]
                raise OSError("connection reset")

        with pytest.raises(StreamReadError) as exc_info:
            parse_kml(_Broken())
        assert isinstance(exc_info.value.__cause__, OSError)
