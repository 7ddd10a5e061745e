"""KMZ container handling.

A KMZ file is a zip archive whose payload is a KML document (plus optional
assets). Format detection only looks at the zip signature, so a KML file
that happens to be zipped under any name is still recognised.
"""

from __future__ import annotations

import io
import logging
import posixpath
import zipfile
import zlib

from drone_track.parsers.parse_kml._constants import KML_EXTENSION, ZIP_SIGNATURE
from drone_track.parsers.parse_kml._validation import KmzArchiveError

logger = logging.getLogger("drone_track.parsers.parse_kml")


def is_kmz(data: bytes) -> bool:
    """Whether ``data`` starts with the zip local file header signature."""
    return data[: len(ZIP_SIGNATURE)] == ZIP_SIGNATURE


def extract_kml_from_kmz(data: bytes) -> bytes:
    """Return the first ``.kml`` entry of a KMZ archive, decompressed.

    Entries are scanned in archive directory order; the extension match is
    case-sensitive and later ``.kml`` entries are ignored.

    Raises:
        KmzArchiveError: If ``data`` is not a readable zip archive, the
            ``.kml`` entry cannot be decompressed, or the archive
            contains no ``.kml`` entry.
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            for info in zf.infolist():
                if info.is_dir() or posixpath.splitext(info.filename)[1] != KML_EXTENSION:
                    continue
                logger.debug("Using KMZ entry %s", info.filename)
                return zf.read(info)
    except (
        zipfile.BadZipFile,
        zipfile.LargeZipFile,
        EOFError,
        zlib.error,
        RuntimeError,
        NotImplementedError,
    ) as exc:
        # RuntimeError: encrypted entry; NotImplementedError: unsupported compression
        msg = f"Not a valid KMZ archive: {exc}"
        raise KmzArchiveError(msg) from exc

    msg = "No KML file found in KMZ archive"
    raise KmzArchiveError(msg)
