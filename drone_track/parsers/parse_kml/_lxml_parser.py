"""lxml-based reader for flight-log KML documents.

Flight-log KML has a fixed shape: ``kml/Document/Folder`` holding a flat
list of Placemarks, each with a ``name``, a ``description`` and one
``LineString/coordinates``. Elements are matched by local name so files with
or without the KML 2.2 namespace read the same. Only the first Document and
the first Folder are read; nested folders and extra LineStrings are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from drone_track.models.placemark import Placemark
from drone_track.parsers.parse_kml._constants import (
    COORDINATES_TAG,
    DESCRIPTION_TAG,
    DOCUMENT_TAG,
    FOLDER_TAG,
    LINESTRING_TAG,
    NAME_TAG,
    PLACEMARK_TAG,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from lxml.etree import _Element


def iter_placemarks(root: _Element) -> Iterator[Placemark]:
    """Yield the Placemarks of ``kml/Document/Folder`` in document order."""
    document = _first_child(root, DOCUMENT_TAG)
    if document is None:
        return
    folder = _first_child(document, FOLDER_TAG)
    if folder is None:
        return

    for pm in _children(folder, PLACEMARK_TAG):
        line_string = _first_child(pm, LINESTRING_TAG)
        yield Placemark(
            name=_child_text(pm, NAME_TAG),
            description=_child_text(pm, DESCRIPTION_TAG),
            coordinates_text=(
                _child_text(line_string, COORDINATES_TAG) if line_string is not None else ""
            ),
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _local_name(elem: _Element) -> str:
    tag = elem.tag
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.rsplit("}", 1)[-1]


def _children(elem: _Element, local_name: str) -> Iterator[_Element]:
    for child in elem:
        if _local_name(child) == local_name:
            yield child


def _first_child(elem: _Element, local_name: str) -> _Element | None:
    return next(_children(elem, local_name), None)


def _child_text(elem: _Element, local_name: str) -> str:
    child = _first_child(elem, local_name)
    if child is None:
        return ""
    return "".join(child.itertext()).strip()
