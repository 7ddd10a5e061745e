"""Validation helpers for KML/KMZ parsing.

Responsibilities:
- Exception types for the KML front end
- Safe XML parsing with a KML root element check
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from drone_track.core.exceptions import ValidationError
from drone_track.parsers.parse_kml._constants import ROOT_TAG

if TYPE_CHECKING:
    from lxml.etree import _Element

# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from __init__)
# ---------------------------------------------------------------------------


class KmlParseError(ValidationError):
    """Raised when a KML document cannot be parsed."""

    default_stage = "parse_kml"
    default_code = "KML_PARSE_FAILED"


class KmzArchiveError(KmlParseError):
    """Raised when a KMZ archive is not a valid zip or holds no KML entry."""

    default_code = "KMZ_ARCHIVE_INVALID"


# ---------------------------------------------------------------------------
# XML / KML validation
# ---------------------------------------------------------------------------


def parse_kml_root(content: bytes) -> _Element:
    """Parse KML bytes and return the ``<kml>`` root element.

    Raises:
        KmlParseError: If the content is empty, not valid XML, or its root
            element is not ``<kml>``.
    """
    from lxml import etree  # type: ignore[attr-defined]

    if not content.strip():
        msg = "KML content is empty"
        raise KmlParseError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmlParseError(msg) from exc

    if root is None or etree.QName(root).localname != ROOT_TAG:
        tag = root.tag if root is not None else None
        msg = f"Not a KML file, root element is <{tag}>"
        raise KmlParseError(msg)

    return root
