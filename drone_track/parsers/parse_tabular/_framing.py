"""Embedded CSV block framing.

Some flight-log exports are not plain CSV: the telemetry table sits inside a
larger document, starting at a header line that contains a marker such as
``count(10HZ)`` and ending at a line containing ``</document_content>``.
This stage narrows a line stream to that block before detection runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from drone_track.parsers.parse_tabular._validation import TabularParseError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def iter_embedded_block(
    lines: Iterable[tuple[int, str]], start_marker: str, end_marker: str
) -> Iterator[tuple[int, str]]:
    """Yield the numbered lines of the embedded block, header line included.

    Lines before the start marker are discarded; iteration stops at the
    first line containing the end marker, which is not yielded.

    Raises:
        TabularParseError: If the start marker never appears.
    """
    found = False
    for line_number, line in lines:
        if not found:
            if start_marker in line:
                found = True
                yield line_number, line
            continue
        if end_marker in line:
            return
        yield line_number, line

    if not found:
        msg = f"Embedded block start marker {start_marker!r} not found"
        raise TabularParseError(msg)
