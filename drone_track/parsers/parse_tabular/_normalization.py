"""Field splitting for delimited-text parsing.

Responsibilities:
- Split a raw line into fields for a literal or whitespace-run delimiter

Splitting is per physical line. A quoted field that contains a line break
is not joined with the next line: each half is checked as its own row, so
under the strict policy such a record fails with a width mismatch.
"""

from __future__ import annotations

import csv

from drone_track.models.schema import Delimiter


def split_fields(line: str, delimiter: Delimiter) -> list[str]:
    """Split one line into fields.

    Literal delimiters go through the ``csv`` module so quoted fields that
    contain the delimiter stay intact. Whitespace-run mode collapses any run
    of whitespace into one separator and ignores leading/trailing runs.
    """
    line = line.rstrip("\r\n")
    if delimiter is Delimiter.WHITESPACE:
        return line.split()
    return next(csv.reader([line], delimiter=delimiter.value), [])
