"""Validation helpers for delimited-text parsing.

Responsibilities:
- Exception types for the tabular front end
- Row width checks against the header under the configured row policy
"""

from __future__ import annotations

from drone_track.core.constants import ROW_POLICY_STRICT
from drone_track.core.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from __init__)
# ---------------------------------------------------------------------------


class TabularParseError(ValidationError):
    """Raised when a delimited-text log cannot be parsed."""

    default_stage = "parse_tabular"
    default_code = "TABULAR_PARSE_FAILED"


class SchemaDetectionError(TabularParseError):
    """Raised when the header has no recognisable latitude or longitude field.

    Attributes:
        header_fields: The header fields that were searched.
    """

    default_code = "TABULAR_SCHEMA_NOT_FOUND"

    def __init__(self, message: str, header_fields: tuple[str, ...] = (), **kwargs: object) -> None:
        self.header_fields = header_fields
        super().__init__(message, **kwargs)


class RowWidthError(TabularParseError):
    """Raised under the strict row policy when a row's width differs from the header.

    Attributes:
        line_number: 1-based line number of the offending row.
        expected: Field count of the header.
        found: Field count of the row.
    """

    default_code = "TABULAR_ROW_WIDTH_MISMATCH"

    def __init__(self, line_number: int, expected: int, found: int, **kwargs: object) -> None:
        self.line_number = line_number
        self.expected = expected
        self.found = found
        msg = f"Line {line_number}: expected {expected} field(s) as in the header, found {found}"
        super().__init__(msg, **kwargs)


# ---------------------------------------------------------------------------
# Row validation
# ---------------------------------------------------------------------------


def check_row_width(line_number: int, fields: list[str], expected: int, row_policy: str) -> bool:
    """Check a row's width against the header.

    Returns:
        ``True`` if the row has the header's width, ``False`` if it does
        not and the lenient policy allows skipping it.

    Raises:
        RowWidthError: If the width differs under the strict policy.
    """
    if len(fields) == expected:
        return True
    if row_policy == ROW_POLICY_STRICT:
        raise RowWidthError(line_number, expected, len(fields))
    return False
