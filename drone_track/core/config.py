"""Parser configuration loaded from environment variables.

All configuration values have defaults that match the behaviour of the
drone log exports the parsers were built against, so ``ParserConfig()``
is usable without any environment set.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range. Bad configuration is caught when it is loaded, not in
    the middle of a parse.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from drone_track.core.constants import (
    DEFAULT_EMBEDDED_BLOCK_END,
    DEFAULT_EMBEDDED_BLOCK_START,
    DEFAULT_PLACEMARK_NAME_FILTER,
    DEFAULT_SAMPLE_LINES,
    MIN_SAMPLE_LINES,
    ROW_POLICIES,
    ROW_POLICY_STRICT,
)
from drone_track.core.exceptions import PermanentError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


class ConfigValidationError(PermanentError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable parser configuration.

    Attributes:
        sample_lines: Maximum number of lines (header included) inspected
            when detecting the delimiter.
        row_policy: ``"strict"`` aborts on a row whose field count differs
            from the header; ``"lenient"`` skips such rows.
        placemark_name_filter: Substring a KML Placemark name must contain
            for its coordinates to be part of the flight path.
        embedded_block: Whether the tabular parser should look for a CSV
            block embedded inside a larger export document.
        embedded_block_start: Marker contained in the embedded block's header line.
        embedded_block_end: Marker of the line that ends the embedded block.
    """

    sample_lines: int = DEFAULT_SAMPLE_LINES
    row_policy: str = ROW_POLICY_STRICT
    placemark_name_filter: str = DEFAULT_PLACEMARK_NAME_FILTER
    embedded_block: bool = False
    embedded_block_start: str = DEFAULT_EMBEDDED_BLOCK_START
    embedded_block_end: str = DEFAULT_EMBEDDED_BLOCK_END

    @classmethod
    def from_env(cls) -> ParserConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range, a required
                string is empty, or a boolean flag is not a recognised literal.
            ValueError: If ``DRONE_TRACK_SAMPLE_LINES`` is not an integer.
        """
        config = cls(
            sample_lines=int(os.getenv("DRONE_TRACK_SAMPLE_LINES", str(DEFAULT_SAMPLE_LINES))),
            row_policy=os.getenv("DRONE_TRACK_ROW_POLICY", ROW_POLICY_STRICT).strip().lower(),
            placemark_name_filter=os.getenv(
                "DRONE_TRACK_PLACEMARK_FILTER", DEFAULT_PLACEMARK_NAME_FILTER
            ),
            embedded_block=_parse_bool(
                "DRONE_TRACK_EMBEDDED_BLOCK", os.getenv("DRONE_TRACK_EMBEDDED_BLOCK", "")
            ),
            embedded_block_start=os.getenv(
                "DRONE_TRACK_EMBEDDED_BLOCK_START", DEFAULT_EMBEDDED_BLOCK_START
            ),
            embedded_block_end=os.getenv(
                "DRONE_TRACK_EMBEDDED_BLOCK_END", DEFAULT_EMBEDDED_BLOCK_END
            ),
        )
        validate_config(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be one of 1/0, true/false, yes/no, on/off")


def validate_config(config: ParserConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.sample_lines < MIN_SAMPLE_LINES:
        raise ConfigValidationError(
            "DRONE_TRACK_SAMPLE_LINES",
            config.sample_lines,
            f"must be >= {MIN_SAMPLE_LINES} (header plus at least one data line)",
        )

    if config.row_policy not in ROW_POLICIES:
        raise ConfigValidationError(
            "DRONE_TRACK_ROW_POLICY",
            config.row_policy,
            f"must be one of {sorted(ROW_POLICIES)}",
        )

    if not config.placemark_name_filter:
        raise ConfigValidationError(
            "DRONE_TRACK_PLACEMARK_FILTER",
            config.placemark_name_filter,
            "must not be empty",
        )

    if not config.embedded_block_start:
        raise ConfigValidationError(
            "DRONE_TRACK_EMBEDDED_BLOCK_START",
            config.embedded_block_start,
            "must not be empty",
        )

    if not config.embedded_block_end:
        raise ConfigValidationError(
            "DRONE_TRACK_EMBEDDED_BLOCK_END",
            config.embedded_block_end,
            "must not be empty",
        )
