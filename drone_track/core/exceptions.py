"""Unified parser exception taxonomy.

Provides a shared base exception hierarchy for both parser front ends and
the geometry assembly step. Every domain exception inherits from
``FlightTrackError`` and carries structured context fields so callers can
decide whether to retry (e.g. with a different assumed schema), alert, or
report the failure.

Taxonomy categories
-------------------
- ``ValidationError``: the input does not match what the parser expects, never retryable.
- ``TransientError``: reading the input failed, may succeed on retry.
- ``PermanentError``: unrecoverable failure (e.g. bad configuration), not retryable.
- ``ContractError``: a caller broke a function precondition, never retryable.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and reporting.
"""

from __future__ import annotations


class FlightTrackError(Exception):
    """Base exception for all flight-path extraction errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"parse_tabular"``, ``"parse_kml"``).
        code: Machine-readable error code (e.g. ``"KML_PARSE_FAILED"``).
        retryable: Whether the caller may reasonably retry the operation.
        correlation_id: Caller-supplied correlation identifier.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(FlightTrackError):
    """Input does not match the expected log layout. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(FlightTrackError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(FlightTrackError):
    """Unrecoverable failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(FlightTrackError):
    """A function precondition was violated by its caller. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Shared concrete errors
# ---------------------------------------------------------------------------


class StreamReadError(TransientError):
    """Raised when the underlying input stream fails to read.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    default_stage = "read_input"
    default_code = "INPUT_READ_FAILED"


class UnsupportedFormatError(ValidationError):
    """Raised when no parser front end handles the given file name."""

    default_stage = "dispatch"
    default_code = "UNSUPPORTED_FORMAT"
