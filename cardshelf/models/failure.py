"""
Failure taxonomy for the card browser core.

Nothing in the core is fatal. Catalog errors are raised by the loader and
converted into a FailureDetail at the display boundary; markup warnings are
never raised at all, they are recorded inline next to the rendered text.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    NOT_FOUND = "not_found"
    DECODE_FAILED = "decode_failed"
    MISSING_GLYPH = "missing_glyph"
    UNREADABLE = "unreadable"


class FailureDetail(BaseModel):
    """Detailed information about a failure, safe to show to the user."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class CatalogError(Exception):
    """
    Base class for known, explainable catalog failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_failure(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class SourceNotFoundError(CatalogError):
    """Raised when the bundled catalog resource does not exist."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Card catalog not found at {location}.",
            suggestion="Check the configured data directory and catalog resource name.",
        )


class DecodeError(CatalogError):
    """
    Raised when the catalog document cannot be decoded.

    Covers malformed JSON, missing required fields and type mismatches.
    The underlying parser exception is kept in ``cause`` (and ``__cause__``
    when raised with ``from``).
    """

    def __init__(self, cause: Exception, location: str | None = None):
        self.cause = cause
        self.location = location
        where = f" at {location}" if location else ""
        super().__init__(
            kind=FailureKind.DECODE_FAILED,
            message=f"Card catalog{where} could not be decoded.",
            detail=f"{type(cause).__name__}: {cause}",
            suggestion="Replace the bundled snapshot with a valid card-search export.",
        )


class SourceUnreadableError(CatalogError):
    """Raised when the catalog resource exists but cannot be read (permissions, I/O)."""

    def __init__(self, location: str, cause: OSError):
        self.location = location
        self.cause = cause
        super().__init__(
            kind=FailureKind.UNREADABLE,
            message=f"Card catalog at {location} could not be read.",
            detail=f"{type(cause).__name__}: {cause}",
        )


@dataclass(frozen=True, slots=True)
class RenderMarkupWarning:
    """
    Non-fatal markup problem: a symbol token with no glyph.

    Recorded next to the rendered spans, never raised.

    Attributes:
        symbol: Token interior, e.g. "Z" for ``{Z}``
        offset: Index of the opening brace in the source text
    """

    symbol: str
    offset: int

    def to_failure(self) -> FailureDetail:
        return FailureDetail(
            kind=FailureKind.MISSING_GLYPH,
            message=f"No glyph for symbol {{{self.symbol}}}.",
            detail=f"offset {self.offset}",
        )
