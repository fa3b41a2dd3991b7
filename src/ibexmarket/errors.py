"""Descriptor loading error types."""

from __future__ import annotations

from enum import Enum


class DescriptorErrorCode(Enum):
    """Error classification codes."""

    SOURCE_UNREADABLE = "source_unreadable"
    MALFORMED_SOURCE = "malformed_source"
    MISSING_FIELD = "missing_field"
    INVALID_FIELD = "invalid_field"
    DUPLICATE_TICKER = "duplicate_ticker"


class DescriptorError(Exception):
    """Descriptor load failure with error code and location.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        source: Path (or label) of the descriptor that failed to load.
        section: Descriptor section the failure was found in, if any.
        key: Offending key inside ``section``, if any.
    """

    def __init__(
        self,
        message: str,
        code: DescriptorErrorCode = DescriptorErrorCode.MALFORMED_SOURCE,
        source: str | None = None,
        section: str | None = None,
        key: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.source = source
        self.section = section
        self.key = key
