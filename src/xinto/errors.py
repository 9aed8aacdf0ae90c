"""
xinto Error Hierarchy
=====================

This module defines the exception hierarchy for the xinto package.
All exceptions inherit from XintoError, allowing callers to catch all
decoder-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
XintoError (base)
├── RecordParsingError - a single line is not a valid record
└── AggregationError (file-level decoding)
    ├── SourceUnreadableError - the input cannot be opened
    ├── SourceReadError - a line cannot be read from the input
    └── RecordFailureError - a line failed to decode

Design Philosophy
-----------------
Decoding failures are classified by a closed enumeration (RecordErrorKind)
rather than by message text. Callers match on ``error.kind``; the message is
only for humans.

File-level errors carry the 1-based line number they refer to, so that
messages can be formatted as:
    firmware.hex:2: error: invalid checksum
"""

from enum import Enum
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class XintoError(Exception):
    """
    Base exception for all xinto errors.

    All exceptions in the package inherit from this class, allowing callers
    to catch every decoding error with a single except clause:

        try:
            records = parse_hex_file("firmware.hex")
        except XintoError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Record Decoding Exceptions
# =============================================================================

class RecordErrorKind(Enum):
    """
    The validation step a record line failed.

    The decoder checks a line in a fixed order and reports the first
    violated check, so each kind names exactly one step.
    """
    TOO_SMALL = "too_small"
    MISSING_TAG = "missing_tag"
    INVALID_LENGTH_FORMAT = "invalid_length_format"
    INVALID_LENGTH = "invalid_length"
    INVALID_LOAD_OFFSET_FORMAT = "invalid_load_offset_format"
    INVALID_TYPE_FORMAT = "invalid_type_format"
    INVALID_TYPE = "invalid_type"
    INVALID_DATA_FORMAT = "invalid_data_format"
    INVALID_CHECKSUM_FORMAT = "invalid_checksum_format"
    INVALID_CHECKSUM = "invalid_checksum"
    TOO_LARGE = "too_large"

    def get_description(self) -> str:
        """Get a human-readable description of the failure."""
        descriptions = {
            RecordErrorKind.TOO_SMALL: "record is too small",
            RecordErrorKind.MISSING_TAG: "missing ':' record mark",
            RecordErrorKind.INVALID_LENGTH_FORMAT: "invalid length format",
            RecordErrorKind.INVALID_LENGTH: "declared length exceeds record size",
            RecordErrorKind.INVALID_LOAD_OFFSET_FORMAT: "invalid load offset format",
            RecordErrorKind.INVALID_TYPE_FORMAT: "invalid type format",
            RecordErrorKind.INVALID_TYPE: "invalid record type",
            RecordErrorKind.INVALID_DATA_FORMAT: "invalid data format",
            RecordErrorKind.INVALID_CHECKSUM_FORMAT: "invalid checksum format",
            RecordErrorKind.INVALID_CHECKSUM: "invalid checksum",
            RecordErrorKind.TOO_LARGE: "record is too large",
        }
        return descriptions[self]


class RecordParsingError(XintoError):
    """
    A line of text is not a valid hex record.

    Attributes:
        kind: Which validation step failed
        line: The offending text (optional, used for diagnostics)
    """

    def __init__(self, kind: RecordErrorKind, line: Optional[str] = None):
        self.kind = kind
        self.line = line
        super().__init__(kind.get_description())


# =============================================================================
# File Aggregation Exceptions
# =============================================================================

class AggregationError(XintoError):
    """Base exception for errors raised while decoding a whole file."""
    pass


class SourceUnreadableError(AggregationError):
    """
    The input source cannot be opened.

    Raised when:
    - File not found
    - Path is a directory
    - Permission denied
    """

    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        message = f"cannot read '{source}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SourceReadError(AggregationError):
    """
    A line could not be retrieved from an open source.

    Typical causes are an I/O error in the middle of the file or a line
    that is not valid text.
    """

    def __init__(self, line_number: int, reason: str = ""):
        self.line_number = line_number
        self.reason = reason
        message = f"line {line_number}: cannot read line"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RecordFailureError(AggregationError):
    """
    A line of the file failed to decode.

    Attributes:
        error: The RecordParsingError raised by the decoder
        line_number: 1-based number of the offending line
    """

    def __init__(self, error: RecordParsingError, line_number: int):
        self.error = error
        self.line_number = line_number
        super().__init__(f"line {line_number}: {error}")

    @property
    def kind(self) -> RecordErrorKind:
        """The failure kind of the wrapped decoding error."""
        return self.error.kind
