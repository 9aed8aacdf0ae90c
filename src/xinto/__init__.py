"""
xinto - Intel HEX Object File Decoder
=====================================

This package parses Intel hexadecimal object files into structured records
and converts them to JSON.

Main Components
---------------
- **ihex**: Record decoder, file aggregation, checksums and serialization
- **cli**: The ``xinto`` command-line tool
- **errors**: Exception hierarchy

Quick Start
-----------
Decode a file:
    >>> from xinto import HexFile
    >>> hex_file = HexFile.from_file("firmware.hex")
    >>> for record in hex_file:
    ...     print(record.get_type().get_description(), record.data.hex())

Or use the command-line tool:
    $ xinto firmware.hex
    $ xinto --pretty firmware.hex

Copyright (c) 2020-2026 xinto contributors
"""

__version__ = "0.1.0"
__author__ = "xinto contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from xinto.config import OutputConfig
from xinto.errors import (
    XintoError,
    RecordErrorKind,
    RecordParsingError,
    AggregationError,
    SourceUnreadableError,
    SourceReadError,
    RecordFailureError,
)
from xinto.ihex import (
    RecordType,
    Record,
    END_OF_FILE,
    HexFile,
    calculate_checksum,
    verify_checksum,
    parse_record,
    parse_lines,
    parse_hex,
    parse_hex_file,
    records_to_json,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Configuration
    "OutputConfig",
    # Exception hierarchy
    "XintoError",
    "RecordErrorKind",
    "RecordParsingError",
    "AggregationError",
    "SourceUnreadableError",
    "SourceReadError",
    "RecordFailureError",
    # Records and decoding
    "RecordType",
    "Record",
    "END_OF_FILE",
    "HexFile",
    "calculate_checksum",
    "verify_checksum",
    "parse_record",
    "parse_lines",
    "parse_hex",
    "parse_hex_file",
    "records_to_json",
]
