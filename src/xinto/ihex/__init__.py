"""
Intel HEX Record Handling
=========================

This module provides support for decoding Intel HEX object files. A hex
file is plain text: one record per line, each record a ':' followed by
hexadecimal fields and a checksum.

This module provides:
- **parse_record**: Decode and validate a single record line
- **parse_lines / parse_hex / parse_hex_file**: Decode a whole file,
  stopping at the first bad line
- **HexFile**: Decoded file contents with convenience helpers
- **Record / RecordType**: The decoded record and its type codes
- **Checksum utilities**: Calculate and verify record checksums
- **Serializer**: Render records as JSON

Quick Start
-----------
Decoding a single line:

    >>> from xinto.ihex import parse_record
    >>> record = parse_record(":0300300002337A1E")
    >>> record.data.hex()
    '02337a'

Decoding a file:

    >>> from xinto.ihex import HexFile
    >>> hex_file = HexFile.from_file("firmware.hex")
    >>> print(hex_file.to_json())

Building a record:

    >>> from xinto.ihex import Record, RecordType
    >>> Record.build(RecordType.DATA, 0x0030, b"\\x02\\x33\\x7a").to_line()
    ':0300300002337A1E'

Reference
---------
- Intel Hexadecimal Object File Format Specification, Revision A (1988)
"""

# =============================================================================
# Public API Exports
# =============================================================================

# Record definitions
from xinto.ihex.records import (
    RecordType,
    Record,
    END_OF_FILE,
    MAX_DATA_LENGTH,
    MAX_LOAD_OFFSET,
    MIN_RECORD_CHARS,
)

# Checksum utilities
from xinto.ihex.checksum import (
    record_sum,
    calculate_checksum,
    verify_checksum,
)

# Parser classes and functions
from xinto.ihex.parser import (
    HexFile,
    parse_record,
    parse_lines,
    parse_hex,
    parse_hex_file,
)

# Serialization
from xinto.ihex.serializer import (
    records_to_list,
    records_to_json,
)

__all__ = [
    # Records
    "RecordType",
    "Record",
    "END_OF_FILE",
    "MAX_DATA_LENGTH",
    "MAX_LOAD_OFFSET",
    "MIN_RECORD_CHARS",
    # Checksum
    "record_sum",
    "calculate_checksum",
    "verify_checksum",
    # Parser
    "HexFile",
    "parse_record",
    "parse_lines",
    "parse_hex",
    "parse_hex_file",
    # Serializer
    "records_to_list",
    "records_to_json",
]
