"""
Intel HEX Record Definitions
============================

This module defines the data structures for Intel HEX records. A hex file
is a sequence of text lines, each holding one record.

Record Format
-------------
Every field is written as big-endian hexadecimal ASCII, two characters per
byte, with no separators:

    ':'         Record mark
    LL          Data length (1 byte)
    AAAA        Load offset (2 bytes)
    TT          Record type (1 byte)
    DD...DD     Data (LL bytes)
    CC          Checksum (1 byte)

The smallest legal record carries no data and is 11 characters long,
for example the End-of-File record ``:00000001FF``.

Record Types
------------
- $00: Data
- $01: End Of File
- $02: Extended Segment Address
- $03: Start Segment Address
- $04: Extended Linear Address
- $05: Start Linear Address

Only the type code range is validated here. Resolving segment and linear
addresses into a memory image is left to the consumer of the records.

Reference
---------
- Intel Hexadecimal Object File Format Specification, Revision A (1988)
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Union

from xinto.ihex.checksum import calculate_checksum


# =============================================================================
# Enumeration Types
# =============================================================================

class RecordType(IntEnum):
    """
    Record type identifiers.

    The type byte tells the consumer how to interpret the data field.
    Values above START_LINEAR_ADDRESS are rejected by the decoder.
    """
    DATA = 0x00
    END_OF_FILE = 0x01
    EXTENDED_SEGMENT_ADDRESS = 0x02
    START_SEGMENT_ADDRESS = 0x03
    EXTENDED_LINEAR_ADDRESS = 0x04
    START_LINEAR_ADDRESS = 0x05

    @classmethod
    def is_valid(cls, value: int) -> bool:
        """Check whether a type byte is a known record type."""
        return cls.DATA <= value <= cls.START_LINEAR_ADDRESS

    def get_description(self) -> str:
        """Get a human-readable description of the record type."""
        descriptions = {
            RecordType.DATA: "Data",
            RecordType.END_OF_FILE: "End Of File",
            RecordType.EXTENDED_SEGMENT_ADDRESS: "Extended Segment Address",
            RecordType.START_SEGMENT_ADDRESS: "Start Segment Address",
            RecordType.EXTENDED_LINEAR_ADDRESS: "Extended Linear Address",
            RecordType.START_LINEAR_ADDRESS: "Start Linear Address",
        }
        return descriptions[self]


# Largest values the numeric fields can hold
MAX_DATA_LENGTH = 0xFF
MAX_LOAD_OFFSET = 0xFFFF

# Record mark that starts every line
RECORD_MARK = ":"

# Characters in the smallest legal record: mark + LL + AAAA + TT + CC
MIN_RECORD_CHARS = 11


# =============================================================================
# Record
# =============================================================================

@dataclass(frozen=True)
class Record:
    """
    A single decoded Intel HEX record.

    Records returned by the decoder always satisfy the checksum law and
    carry a record type in the valid range. Instances are immutable; the
    data field is stored as bytes.

    Attributes:
        length: Number of data bytes (0-255)
        load_offset: 16-bit load offset
        record_type: Record type code (see RecordType)
        data: The data bytes
        checksum: Checksum byte exactly as read from the input

    Example:
        >>> record = Record.parse(":0300300002337A1E")
        >>> record.load_offset
        48
        >>> list(record.data)
        [2, 51, 122]
    """
    length: int
    load_offset: int
    record_type: int
    data: bytes = field(default=b"")
    checksum: int = 0

    def __post_init__(self) -> None:
        """Store data as bytes and check it matches the declared length."""
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != self.length:
            raise ValueError(
                f"Record length is {self.length} but data has {len(self.data)} bytes"
            )

    @classmethod
    def parse(cls, line: str) -> "Record":
        """
        Decode a record from one line of text.

        Raises:
            RecordParsingError: If the line is not a valid record
        """
        from xinto.ihex.parser import parse_record
        return parse_record(line)

    @classmethod
    def build(
        cls,
        record_type: Union[RecordType, int],
        load_offset: int = 0,
        data: bytes = b"",
    ) -> "Record":
        """
        Create a record with its checksum calculated.

        Args:
            record_type: Record type code
            load_offset: 16-bit load offset
            data: Up to 255 data bytes

        Returns:
            A new Record that satisfies the checksum law

        Raises:
            ValueError: If a field is out of range

        Example:
            >>> Record.build(RecordType.END_OF_FILE) == Record.end_of_file()
            True
        """
        data = bytes(data)
        if not RecordType.is_valid(record_type):
            raise ValueError(f"Invalid record type: {record_type}")
        if not 0 <= load_offset <= MAX_LOAD_OFFSET:
            raise ValueError(
                f"Load offset must be 0-65535 (0x0000-0xFFFF), got {load_offset}"
            )
        if len(data) > MAX_DATA_LENGTH:
            raise ValueError(
                f"Record data too long: {len(data)} bytes (max {MAX_DATA_LENGTH})"
            )

        length = len(data)
        checksum = calculate_checksum(length, load_offset, int(record_type), data)
        return cls(
            length=length,
            load_offset=load_offset,
            record_type=int(record_type),
            data=data,
            checksum=checksum,
        )

    @classmethod
    def end_of_file(cls) -> "Record":
        """Return the canonical End-of-File record."""
        return END_OF_FILE

    def is_end_of_file(self) -> bool:
        """Check whether this record is the canonical End-of-File record."""
        return self == END_OF_FILE

    def get_type(self) -> RecordType:
        """Get the record type as a RecordType enum value."""
        return RecordType(self.record_type)

    def to_line(self) -> str:
        """
        Encode the record as a line of hex text (without line terminator).

        Fields are written in uppercase, as most toolchains do.
        """
        return (
            f"{RECORD_MARK}{self.length:02X}{self.load_offset:04X}"
            f"{self.record_type:02X}{self.data.hex().upper()}{self.checksum:02X}"
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the record to plain Python types for serialization.

        The data bytes become a list of integers.
        """
        return {
            "length": self.length,
            "load_offset": self.load_offset,
            "type": self.record_type,
            "data": list(self.data),
            "checksum": self.checksum,
        }

    def __str__(self) -> str:
        return self.to_line()


# The canonical End-of-File record, ":00000001FF"
END_OF_FILE = Record(
    length=0,
    load_offset=0,
    record_type=RecordType.END_OF_FILE.value,
    data=b"",
    checksum=0xFF,
)
