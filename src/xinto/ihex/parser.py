"""
Intel HEX Record and File Parsers
=================================

This module provides the decoder for single Intel HEX records and the
aggregation logic that decodes a whole file.

Record Decoder
--------------
parse_record() turns one line of text into a Record. The line is checked
field by field, in a fixed order, and the first failed check is reported
as a RecordParsingError whose ``kind`` names the check:

    1. at least 11 characters                 TOO_SMALL
    2. starts with ':'                         MISSING_TAG
    3. length is hex                           INVALID_LENGTH_FORMAT
    4. load offset is hex                      INVALID_LOAD_OFFSET_FORMAT
    5. type is hex / type is 0-5               INVALID_TYPE_FORMAT / INVALID_TYPE
    6. enough characters for the data          INVALID_LENGTH
    7. data is hex                             INVALID_DATA_FORMAT
    8. checksum is hex                         INVALID_CHECKSUM_FORMAT
    9. nothing after the checksum              TOO_LARGE
   10. checksum law holds                      INVALID_CHECKSUM

File Aggregation
----------------
parse_lines() decodes lines in order and stops at the first bad line,
raising RecordFailureError with the 1-based line number. Records decoded
before the failure are not returned.

Usage Examples
--------------
Decoding a single record:
    >>> from xinto.ihex import parse_record
    >>> record = parse_record(":00000001FF")
    >>> record.record_type
    1

Decoding a file:
    >>> from xinto.ihex import HexFile
    >>> hex_file = HexFile.from_file("firmware.hex")
    >>> for record in hex_file.records:
    ...     print(f"{record.load_offset:04X}: {record.data.hex()}")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional, Union
import io
import logging

from xinto.config import OutputConfig
from xinto.errors import (
    RecordErrorKind,
    RecordParsingError,
    RecordFailureError,
    SourceReadError,
    SourceUnreadableError,
)
from xinto.ihex.checksum import verify_checksum
from xinto.ihex.records import (
    MIN_RECORD_CHARS,
    RECORD_MARK,
    Record,
    RecordType,
)

# Logger for this module
logger = logging.getLogger(__name__)

# Characters accepted in hex fields. int(..., 16) and bytes.fromhex() also
# accept signs, whitespace, underscores or a 0x prefix, so fields are
# checked against this set first.
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Field positions within a line
_LENGTH_START = 1
_OFFSET_START = 3
_TYPE_START = 7
_DATA_START = 9


# =============================================================================
# Field Helpers
# =============================================================================

def _is_hex(text: str) -> bool:
    """Check that every character of text is a hex digit."""
    return all(char in HEX_DIGITS for char in text)


def _reject(kind: RecordErrorKind, line: str) -> RecordParsingError:
    """Log a rejected line and build the error to raise for it."""
    logger.debug(f"Rejected record {line!r}: {kind.value}")
    return RecordParsingError(kind, line)


def _hex_field(line: str, start: int, width: int,
               kind: RecordErrorKind) -> int:
    """
    Decode a fixed-width hex field.

    Raises:
        RecordParsingError: With the given kind if the field is malformed
    """
    text = line[start:start + width]
    if len(text) != width or not _is_hex(text):
        raise _reject(kind, line)
    return int(text, 16)


# =============================================================================
# Record Decoder
# =============================================================================

def parse_record(line: str) -> Record:
    """
    Decode one Intel HEX record.

    The line must not include a line terminator. Hex digits may be upper
    or lower case.

    Args:
        line: The record text, starting with ':'

    Returns:
        The decoded Record

    Raises:
        RecordParsingError: If the line is not a valid record. The error's
            ``kind`` identifies the first check that failed.

    Example:
        >>> record = parse_record(":10010000214601360121470136007EFE09D2190140")
        >>> record.length, hex(record.load_offset), hex(record.checksum)
        (16, '0x100', '0x40')
    """
    if len(line) < MIN_RECORD_CHARS:
        raise _reject(RecordErrorKind.TOO_SMALL, line)

    if not line.startswith(RECORD_MARK):
        raise _reject(RecordErrorKind.MISSING_TAG, line)

    length = _hex_field(line, _LENGTH_START, 2,
                        RecordErrorKind.INVALID_LENGTH_FORMAT)
    load_offset = _hex_field(line, _OFFSET_START, 4,
                             RecordErrorKind.INVALID_LOAD_OFFSET_FORMAT)
    record_type = _hex_field(line, _TYPE_START, 2,
                             RecordErrorKind.INVALID_TYPE_FORMAT)
    if not RecordType.is_valid(record_type):
        raise _reject(RecordErrorKind.INVALID_TYPE, line)

    # The last two characters are reserved for the checksum
    data_chars = length * 2
    if len(line) - _DATA_START - 2 < data_chars:
        raise _reject(RecordErrorKind.INVALID_LENGTH, line)

    checksum_start = _DATA_START + data_chars
    data_text = line[_DATA_START:checksum_start]
    if not _is_hex(data_text):
        raise _reject(RecordErrorKind.INVALID_DATA_FORMAT, line)
    data = bytes.fromhex(data_text)

    checksum = _hex_field(line, checksum_start, 2,
                          RecordErrorKind.INVALID_CHECKSUM_FORMAT)

    if len(line) > checksum_start + 2:
        raise _reject(RecordErrorKind.TOO_LARGE, line)

    if not verify_checksum(length, load_offset, record_type, data, checksum):
        raise _reject(RecordErrorKind.INVALID_CHECKSUM, line)

    return Record(
        length=length,
        load_offset=load_offset,
        record_type=record_type,
        data=data,
        checksum=checksum,
    )


# =============================================================================
# File Aggregation
# =============================================================================

def _strip_line_terminator(line: str) -> str:
    """Remove a single trailing '\\n' or '\\r\\n'."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def parse_lines(lines: Iterable[str]) -> list[Record]:
    """
    Decode a sequence of record lines.

    Lines are numbered from 1. Decoding stops at the first line that fails;
    no record from that line or any later line is returned.

    Args:
        lines: Record lines, with or without their line terminators

    Returns:
        The decoded records, in input order

    Raises:
        RecordFailureError: If a line is not a valid record
        SourceReadError: If the line source fails to produce a line
    """
    records: list[Record] = []
    iterator = iter(lines)
    line_number = 0

    while True:
        line_number += 1
        try:
            line = next(iterator)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Cannot read line {line_number}: {e}")
            raise SourceReadError(line_number, str(e)) from e

        try:
            record = parse_record(_strip_line_terminator(line))
        except RecordParsingError as e:
            logger.debug(f"Line {line_number} rejected: {e.kind.value}")
            raise RecordFailureError(e, line_number) from e

        records.append(record)

    logger.debug(f"Decoded {len(records)} records")
    return records


def parse_hex(text: str) -> list[Record]:
    """
    Decode the records held in a string.

    Args:
        text: The full contents of a hex file

    Returns:
        The decoded records, in input order

    Raises:
        RecordFailureError: If a line is not a valid record
    """
    # Split on "\n" only, as reading the text from a file would
    return parse_lines(io.StringIO(text, newline="\n"))


def _decode_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield the lines of a binary stream decoded as UTF-8."""
    for raw_line in stream:
        yield raw_line.decode("utf-8")


def parse_hex_file(filepath: Union[str, Path]) -> list[Record]:
    """
    Read and decode a hex file from disk.

    Args:
        filepath: Path to the hex file

    Returns:
        The decoded records, in file order

    Raises:
        SourceUnreadableError: If the file cannot be opened
        SourceReadError: If a line cannot be read or is not valid UTF-8
        RecordFailureError: If a line is not a valid record
    """
    filepath = Path(filepath)
    try:
        stream = filepath.open("rb")
    except OSError as e:
        raise SourceUnreadableError(str(filepath), e.strerror or str(e)) from e

    with stream:
        logger.debug(f"Reading {filepath}")
        return parse_lines(_decode_lines(stream))


# =============================================================================
# Hex File
# =============================================================================

@dataclass
class HexFile:
    """
    The decoded contents of a hex file.

    Attributes:
        records: Decoded records, in file order
        source: Name of the file the records came from

    Example:
        >>> hex_file = HexFile.from_file("firmware.hex")
        >>> if not hex_file.ends_with_end_of_file():
        ...     print("warning: missing End Of File record")
    """
    records: list[Record] = field(default_factory=list)
    source: str = "<input>"

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "HexFile":
        """
        Create a HexFile by decoding a file on disk.

        Raises:
            SourceUnreadableError: If the file cannot be opened
            SourceReadError: If a line cannot be read
            RecordFailureError: If a line is not a valid record
        """
        return cls(records=parse_hex_file(filepath), source=str(filepath))

    @classmethod
    def from_lines(cls, lines: Iterable[str],
                   source: str = "<input>") -> "HexFile":
        """
        Create a HexFile from record lines.

        Raises:
            SourceReadError: If the line source fails
            RecordFailureError: If a line is not a valid record
        """
        return cls(records=parse_lines(lines), source=source)

    def ends_with_end_of_file(self) -> bool:
        """Check that the last record is the canonical End-of-File record."""
        return bool(self.records) and self.records[-1].is_end_of_file()

    def get_data_records(self) -> list[Record]:
        """Get only the Data records."""
        return [r for r in self.records if r.record_type == RecordType.DATA]

    def to_json(self, config: Optional[OutputConfig] = None) -> str:
        """Render the records as a JSON document."""
        from xinto.ihex.serializer import records_to_json
        return records_to_json(self.records, config)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)
