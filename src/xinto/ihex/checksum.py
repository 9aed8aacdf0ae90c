"""
Intel HEX Checksum Calculations
===============================

This module provides the checksum arithmetic for Intel HEX records.

Record Checksum
---------------
Every record ends with a one-byte checksum. It is the two's complement of
the low byte of the sum of all the other bytes of the record:

    length + offset_high + offset_low + type + data[0] + ... + data[n-1]

Adding the checksum byte itself to that sum therefore gives a value whose
low 8 bits are zero. Verification uses this property directly instead of
recomputing and comparing the checksum.

Example
-------
The End-of-File record ``:00000001FF`` has the bytes 00 00 00 01, which sum
to 0x01. The checksum is 0x100 - 0x01 = 0xFF, and 0x01 + 0xFF = 0x100.

Reference
---------
- Intel Hexadecimal Object File Format Specification, Revision A (1988)
"""

from typing import Final, Iterable

# =============================================================================
# Constants
# =============================================================================

# Mask for the low byte of the running sum
CHECKSUM_MASK: Final[int] = 0xFF


# =============================================================================
# Checksum Functions
# =============================================================================

def record_sum(length: int, load_offset: int, record_type: int,
               data: Iterable[int]) -> int:
    """
    Sum the bytes a record checksum covers.

    The sum is unbounded; callers reduce it modulo 256 as needed.

    Args:
        length: Data byte count
        load_offset: 16-bit load offset (both bytes are summed)
        record_type: Record type code
        data: Data bytes

    Returns:
        The arithmetic sum of all covered bytes
    """
    return (
        length
        + (load_offset >> 8)
        + (load_offset & 0xFF)
        + record_type
        + sum(data)
    )


def calculate_checksum(length: int, load_offset: int, record_type: int,
                       data: Iterable[int]) -> int:
    """
    Calculate the checksum byte for a record.

    Args:
        length: Data byte count
        load_offset: 16-bit load offset
        record_type: Record type code
        data: Data bytes

    Returns:
        The checksum byte (0x00 - 0xFF)

    Example:
        >>> calculate_checksum(0, 0, 1, b"")
        255
    """
    total = record_sum(length, load_offset, record_type, data)
    return (0x100 - (total & CHECKSUM_MASK)) & CHECKSUM_MASK


def verify_checksum(length: int, load_offset: int, record_type: int,
                    data: Iterable[int], checksum: int) -> bool:
    """
    Check that a record satisfies the checksum law.

    Returns:
        True if the sum of all record bytes, checksum included, is a
        multiple of 256
    """
    total = record_sum(length, load_offset, record_type, data) + checksum
    return (total & CHECKSUM_MASK) == 0
