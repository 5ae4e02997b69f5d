"""
Parser for raw Core Audio descriptor records.

This module decodes the in-memory layout of AudioStreamBasicDescription and
AudioComponentDescription structs, either from raw bytes or from a hex dump
as printed by a debugger, and populates the descriptor data model.
"""

import re
import struct
from typing import Iterator

from .model import StreamDescriptor, ComponentDescriptor


class ParseError(Exception):
    """Exception raised when parsing fails."""
    pass


BYTE_ORDERS = {
    "little": "<",
    "big": ">",
}

# Float64 sample rate, then format id, flags, bytes/packet, frames/packet,
# bytes/frame, channels/frame, bits/channel, reserved
STREAM_RECORD_FORMAT = "d8I"
# Type, subtype, manufacturer, flags, flags mask
COMPONENT_RECORD_FORMAT = "5I"

STREAM_RECORD_SIZE = struct.calcsize("<" + STREAM_RECORD_FORMAT)
COMPONENT_RECORD_SIZE = struct.calcsize("<" + COMPONENT_RECORD_FORMAT)

_HEX_SEPARATORS = re.compile(r"[\s,:;]+")
# Debugger address column, e.g. "0x16fdff2a0: "
_ADDRESS_COLUMN = re.compile(r"^\s*(?:0[xX])?[0-9a-fA-F]+:(?=\s)")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def _record_struct(record_format: str, byte_order: str) -> struct.Struct:
    """Get a Struct for a record layout in the given byte order."""
    if byte_order not in BYTE_ORDERS:
        raise ParseError(f"Unknown byte order: {byte_order!r} (expected 'little' or 'big')")
    return struct.Struct(BYTE_ORDERS[byte_order] + record_format)


def _check_length(data: bytes, size: int, kind: str, multiple: bool = False) -> None:
    """Validate the length of a record buffer."""
    if multiple:
        if not data or len(data) % size:
            raise ParseError(
                f"{kind} data must be a non-zero multiple of {size} bytes, got {len(data)}")
    elif len(data) != size:
        raise ParseError(f"{kind} record must be {size} bytes, got {len(data)}")


def parse_hex(text: str) -> bytes:
    """
    Parse a hex dump into bytes.

    Whitespace, ',', ':' and ';' separate groups; a leading 0x on a group is
    ignored, and anything after '#' on a line is a comment. Groups are read
    as byte sequences in the order written. A leading address column
    followed by ": " (as printed by lldb and gdb) is dropped from each line.

    Args:
        text: Hex dump text, e.g. "00 00 00 00 80 88 E5 40 ..."

    Returns:
        The decoded bytes

    Raises:
        ParseError: If the text contains non-hex characters or an odd
            number of digits
    """
    digits = []
    for line_number, line in enumerate(text.splitlines(), 1):
        line = line.split("#", 1)[0]
        line = _ADDRESS_COLUMN.sub("", line)
        for group in _HEX_SEPARATORS.split(line):
            if group[:2] in ("0x", "0X"):
                group = group[2:]
            if not _HEX_DIGITS.fullmatch(group):
                raise ParseError(f"Invalid hex group {group!r} on line {line_number}")
            digits.append(group)

    joined = "".join(digits)
    if len(joined) % 2:
        raise ParseError(f"Odd number of hex digits ({len(joined)})")
    return bytes.fromhex(joined)


def parse_stream_descriptor(data: bytes, byte_order: str = "little") -> StreamDescriptor:
    """
    Parse a single AudioStreamBasicDescription record.

    Args:
        data: Exactly STREAM_RECORD_SIZE bytes
        byte_order: "little" (as produced on Apple hardware) or "big"

    Returns:
        The decoded StreamDescriptor

    Raises:
        ParseError: If the length or byte order is invalid
    """
    record = _record_struct(STREAM_RECORD_FORMAT, byte_order)
    _check_length(data, STREAM_RECORD_SIZE, "Stream")
    return StreamDescriptor(*record.unpack(data))


def parse_component_descriptor(data: bytes, byte_order: str = "little") -> ComponentDescriptor:
    """
    Parse a single AudioComponentDescription record.

    Args:
        data: Exactly COMPONENT_RECORD_SIZE bytes
        byte_order: "little" (as produced on Apple hardware) or "big"

    Returns:
        The decoded ComponentDescriptor

    Raises:
        ParseError: If the length or byte order is invalid
    """
    record = _record_struct(COMPONENT_RECORD_FORMAT, byte_order)
    _check_length(data, COMPONENT_RECORD_SIZE, "Component")
    return ComponentDescriptor(*record.unpack(data))


def iter_stream_descriptors(data: bytes, byte_order: str = "little") -> Iterator[StreamDescriptor]:
    """Parse an array of consecutive stream records."""
    record = _record_struct(STREAM_RECORD_FORMAT, byte_order)
    _check_length(data, STREAM_RECORD_SIZE, "Stream", multiple=True)
    for fields in record.iter_unpack(data):
        yield StreamDescriptor(*fields)


def iter_component_descriptors(data: bytes, byte_order: str = "little") -> Iterator[ComponentDescriptor]:
    """Parse an array of consecutive component records."""
    record = _record_struct(COMPONENT_RECORD_FORMAT, byte_order)
    _check_length(data, COMPONENT_RECORD_SIZE, "Component", multiple=True)
    for fields in record.iter_unpack(data):
        yield ComponentDescriptor(*fields)


def stream_descriptor_to_bytes(desc: StreamDescriptor, byte_order: str = "little") -> bytes:
    """Encode a stream descriptor in its in-memory record layout."""
    record = _record_struct(STREAM_RECORD_FORMAT, byte_order)
    try:
        return record.pack(
            desc.sample_rate,
            desc.format_id,
            desc.format_flags,
            desc.bytes_per_packet,
            desc.frames_per_packet,
            desc.bytes_per_frame,
            desc.channels_per_frame,
            desc.bits_per_channel,
            desc.reserved,
        )
    except struct.error as e:
        raise ParseError(f"Cannot encode stream descriptor: {e}") from e


def component_descriptor_to_bytes(desc: ComponentDescriptor, byte_order: str = "little") -> bytes:
    """Encode a component descriptor in its in-memory record layout."""
    record = _record_struct(COMPONENT_RECORD_FORMAT, byte_order)
    try:
        return record.pack(
            desc.component_type,
            desc.component_sub_type,
            desc.component_manufacturer,
            desc.component_flags,
            desc.component_flags_mask,
        )
    except struct.error as e:
        raise ParseError(f"Cannot encode component descriptor: {e}") from e
