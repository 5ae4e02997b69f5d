"""
Human-readable descriptions of Core Audio descriptors.

This module renders stream and component descriptors as single-line
diagnostic strings suitable for logs and debugger output. Rendering never
fails: unknown codes fall back to their FourCC or hex form and inconsistent
fields simply suppress the clauses that depend on them.
"""

from .codes import (
    get_audio_format_name,
    get_manufacturer_name,
    get_unit_type_name,
    get_unit_subtype_name,
)
from .fourcc import to_hex, u32
from .model import (
    StreamDescriptor,
    ComponentDescriptor,
    FORMAT_LINEAR_PCM,
    FORMAT_APPLE_LOSSLESS,
    FLAG_IS_FLOAT,
    FLAG_IS_BIG_ENDIAN,
    FLAG_IS_SIGNED_INTEGER,
    FLAG_IS_PACKED,
    FLAG_IS_ALIGNED_HIGH,
    FLAG_IS_NON_INTERLEAVED,
    ALAC_16_BIT_SOURCE_DATA,
    ALAC_20_BIT_SOURCE_DATA,
    ALAC_24_BIT_SOURCE_DATA,
    ALAC_32_BIT_SOURCE_DATA,
)

CLAUSE_SEPARATOR = ", "

ALAC_SOURCE_BIT_DEPTHS = {
    ALAC_16_BIT_SOURCE_DATA: "16",
    ALAC_20_BIT_SOURCE_DATA: "20",
    ALAC_24_BIT_SOURCE_DATA: "24",
    ALAC_32_BIT_SOURCE_DATA: "32",
}


def describe_stream(desc: StreamDescriptor) -> str:
    """
    Describe an audio stream format.

    Args:
        desc: The stream descriptor to describe

    Returns:
        Comma-separated description, e.g.
        "2 Ch @ 44100 Hz, Format: LinearPCM, 16-bit little-endian,
        signed integer, interleaved"
    """
    clauses = [
        f"{desc.channels_per_frame} Ch @ {desc.sample_rate:g} Hz",
        f"Format: {get_audio_format_name(desc.format_id)}",
    ]

    if desc.format_id == FORMAT_APPLE_LOSSLESS:
        clauses.extend(_apple_lossless_clauses(desc))
    elif desc.format_id == FORMAT_LINEAR_PCM:
        clauses.extend(_linear_pcm_clauses(desc))
    else:
        clauses.extend(_packet_layout_clauses(desc))

    return CLAUSE_SEPARATOR.join(clauses)


def _apple_lossless_clauses(desc: StreamDescriptor) -> list[str]:
    """Source bit depth and packet size for Apple Lossless."""
    # Exact match on the whole flags word, not a mask
    depth = ALAC_SOURCE_BIT_DEPTHS.get(desc.format_flags, "??")
    return [
        f"{depth}-bit source data",
        f"{desc.frames_per_packet}frames/packet",
    ]


def _linear_pcm_clauses(desc: StreamDescriptor) -> list[str]:
    """Sample layout for linear PCM."""
    clauses = []
    flags = desc.format_flags

    fraction_bits = desc.fraction_bits
    if fraction_bits > 0:
        integer_bits = u32(desc.bits_per_channel - fraction_bits)
        depth = f"{integer_bits}.{fraction_bits}-bit"
    else:
        depth = f"{desc.bits_per_channel}-bit"

    word_size = desc.sample_word_size
    if word_size > 1:
        depth += " big-endian" if flags & FLAG_IS_BIG_ENDIAN else " little-endian"
    clauses.append(depth)

    if flags & FLAG_IS_FLOAT:
        clauses.append("floating-point")
    elif flags & FLAG_IS_SIGNED_INTEGER:
        clauses.append("signed integer")
    else:
        clauses.append("unsigned integer")

    if word_size > 0 and desc.packedness_significant:
        packed = "packed" if flags & FLAG_IS_PACKED else "unpacked"
        clauses.append(f"{packed} in {word_size} bytes")

    if word_size > 0 and desc.alignment_significant:
        clauses.append("high-aligned" if flags & FLAG_IS_ALIGNED_HIGH else "low-aligned")

    clauses.append("non-interleaved" if flags & FLAG_IS_NON_INTERLEAVED else "interleaved")

    return clauses


def _packet_layout_clauses(desc: StreamDescriptor) -> list[str]:
    """Raw packet layout fields for compressed and other formats."""
    return [
        f"{desc.bits_per_channel}bits/channel",
        f"{desc.bytes_per_packet}bytes/packet",
        f"{desc.frames_per_packet}frames/packet",
        f"{desc.bytes_per_frame}bytes/frame",
    ]


def describe_component(desc: ComponentDescriptor, include_flags: bool = False) -> str:
    """
    Describe an audio component.

    Args:
        desc: The component descriptor to describe
        include_flags: Also render the flags and flags mask words (always hex)

    Returns:
        "Manufacturer: <m>, Type: <t>, SubType: <s>" with optional flags
    """
    clauses = [
        f"Manufacturer: {get_manufacturer_name(desc.component_manufacturer)}",
        f"Type: {get_unit_type_name(desc.component_type)}",
        f"SubType: {get_unit_subtype_name(desc.component_sub_type)}",
    ]

    if include_flags:
        clauses.append(f"Flags: {to_hex(desc.component_flags)}")
        clauses.append(f"FlagsMask: {to_hex(desc.component_flags_mask)}")

    return CLAUSE_SEPARATOR.join(clauses)


def render_stream_descriptor(descriptor: StreamDescriptor) -> str:
    """Render a stream descriptor; the returned string belongs to the caller."""
    return describe_stream(descriptor)


def render_component_descriptor(descriptor: ComponentDescriptor,
                                include_flags: bool = False) -> str:
    """Render a component descriptor; the returned string belongs to the caller."""
    return describe_component(descriptor, include_flags)
