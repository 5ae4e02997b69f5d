"""
Data model for Core Audio descriptors.

This module defines dataclasses representing AudioStreamBasicDescription
and AudioComponentDescription records, together with the format and flag
constants needed to interpret them.
"""

import sys
from dataclasses import dataclass

from .fourcc import fourcc, u32


# ============================================================================
# Format Identifiers
# ============================================================================

FORMAT_LINEAR_PCM = fourcc("lpcm")
FORMAT_APPLE_LOSSLESS = fourcc("alac")


# ============================================================================
# Format Flags
# ============================================================================

# Generic format flags (kAudioFormatFlag*), shared by linear PCM
FLAG_IS_FLOAT = 0x01
FLAG_IS_BIG_ENDIAN = 0x02
FLAG_IS_SIGNED_INTEGER = 0x04
FLAG_IS_PACKED = 0x08
FLAG_IS_ALIGNED_HIGH = 0x10
FLAG_IS_NON_INTERLEAVED = 0x20
FLAG_IS_NON_MIXABLE = 0x40

# Fixed-point fraction bit count, stored in bits 7..12 of the PCM flags
SAMPLE_FRACTION_SHIFT = 7
SAMPLE_FRACTION_MASK = 0x3F << SAMPLE_FRACTION_SHIFT

FLAGS_NATIVE_ENDIAN = FLAG_IS_BIG_ENDIAN if sys.byteorder == "big" else 0

# Apple Lossless source bit depth; the whole flags word holds one of these
ALAC_16_BIT_SOURCE_DATA = 1
ALAC_20_BIT_SOURCE_DATA = 2
ALAC_24_BIT_SOURCE_DATA = 3
ALAC_32_BIT_SOURCE_DATA = 4


# ============================================================================
# Descriptors
# ============================================================================

@dataclass(frozen=True)
class StreamDescriptor:
    """
    Audio stream basic description.

    Fields are taken as supplied; nothing here assumes a value belongs to
    any known set, and every derived property is defined for all inputs.
    """
    sample_rate: float = 0.0
    format_id: int = 0
    format_flags: int = 0
    bytes_per_packet: int = 0
    frames_per_packet: int = 0
    bytes_per_frame: int = 0
    channels_per_frame: int = 0
    bits_per_channel: int = 0
    reserved: int = 0

    @property
    def is_pcm(self) -> bool:
        """Check if this is linear PCM."""
        return self.format_id == FORMAT_LINEAR_PCM

    @property
    def is_interleaved(self) -> bool:
        """Check if channels share one stream. Only PCM can be non-interleaved."""
        return not self.is_pcm or not (self.format_flags & FLAG_IS_NON_INTERLEAVED)

    @property
    def interleaved_channel_count(self) -> int:
        """Get the number of channels carried in each stream."""
        return self.channels_per_frame if self.is_interleaved else 1

    @property
    def channel_stream_count(self) -> int:
        """Get the number of separate channel streams."""
        return 1 if self.is_interleaved else self.channels_per_frame

    @property
    def sample_word_size(self) -> int:
        """Get the size in bytes of one sample container, or 0 if unknown."""
        channels = self.interleaved_channel_count
        if self.bytes_per_frame > 0 and channels > 0:
            return self.bytes_per_frame // channels
        return 0

    @property
    def packedness_significant(self) -> bool:
        """Check if the sample container is wider or narrower than the bit depth."""
        if not self.is_pcm:
            return False
        return u32(self.sample_word_size << 3) != self.bits_per_channel

    @property
    def alignment_significant(self) -> bool:
        """Check if the position of samples within their container matters."""
        return self.packedness_significant or (self.bits_per_channel & 7) != 0

    @property
    def is_signed_integer(self) -> bool:
        return self.is_pcm and bool(self.format_flags & FLAG_IS_SIGNED_INTEGER)

    @property
    def is_float(self) -> bool:
        return self.is_pcm and bool(self.format_flags & FLAG_IS_FLOAT)

    @property
    def is_native_endian(self) -> bool:
        """Check if the big-endian flag matches the host byte order."""
        return (self.format_flags & FLAG_IS_BIG_ENDIAN) == FLAGS_NATIVE_ENDIAN

    @property
    def fraction_bits(self) -> int:
        """Get the fixed-point fraction bit count from the PCM flags."""
        return (self.format_flags & SAMPLE_FRACTION_MASK) >> SAMPLE_FRACTION_SHIFT


@dataclass(frozen=True)
class ComponentDescriptor:
    """Audio component description identifying an audio unit."""
    component_type: int = 0
    component_sub_type: int = 0
    component_manufacturer: int = 0
    component_flags: int = 0
    component_flags_mask: int = 0
