"""Tests for the descriptor record parser."""

import pytest
from pathlib import Path

from ca_inspector.fourcc import fourcc
from ca_inspector.model import StreamDescriptor, ComponentDescriptor, FORMAT_LINEAR_PCM
from ca_inspector.parser import (
    ParseError,
    parse_hex,
    parse_stream_descriptor,
    parse_component_descriptor,
    iter_stream_descriptors,
    iter_component_descriptors,
    stream_descriptor_to_bytes,
    component_descriptor_to_bytes,
    STREAM_RECORD_SIZE,
    COMPONENT_RECORD_SIZE,
)
from ca_inspector.render import describe_stream, describe_component


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> bytes:
    with open(FIXTURES_DIR / name) as f:
        return parse_hex(f.read())


class TestHexDump:
    """Tests for hex dump parsing."""

    def test_spaced_bytes(self):
        """Test plain space-separated bytes."""
        assert parse_hex("6D 63 70 6C") == b"mcpl"

    def test_separators_prefixes_and_comments(self):
        """Test that separators, 0x prefixes and comments are ignored."""
        text = "0x6D,63:70;6c  # format\n\n  0x0C000000 # flags\n"
        assert parse_hex(text) == b"mcpl\x0c\x00\x00\x00"

    def test_address_column(self):
        """Test that debugger address columns are not read as data."""
        text = (
            "0x16fdff2a0: 00 00 00 00 80 88 e5 40\n"
            "0x16fdff2a8: 6d 63 70 6c 0c 00 00 00\n"
        )
        assert parse_hex(text) == bytes.fromhex("000000008088E5406D63706C0C000000")

    def test_colon_separated_bytes_are_data(self):
        """Test that a colon directly between bytes is only a separator."""
        assert parse_hex("6D:63:70:6C") == b"mcpl"

    def test_empty(self):
        """Test that empty input gives no bytes."""
        assert parse_hex("") == b""
        assert parse_hex("# nothing here\n") == b""

    def test_invalid_characters(self):
        """Test that non-hex groups are rejected with a line number."""
        with pytest.raises(ParseError, match="line 2"):
            parse_hex("00 11\n22 zz\n")

    def test_odd_digit_count(self):
        """Test that a dangling nibble is rejected."""
        with pytest.raises(ParseError):
            parse_hex("00 1")


class TestStreamRecords:
    """Tests for parsing AudioStreamBasicDescription records."""

    @pytest.fixture
    def lpcm_record(self):
        """Load the 16-bit stereo PCM fixture."""
        return load_fixture("lpcm_stereo_16bit.txt")

    def test_record_size(self, lpcm_record):
        """Test the record layout size."""
        assert STREAM_RECORD_SIZE == 40
        assert len(lpcm_record) == STREAM_RECORD_SIZE

    def test_lpcm_fields(self, lpcm_record):
        """Test parsing of every field."""
        desc = parse_stream_descriptor(lpcm_record)
        assert desc == StreamDescriptor(
            sample_rate=44100.0,
            format_id=FORMAT_LINEAR_PCM,
            format_flags=0x0C,
            bytes_per_packet=4,
            frames_per_packet=1,
            bytes_per_frame=4,
            channels_per_frame=2,
            bits_per_channel=16,
            reserved=0,
        )

    def test_lpcm_description(self, lpcm_record):
        """Test rendering a parsed PCM record."""
        assert describe_stream(parse_stream_descriptor(lpcm_record)) == (
            "2 Ch @ 44100 Hz, Format: LinearPCM, 16-bit little-endian, "
            "signed integer, interleaved"
        )

    def test_float_description(self):
        """Test rendering a parsed non-interleaved float record."""
        desc = parse_stream_descriptor(load_fixture("lpcm_float32_noninterleaved.txt"))
        assert describe_stream(desc) == (
            "2 Ch @ 48000 Hz, Format: LinearPCM, 32-bit little-endian, "
            "floating-point, non-interleaved"
        )

    def test_aac_description(self):
        """Test rendering a parsed AAC record."""
        desc = parse_stream_descriptor(load_fixture("aac_stereo.txt"))
        assert desc.format_id == fourcc("aac ")
        assert describe_stream(desc) == (
            "2 Ch @ 48000 Hz, Format: MPEG4AAC, 0bits/channel, 0bytes/packet, "
            "1024frames/packet, 0bytes/frame"
        )

    def test_alac_description(self):
        """Test rendering a parsed Apple Lossless record."""
        desc = parse_stream_descriptor(load_fixture("alac_24bit.txt"))
        assert "24-bit source data" in describe_stream(desc)
        assert describe_stream(desc).endswith("4096frames/packet")

    def test_big_endian(self, lpcm_record):
        """Test that big-endian records decode to the same descriptor."""
        desc = parse_stream_descriptor(lpcm_record)
        data = stream_descriptor_to_bytes(desc, "big")
        assert data[8:12] == b"lpcm"
        assert data[:8] == bytes.fromhex("40E5888000000000")
        assert parse_stream_descriptor(data, "big") == desc

    def test_encode_matches_fixture(self, lpcm_record):
        """Test that encoding reproduces the captured bytes."""
        desc = parse_stream_descriptor(lpcm_record)
        assert stream_descriptor_to_bytes(desc) == lpcm_record

    def test_wrong_length(self, lpcm_record):
        """Test that truncated and oversized records are rejected."""
        with pytest.raises(ParseError, match="40 bytes"):
            parse_stream_descriptor(lpcm_record[:-1])
        with pytest.raises(ParseError):
            parse_stream_descriptor(lpcm_record + b"\x00")

    def test_unknown_byte_order(self, lpcm_record):
        """Test that only little and big byte orders are accepted."""
        with pytest.raises(ParseError, match="byte order"):
            parse_stream_descriptor(lpcm_record, "middle")

    def test_encode_out_of_range(self):
        """Test that fields wider than 32 bits cannot be encoded."""
        with pytest.raises(ParseError):
            stream_descriptor_to_bytes(StreamDescriptor(format_id=1 << 32))

    def test_record_array(self, lpcm_record):
        """Test parsing consecutive records."""
        data = lpcm_record + load_fixture("aac_stereo.txt")
        records = list(iter_stream_descriptors(data))
        assert len(records) == 2
        assert records[0].is_pcm
        assert records[1].frames_per_packet == 1024

    def test_record_array_length(self, lpcm_record):
        """Test that partial or empty arrays are rejected."""
        with pytest.raises(ParseError):
            list(iter_stream_descriptors(lpcm_record + b"\x00\x00"))
        with pytest.raises(ParseError):
            list(iter_stream_descriptors(b""))


class TestComponentRecords:
    """Tests for parsing AudioComponentDescription records."""

    @pytest.fixture
    def remote_io_record(self):
        """Load the RemoteIO component fixture."""
        return load_fixture("remote_io_component.txt")

    def test_fields(self, remote_io_record):
        """Test parsing of every field."""
        assert COMPONENT_RECORD_SIZE == 20
        desc = parse_component_descriptor(remote_io_record)
        assert desc == ComponentDescriptor(
            component_type=fourcc("auou"),
            component_sub_type=fourcc("rioc"),
            component_manufacturer=fourcc("appl"),
        )

    def test_description(self, remote_io_record):
        """Test rendering a parsed component record."""
        desc = parse_component_descriptor(remote_io_record)
        assert describe_component(desc) == (
            "Manufacturer: Apple, Type: Output, SubType: RemoteIO"
        )

    def test_big_endian_layout(self, remote_io_record):
        """Test that big-endian records hold codes in reading order."""
        desc = parse_component_descriptor(remote_io_record)
        data = component_descriptor_to_bytes(desc, "big")
        assert data == b"auou" + b"rioc" + b"appl" + bytes(8)
        assert parse_component_descriptor(data, "big") == desc

    def test_wrong_length(self, remote_io_record):
        """Test that a stream-sized buffer is not a component."""
        with pytest.raises(ParseError, match="20 bytes"):
            parse_component_descriptor(remote_io_record * 2)

    def test_record_array(self, remote_io_record):
        """Test parsing consecutive component records."""
        records = list(iter_component_descriptors(remote_io_record * 3))
        assert len(records) == 3
        assert all(r.component_manufacturer == fourcc("appl") for r in records)
