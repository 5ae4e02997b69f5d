"""
Four-character code helpers.

Core Audio identifies formats, unit types and manufacturers with 32-bit
codes that are conventionally read left-to-right as four ASCII characters
('lpcm', 'auou', 'appl'). This module converts between the two forms.
"""


def fourcc(tag: str) -> int:
    """
    Build a 32-bit code from a four-character tag.

    Args:
        tag: Exactly four single-byte characters, e.g. "lpcm"

    Returns:
        The code with the first character in the most significant byte

    Raises:
        ValueError: If the tag is not four single-byte characters
    """
    try:
        raw = tag.encode("latin-1")
    except UnicodeEncodeError:
        raise ValueError(f"Four-character code must be single-byte characters: {tag!r}") from None
    if len(raw) != 4:
        raise ValueError(f"Four-character code must be exactly 4 characters: {tag!r}")
    return int.from_bytes(raw, byteorder="big")


def u32(value: int) -> int:
    """Reduce a value to an unsigned 32-bit integer."""
    return value & 0xFFFFFFFF


def to_hex(value: int, width: int = 8) -> str:
    """Format an unsigned value as 0x-prefixed, zero-padded uppercase hex."""
    return f"0x{u32(value):0{width}X}"


def _is_printable(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


def render_fourcc(code: int) -> str:
    """
    Render a 32-bit code as a quoted tag, or as hex if it is not printable.

    Args:
        code: The code to render (reduced to 32 bits)

    Returns:
        "'abcd'" when all four bytes are printable ASCII, else "0x0000ABCD"
    """
    code = u32(code)
    chars = [(code >> shift) & 0xFF for shift in (24, 16, 8, 0)]

    if not all(_is_printable(c) for c in chars):
        return to_hex(code)

    return "'" + "".join(chr(c) for c in chars) + "'"
