"""
Core Audio Descriptor Inspector

A Python library and tool that renders AudioStreamBasicDescription and
AudioComponentDescription records as human-readable diagnostic text.
"""

__version__ = "0.1.0"

from .fourcc import fourcc, render_fourcc, to_hex
from .codes import (
    MANUFACTURER_NAMES,
    UNIT_TYPE_NAMES,
    UNIT_SUBTYPE_NAMES,
    AUDIO_FORMAT_NAMES,
    resolve_code,
)
from .model import StreamDescriptor, ComponentDescriptor
from .parser import (
    ParseError,
    parse_hex,
    parse_stream_descriptor,
    parse_component_descriptor,
)
from .render import (
    describe_stream,
    describe_component,
    render_stream_descriptor,
    render_component_descriptor,
)

__all__ = [
    "fourcc",
    "render_fourcc",
    "to_hex",
    "MANUFACTURER_NAMES",
    "UNIT_TYPE_NAMES",
    "UNIT_SUBTYPE_NAMES",
    "AUDIO_FORMAT_NAMES",
    "resolve_code",
    "StreamDescriptor",
    "ComponentDescriptor",
    "ParseError",
    "parse_hex",
    "parse_stream_descriptor",
    "parse_component_descriptor",
    "describe_stream",
    "describe_component",
    "render_stream_descriptor",
    "render_component_descriptor",
]
