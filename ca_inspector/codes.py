"""
Named code tables for Core Audio identifiers.

Maps known manufacturer, audio unit type, audio unit subtype and audio
format codes to short human-readable labels. The tables are built once
when the module is imported and exposed read-only, so they can be shared
between threads without locking.
"""

from types import MappingProxyType
from typing import Mapping

from .fourcc import fourcc, render_fourcc


_MANUFACTURER_NAMES = {
    "appl": "Apple",
}

_UNIT_TYPE_NAMES = {
    "auou": "Output",
    "aumu": "MusicDevice",
    "aumf": "MusicEffect",
    "aufc": "FormatConverter",
    "aufx": "Effect",
    "aumx": "Mixer",
    "aupn": "Panner",
    "auol": "OfflineEffect",
    "augn": "Generator",
    "aumi": "MIDIProcessor",
    "aurx": "RemoteEffect",
    "aurg": "RemoteGenerator",
    "auri": "RemoteInstrument",
    "aurm": "RemoteMusicEffect",
}

_UNIT_SUBTYPE_NAMES = {
    # Output units
    "genr": "GenericOutput",
    "ahal": "HALOutput",
    "def ": "DefaultOutput",
    "sys ": "SystemOutput",
    "rioc": "RemoteIO",
    "vpio": "VoiceProcessingIO",
    # Music devices
    "dls ": "DLSSynth",
    "samp": "Sampler",
    # Format converters
    "conv": "AUConverter",
    "vari": "Varispeed",
    "defr": "DeferredRenderer",
    "splt": "Splitter",
    "merg": "Merger",
    "nutp": "NewTimePitch",
    "ipto": "AUiPodTimeOther",
    "tmpt": "Pitch",
    "raac": "RoundTripAAC",
    "iptm": "AUiPodTime",
    # Effects
    "lmtr": "PeakLimiter",
    "dcmp": "DynamicsProcessor",
    "lpas": "LowPassFilter",
    "hpas": "HighPassFilter",
    "bpas": "BandPassFilter",
    "hshf": "HighShelfFilter",
    "lshf": "LowShelfFilter",
    "pmeq": "ParametricEQ",
    "dist": "Distortion",
    "dely": "Delay",
    "greq": "GraphicEQ",
    "mcmp": "MultiBandCompressor",
    "mrev": "MatrixReverb",
    "filt": "AUFilter",
    "nsnd": "NetSend",
    "sdly": "SampleDelay",
    "rogr": "RogerBeep",
    "rvb2": "Reverb2",
    "ipeq": "AUiPodEQ",
    "nbeq": "NBandEQ",
    # Mixers
    "mcmx": "MultiChannelMixer",
    "mxmx": "MatrixMixer",
    "smxr": "StereoMixer",
    "3dmx": "3DMixer",
    "3dem": "AU3DMixerEmbedded",
    # Panners
    "sphr": "SphericalHeadPanner",
    "vbas": "VectorPanner",
    "ambi": "SoundFieldPanner",
    "hrtf": "HRTFPanner",
    # Generators
    "nrcv": "NetReceive",
    "sspl": "ScheduledSoundPlayer",
    "afpl": "AudioFilePlayer",
}

_AUDIO_FORMAT_NAMES = {
    "lpcm": "LinearPCM",
    "ac-3": "AC3",
    "cac3": "60958AC3",
    "ima4": "AppleIMA4",
    "aac ": "MPEG4AAC",
    "celp": "MPEG4CELP",
    "hvxc": "MPEG4HVXC",
    "twvq": "MPEG4TwinVQ",
    "MAC3": "MACE3",
    "MAC6": "MACE6",
    "ulaw": "ULaw",
    "alaw": "ALaw",
    "QDMC": "QDesign",
    "QDM2": "QDesign2",
    "Qclp": "QUALCOMM",
    ".mp1": "MPEGLayer1",
    ".mp2": "MPEGLayer2",
    ".mp3": "MPEGLayer3",
    "time": "TimeCode",
    "midi": "MIDIStream",
    "apvs": "ParameterValueStream",
    "alac": "AppleLossless",
    "aach": "MPEG4AAC_HE",
    "aacl": "MPEG4AAC_LD",
    "aace": "MPEG4AAC_ELD",
    "aacf": "MPEG4AAC_ELD_SBR",
    "aacg": "MPEG4AAC_ELD_V2",
    "aacp": "MPEG4AAC_HE_V2",
    "aacs": "MPEG4AAC_Spatial",
    "samr": "AMR",
    "AUDB": "Audible",
    "ilbc": "iLBC",
    "aes3": "AES3",
}

# Wave-format codes wrapped as 'ms' + 16-bit tag; not printable as FourCC
_AUDIO_FORMAT_CODE_NAMES = {
    0x6D730011: "DVIIntelIMA",
    0x6D730031: "MicrosoftGSM",
}


def _build_table(names: dict[str, str],
                 codes: Mapping[int, str] = MappingProxyType({})) -> Mapping[int, str]:
    """Build a read-only code table from tag names plus raw numeric codes."""
    table = {fourcc(tag): label for tag, label in names.items()}
    table.update(codes)
    return MappingProxyType(table)


MANUFACTURER_NAMES: Mapping[int, str] = _build_table(_MANUFACTURER_NAMES)
UNIT_TYPE_NAMES: Mapping[int, str] = _build_table(_UNIT_TYPE_NAMES)
UNIT_SUBTYPE_NAMES: Mapping[int, str] = _build_table(_UNIT_SUBTYPE_NAMES)
AUDIO_FORMAT_NAMES: Mapping[int, str] = _build_table(_AUDIO_FORMAT_NAMES,
                                                     _AUDIO_FORMAT_CODE_NAMES)


def resolve_code(code: int, table: Mapping[int, str]) -> str:
    """
    Get the label for a code, falling back to its FourCC rendering.

    Args:
        code: The 32-bit code to look up
        table: One of the named code tables

    Returns:
        The registered label, or render_fourcc(code) if the code is unknown
    """
    if code in table:
        return table[code]
    return render_fourcc(code)


def get_manufacturer_name(code: int) -> str:
    """Get human-readable name for a component manufacturer code."""
    return resolve_code(code, MANUFACTURER_NAMES)


def get_unit_type_name(code: int) -> str:
    """Get human-readable name for an audio unit type code."""
    return resolve_code(code, UNIT_TYPE_NAMES)


def get_unit_subtype_name(code: int) -> str:
    """Get human-readable name for an audio unit subtype code."""
    return resolve_code(code, UNIT_SUBTYPE_NAMES)


def get_audio_format_name(code: int) -> str:
    """Get human-readable name for an audio format code."""
    return resolve_code(code, AUDIO_FORMAT_NAMES)
