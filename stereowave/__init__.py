"""Stereowave package."""

from .complex_value import Complex
from .containment import contains
from .filters import FilterKind, filter_wave
from .generators import WaveformKind, generate, sine_wave, square_wave, triangle_wave
from .similarity import similarity
from .spectral import highest_amplitude_frequency_component, magnitude_spectrum, transform
from .streams import ArraySource, SoundDevicePlayer, SoundDeviceSource, stream_to_sink, wave_from_source
from .wave import Wave, normalize

__all__ = [
    "Complex",
    "Wave",
    "normalize",
    "transform",
    "magnitude_spectrum",
    "highest_amplitude_frequency_component",
    "FilterKind",
    "filter_wave",
    "similarity",
    "contains",
    "WaveformKind",
    "generate",
    "sine_wave",
    "square_wave",
    "triangle_wave",
    "ArraySource",
    "SoundDeviceSource",
    "SoundDevicePlayer",
    "wave_from_source",
    "stream_to_sink",
]
