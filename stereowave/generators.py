"""Closed-form periodic waveform generators.

Each generator fills one channel buffer from a formula and returns it as a
:class:`~stereowave.wave.Wave` with identical left and right channels.
"""

from __future__ import annotations

import enum
from typing import Union

import numpy as np

from .constants import SAMPLES_PER_SECOND
from .wave import Wave


class WaveformKind(enum.Enum):
    SINE = "sine"
    SQUARE = "square"
    TRIANGLE = "triangle"


def _sample_times(duration: float) -> np.ndarray:
    n = int(duration * SAMPLES_PER_SECOND)
    if n <= 0:
        return np.zeros(0, dtype=np.float64)
    return np.arange(n, dtype=np.float64) * (duration / n)


def generate(
    kind: Union[WaveformKind, str],
    freq: float,
    phase: float,
    amplitude: float,
    duration: float,
) -> Wave:
    """Return a periodic wave of the given shape.

    Args:
        kind: ``"sine"``, ``"square"`` or ``"triangle"``.
        freq: Frequency in hertz, ``> 0``.
        phase: Phase offset in radians, ``>= 0``.
        amplitude: Peak amplitude, in ``(0, 1]``.
        duration: Length in seconds, ``>= 0``.  It is converted to
            ``int(duration * SAMPLES_PER_SECOND)`` samples; zero gives an
            empty wave.

    Raises:
        ValueError: If ``kind`` is not a known waveform.
    """

    try:
        shape = WaveformKind(kind.lower() if isinstance(kind, str) else kind)
    except ValueError:
        raise ValueError(f"Unknown waveform kind: {kind!r}") from None

    angle = 2.0 * np.pi * freq * _sample_times(duration) + phase
    if shape is WaveformKind.SINE:
        channel = amplitude * np.sin(angle)
    elif shape is WaveformKind.SQUARE:
        channel = amplitude * np.sign(np.sin(angle))
    else:
        channel = amplitude * 2 / np.pi * np.arcsin(np.sin(np.pi * angle))
    return Wave(channel, channel)


def sine_wave(freq: float, phase: float, amplitude: float, duration: float) -> Wave:
    return generate(WaveformKind.SINE, freq, phase, amplitude, duration)


def square_wave(freq: float, phase: float, amplitude: float, duration: float) -> Wave:
    return generate(WaveformKind.SQUARE, freq, phase, amplitude, duration)


def triangle_wave(freq: float, phase: float, amplitude: float, duration: float) -> Wave:
    return generate(WaveformKind.TRIANGLE, freq, phase, amplitude, duration)


__all__ = ["WaveformKind", "generate", "sine_wave", "square_wave", "triangle_wave"]
