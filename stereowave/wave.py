"""Stereo wave container and the additive algebra defined over it.

A :class:`Wave` holds two real-valued sample channels at
:data:`~stereowave.constants.SAMPLES_PER_SECOND`.  Query operations treat a
wave as a value: channel getters hand out copies and ``add``, ``add_echo``,
``scaled`` and ``filter`` all return new waves.  Two operations mutate the
receiver in place and say so explicitly: :meth:`Wave.append` and
:meth:`Wave.scale`.  A single instance is therefore not safe to mutate from
several threads without external locking.

Combining operations finish with per-channel peak normalisation (see
:func:`normalize`), so their results stay within ``[-1, 1]``.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np

from .constants import SAMPLES_PER_SECOND

ChannelLike = Union[Sequence[float], np.ndarray]


def _as_channel(samples: ChannelLike) -> np.ndarray:
    return np.array(samples, dtype=np.float64).reshape(-1)


class Wave:
    """Two channels of audio samples.

    Args:
        left: Samples of the left channel, copied on construction.
        right: Samples of the right channel, copied on construction.  Both
            channels are expected to have the same length; this is the
            caller's responsibility and is not validated, because the
            spectral filter may legitimately produce channels of different
            lengths.
    """

    sample_rate: int = SAMPLES_PER_SECOND

    def __init__(self, left: ChannelLike = (), right: ChannelLike = ()) -> None:
        self._left = _as_channel(left)
        self._right = _as_channel(right)

    # --------------------------------------------------------------
    def left_channel(self) -> np.ndarray:
        """Return a copy of the left channel."""
        return self._left.copy()

    def right_channel(self) -> np.ndarray:
        """Return a copy of the right channel."""
        return self._right.copy()

    def __len__(self) -> int:
        return int(self._left.size)

    def duration(self) -> float:
        """Return the length of the wave in seconds."""
        return self._left.size / self.sample_rate

    def copy(self) -> "Wave":
        return Wave(self._left, self._right)

    def __repr__(self) -> str:
        return (
            f"Wave(samples={self._left.size}, "
            f"duration={self.duration():.6f}s)"
        )

    # --------------------------------------------------------------
    def append(
        self,
        left: Union["Wave", ChannelLike],
        right: Optional[ChannelLike] = None,
    ) -> None:
        """Append samples to the end of this wave, in place.

        Accepts either another :class:`Wave` or a pair of channel sequences.
        The two sequences are expected to have equal length; this is not
        checked.
        """
        if isinstance(left, Wave):
            left, right = left._left, left._right
        elif right is None:
            raise TypeError("append() needs a Wave or both a left and a right channel")
        self._left = np.concatenate([self._left, _as_channel(left)])
        self._right = np.concatenate([self._right, _as_channel(right)])

    def add(self, other: "Wave") -> "Wave":
        """Return the normalised sum of this wave and ``other``.

        The shorter wave is zero-extended at the end before summing.
        Neither operand is modified.
        """
        first, second = equalize(self, other)
        summed = Wave(first._left + second._left, first._right + second._right)
        return normalize(summed)

    def add_echo(self, delta: float, alpha: float) -> "Wave":
        """Return this wave combined with a delayed, damped echo of itself.

        Args:
            delta: Offset of the echo in samples.  Fractional values are
                truncated.  A negative offset makes the echo lead the
                original by ``-delta`` samples.
            alpha: Damping factor applied to the echo samples.

        Returns:
            The normalised sum of the original and the echo.  The echo is
            channel-swapped: the original right channel feeds the echo's
            left channel and vice versa.

        Raises:
            ValueError: If a negative ``delta`` is longer than the wave.
        """
        n = self._left.size
        length = int(n + delta)
        if length < 0:
            raise ValueError(
                f"echo offset {delta} is longer than the wave ({n} samples)"
            )
        shift = int(delta)
        echo_left = np.zeros(length, dtype=np.float64)
        echo_right = np.zeros(length, dtype=np.float64)
        if delta < 0:
            start = -shift
            echo_left[:] = self._right[start : start + length] * alpha
            echo_right[:] = self._left[start : start + length] * alpha
        else:
            echo_left[shift : shift + n] = self._right * alpha
            echo_right[shift : shift + n] = self._left * alpha
        return self.copy().add(Wave(echo_left, echo_right))

    def scale(self, scaling_factor: float) -> None:
        """Multiply every sample by ``scaling_factor`` and renormalise, in place."""
        scaled = self.scaled(scaling_factor)
        self._left = scaled._left
        self._right = scaled._right

    def scaled(self, scaling_factor: float) -> "Wave":
        """Return a scaled and renormalised copy, leaving this wave unchanged."""
        return normalize(
            Wave(self._left * scaling_factor, self._right * scaling_factor)
        )

    # --------------------------------------------------------------
    # Engine shortcuts.  The engines import ``Wave`` themselves, so they are
    # resolved at call time.

    def filter(self, kind, *thresholds: float) -> "Wave":
        """See :func:`stereowave.filters.filter_wave`."""
        from .filters import filter_wave

        return filter_wave(self, kind, *thresholds)

    def highest_amplitude_frequency_component(self) -> float:
        """See :func:`stereowave.spectral.highest_amplitude_frequency_component`."""
        from .spectral import highest_amplitude_frequency_component

        return highest_amplitude_frequency_component(self)

    def similarity(self, other: "Wave") -> float:
        """See :func:`stereowave.similarity.similarity`."""
        from .similarity import similarity

        return similarity(self, other)

    def contains(self, other: "Wave") -> bool:
        """See :func:`stereowave.containment.contains`."""
        from .containment import contains

        return contains(self, other)


def _pad(channel: np.ndarray, length: int) -> np.ndarray:
    if channel.size >= length:
        return channel.copy()
    return np.concatenate([channel, np.zeros(length - channel.size)])


def equalize(first: Wave, second: Wave) -> tuple[Wave, Wave]:
    """Return copies of ``first`` and ``second`` zero-extended to equal length.

    Zeros are appended at the end of the shorter wave; nothing is truncated.
    Each channel is padded against its counterpart in the other wave.
    """
    left_len = max(first._left.size, second._left.size)
    right_len = max(first._right.size, second._right.size)
    return (
        Wave(_pad(first._left, left_len), _pad(first._right, right_len)),
        Wave(_pad(second._left, left_len), _pad(second._right, right_len)),
    )


def _normalize_channel(channel: np.ndarray) -> np.ndarray:
    if channel.size == 0:
        return channel.copy()
    peak = max(abs(float(channel.max())), abs(float(channel.min())))
    if peak > 1.0:
        return channel / peak
    return channel.copy()


def normalize(wave: Wave) -> Wave:
    """Return ``wave`` with each channel peak-normalised independently.

    A channel whose largest absolute sample exceeds ``1.0`` is divided by that
    value; a channel already within ``[-1, 1]`` is left as is.  Because the
    channels are treated separately, a loud left channel does not attenuate
    the right one and the stereo balance may shift.
    """
    return Wave(_normalize_channel(wave._left), _normalize_channel(wave._right))


__all__ = ["Wave", "equalize", "normalize"]
