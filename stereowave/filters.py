"""Threshold filters over a wave's magnitude spectrum.

Filtering here is a projection: each channel is transformed, and the bin
magnitudes that pass the threshold test become the samples of the output
channel, in bin order.  No inverse transform is applied, so the result is
generally shorter than the input and is not a time-domain signal.  The two
channels are filtered independently and may end up with different lengths.
"""

from __future__ import annotations

import enum
import logging
from typing import Union

import numpy as np

from .spectral import magnitude_spectrum
from .wave import Wave

logger = logging.getLogger(__name__)


class FilterKind(enum.Enum):
    """Supported filter shapes and the number of thresholds each takes."""

    LOWPASS = "lowpass"
    BANDPASS = "bandpass"
    HIGHPASS = "highpass"

    @property
    def threshold_count(self) -> int:
        return 2 if self is FilterKind.BANDPASS else 1


def _coerce_kind(kind: Union[FilterKind, str]) -> FilterKind:
    if isinstance(kind, FilterKind):
        return kind
    if isinstance(kind, str):
        try:
            return FilterKind(kind.lower())
        except ValueError:
            pass
    raise ValueError(f"Unknown filter kind: {kind!r}")


def _pass_band(
    magnitudes: np.ndarray, kind: FilterKind, thresholds: list[float]
) -> np.ndarray:
    if kind is FilterKind.LOWPASS:
        mask = magnitudes < thresholds[0]
    elif kind is FilterKind.BANDPASS:
        mask = (magnitudes > thresholds[0]) & (magnitudes < thresholds[1])
    else:
        mask = magnitudes > thresholds[0]
    return magnitudes[mask]


def filter_wave(wave: Wave, kind: Union[FilterKind, str], *thresholds: float) -> Wave:
    """Return the spectral projection of ``wave`` through a threshold filter.

    Args:
        wave: Wave to filter.  It is not modified.
        kind: Filter shape.  Strings such as ``"lowpass"`` are accepted.
        *thresholds: Zero, one or two magnitude thresholds.  They are sorted
            before use.  Lowpass keeps magnitudes below the single threshold,
            highpass keeps those above it and bandpass keeps those strictly
            between two thresholds.

    Returns:
        A new wave whose channels are the surviving magnitudes.  With no
        thresholds an unchanged copy of ``wave`` is returned.

    Raises:
        ValueError: If more than two thresholds are given, if the number of
            thresholds does not suit ``kind`` or if ``kind`` is unknown.
    """

    if len(thresholds) > 2:
        raise ValueError(f"At most two thresholds are allowed, got {len(thresholds)}")
    if not thresholds:
        return wave.copy()

    filter_kind = _coerce_kind(kind)
    if len(thresholds) != filter_kind.threshold_count:
        raise ValueError(
            f"{filter_kind.name.lower()} filter takes {filter_kind.threshold_count} "
            f"threshold(s), got {len(thresholds)}"
        )

    ordered = sorted(float(t) for t in thresholds)
    left = _pass_band(magnitude_spectrum(wave.left_channel()), filter_kind, ordered)
    right = _pass_band(magnitude_spectrum(wave.right_channel()), filter_kind, ordered)
    if left.size != right.size:
        logger.debug(
            "%s filter kept %d left and %d right bins",
            filter_kind.name.lower(),
            left.size,
            right.size,
        )
    return Wave(left, right)


__all__ = ["FilterKind", "filter_wave"]
