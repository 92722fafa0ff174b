"""Direct discrete Fourier transform and spectral peak extraction.

The transform is evaluated term by term on :class:`~stereowave.complex_value.Complex`
values, costing ``O(N**2)`` complex operations for ``N`` samples.  No fast
transform is used.  Bin indices are used directly as the "frequency" of a
component; they are never converted to hertz.
"""

from __future__ import annotations

import math
from functools import reduce
from typing import Sequence, Union

import numpy as np

from .complex_value import ZERO, Complex
from .wave import Wave


def transform(samples: Union[Sequence[float], np.ndarray]) -> list[Complex]:
    """Return the discrete Fourier transform of ``samples``.

    Args:
        samples: One channel of real-valued samples.

    Returns:
        ``N`` complex values where entry ``k`` is
        ``sum(e^{-2 pi i k t / N} * samples[t] for t in range(N))``.
    """

    values = [float(s) for s in np.asarray(samples, dtype=np.float64).reshape(-1)]
    n = len(values)
    spectrum: list[Complex] = []
    for k in range(n):
        total = ZERO
        for t, sample in enumerate(values):
            total = total.add(Complex.unit_angle(-2 * math.pi * k * t / n).scale(sample))
        spectrum.append(total)
    return spectrum


def magnitude_spectrum(samples: Union[Sequence[float], np.ndarray]) -> np.ndarray:
    """Return the magnitude of every bin of :func:`transform`."""
    return np.array([c.magnitude() for c in transform(samples)], dtype=np.float64)


def peak_component(spectrum: Sequence[Complex]) -> Complex:
    """Fold ``spectrum`` left to right through :meth:`Complex.larger`.

    The fold starts from ``0 + 0i``, so an empty spectrum yields zero and the
    earliest bin wins among bins of equal magnitude.
    """
    return reduce(Complex.larger, spectrum, ZERO)


def highest_amplitude_frequency_component(wave: Wave) -> float:
    """Return the magnitude of the strongest spectral component of ``wave``.

    Both channels are transformed and reduced to their peak bins; the larger
    of the two peaks is reported.  An empty wave returns ``0.0``.
    """
    left_peak = peak_component(transform(wave.left_channel()))
    right_peak = peak_component(transform(wave.right_channel()))
    return Complex.larger(right_peak, left_peak).magnitude()


__all__ = [
    "transform",
    "magnitude_spectrum",
    "peak_component",
    "highest_amplitude_frequency_component",
]
