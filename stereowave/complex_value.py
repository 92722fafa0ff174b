"""Immutable complex number used by the direct Fourier transform."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    """A complex value ``real + imag * i``.

    Every operation returns a new instance; the receiver is never modified.
    """

    real: float = 0.0
    imag: float = 0.0

    @classmethod
    def unit_angle(cls, theta: float) -> "Complex":
        """Return the point on the unit circle at angle ``theta`` (``e^{i theta}``)."""
        return cls(math.cos(theta), math.sin(theta))

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.real + other.real, self.imag + other.imag)

    def scale(self, scalar: float) -> "Complex":
        return Complex(scalar * self.real, scalar * self.imag)

    def magnitude(self) -> float:
        return math.sqrt(self.real**2 + self.imag**2)

    @staticmethod
    def larger(first: "Complex", second: "Complex") -> "Complex":
        """Return whichever operand has the larger magnitude.

        On equal magnitudes ``first`` is returned.  Peak extraction folds
        spectra through this comparison, so the tie-break decides which bin
        wins when several share the largest magnitude.
        """
        if first.magnitude() >= second.magnitude():
            return first
        return second

    def __abs__(self) -> float:
        return self.magnitude()


ZERO = Complex(0.0, 0.0)

__all__ = ["Complex", "ZERO"]
