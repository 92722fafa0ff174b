"""Damping-factor similarity search between two waves."""

from __future__ import annotations

import numpy as np

from .constants import BETA_MAX, BETA_STEP, SIMILARITY_CHUNK_SIZE
from .wave import Wave, equalize


def beta_grid(step: float = BETA_STEP, maximum: float = BETA_MAX) -> np.ndarray:
    """Return the damping factors scanned by :func:`similarity`.

    The grid is ``step, 2 * step, …`` with ``maximum / step`` points, each
    built by adding ``step`` to the previous value.
    """
    count = int(round(maximum / step))
    return np.cumsum(np.full(count, step, dtype=np.float64))


def gamma(
    x_left: np.ndarray,
    x_right: np.ndarray,
    y_left: np.ndarray,
    y_right: np.ndarray,
    beta: float,
) -> float:
    """Return ``1 / (1 + sum((x - beta * y) ** 2))`` summed over both channels."""
    distance = np.sum((x_right - beta * y_right) ** 2) + np.sum(
        (x_left - beta * y_left) ** 2
    )
    return float(1.0 / (1.0 + distance))


def _best_gamma(
    x_left: np.ndarray,
    x_right: np.ndarray,
    y_left: np.ndarray,
    y_right: np.ndarray,
    betas: np.ndarray,
    chunk_size: int,
) -> float:
    # Evaluates ``gamma`` for a block of betas at once: rows are betas,
    # columns are samples.
    rows = max(1, chunk_size // max(1, x_left.size, x_right.size))
    best = 0.0
    for start in range(0, betas.size, rows):
        block = betas[start : start + rows, np.newaxis]
        distance = np.sum((x_right - block * y_right) ** 2, axis=1) + np.sum(
            (x_left - block * y_left) ** 2, axis=1
        )
        candidate = float(np.fmax.reduce(1.0 / (1.0 + distance)))
        if candidate > best:
            best = candidate
    return best


def similarity(
    first: Wave,
    second: Wave,
    *,
    step: float = BETA_STEP,
    maximum: float = BETA_MAX,
    chunk_size: int = SIMILARITY_CHUNK_SIZE,
) -> float:
    """Return a symmetric similarity score in ``(0, 1]`` for two waves.

    The shorter wave is zero-extended at the end.  For every damping factor
    ``beta`` on :func:`beta_grid` the closeness :func:`gamma` is computed in
    both directions (``first`` against ``beta * second`` and ``second``
    against ``beta * first``).  The best value of each direction is kept
    independently and the two maxima are averaged.

    Identical waves score ``1.0`` and so do two empty waves.
    """

    a, b = equalize(first, second)
    a_left, a_right = a.left_channel(), a.right_channel()
    b_left, b_right = b.left_channel(), b.right_channel()
    betas = beta_grid(step, maximum)
    forward = _best_gamma(a_left, a_right, b_left, b_right, betas, chunk_size)
    backward = _best_gamma(b_left, b_right, a_left, a_right, betas, chunk_size)
    return (backward + forward) / 2.0


__all__ = ["beta_grid", "gamma", "similarity"]
