"""Scaled-pattern search of one wave inside another."""

from __future__ import annotations

import numpy as np

from .constants import CONTAINMENT_TOLERANCE
from .wave import Wave


def contains(
    big: Wave, small: Wave, *, tolerance: float = CONTAINMENT_TOLERANCE
) -> bool:
    """Return ``True`` if ``small`` occurs in ``big`` up to one amplitude scale.

    Every alignment of ``small`` inside ``big`` is tried in order.  At offset
    ``s`` the candidate scale is ``|big.right[s] / small.right[0]|``; an
    alignment is rejected as soon as the ratio of ``big`` to ``small`` at any
    position differs from that scale by more than ``tolerance`` in either
    channel.

    An empty ``small`` is contained in any wave.  A ``small`` longer than
    ``big`` never is.  When the channels of ``big`` differ in length only the
    span covered by both is searched.  Zero samples in ``small`` are not
    special-cased: a ``nan`` ratio is never "more than ``tolerance``" away,
    so it does not reject the alignment.
    """

    pattern_left = small.left_channel()
    pattern_right = small.right_channel()
    if pattern_left.size == 0:
        return True
    target_left = big.left_channel()
    target_right = big.right_channel()
    span = min(target_left.size, target_right.size)
    if pattern_left.size > span:
        return False

    width = pattern_left.size
    with np.errstate(divide="ignore", invalid="ignore"):
        for start in range(span - width + 1):
            scale_factor = abs(target_right[start] / pattern_right[0])
            left_ratio = target_left[start : start + width] / pattern_left
            right_ratio = target_right[start : start + width] / pattern_right
            if np.any(np.abs(left_ratio - scale_factor) > tolerance):
                continue
            if np.any(np.abs(right_ratio - scale_factor) > tolerance):
                continue
            return True
    return False


__all__ = ["contains"]
