"""Library-wide constants for stereo wave processing.

The values in this module configure the sample rate shared with audio
sources and sinks, the tolerance used by the containment matcher and the
damping-factor grid scanned by the similarity search.  Centralising them
keeps magic numbers out of the numerical code and makes the search
resolution easy to tune in one place.
"""

from __future__ import annotations

# ─── Audio configuration ────────────────────────────────────────────────────

# Number of samples per second of audio.  Every ``Wave`` uses this rate to
# interpret its length as a duration and sources/sinks use it for timing.
SAMPLES_PER_SECOND: int = 44_100

# Number of samples handed to a sink, or read from a capture source, per
# block.  One second of audio matches the pacing of a simple chart or player.
DEFAULT_BLOCK_SIZE: int = SAMPLES_PER_SECOND

# ─── Containment matching ───────────────────────────────────────────────────

# Largest difference between a sample ratio and the candidate scale factor
# for two samples to be treated as the same scaled pattern.
CONTAINMENT_TOLERANCE: float = 1e-5

# ─── Similarity search ──────────────────────────────────────────────────────

# The damping factor ``beta`` is scanned over ``BETA_STEP, 2 * BETA_STEP, …``
# up to ``BETA_MAX`` inclusive.  A finer step raises the cost linearly.
BETA_STEP: float = 0.01
BETA_MAX: float = 100.0

# Upper bound on ``beta values * samples`` evaluated in one vectorised pass.
# Larger chunks use more memory but fewer numpy calls.
SIMILARITY_CHUNK_SIZE: int = 1_000_000

__all__ = [
    "SAMPLES_PER_SECOND",
    "DEFAULT_BLOCK_SIZE",
    "CONTAINMENT_TOLERANCE",
    "BETA_STEP",
    "BETA_MAX",
    "SIMILARITY_CHUNK_SIZE",
]
