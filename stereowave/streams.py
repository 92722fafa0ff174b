"""Block-wise audio sources and sinks around :class:`~stereowave.wave.Wave`.

Sources are pulled: callers poll :meth:`AudioSource.has_more` and read one
left and one right block at a time until the source is exhausted.
:func:`wave_from_source` drives that loop and assembles a wave.  Sinks are
pushed: :func:`stream_to_sink` hands a channel to any object with an
``update(samples)`` method, one block at a time, which suits charts and
players alike.

``sounddevice`` is imported lazily so the numerical core works on machines
without PortAudio.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Protocol, Sequence, Union

import numpy as np

from .constants import DEFAULT_BLOCK_SIZE, SAMPLES_PER_SECOND
from .wave import Wave

logger = logging.getLogger(__name__)


class AudioSource(Protocol):
    """Pull-based supplier of stereo sample blocks."""

    def has_more(self) -> bool: ...

    def next_left(self) -> np.ndarray: ...

    def next_right(self) -> np.ndarray: ...


class SampleSink(Protocol):
    """Consumer of sequential sample blocks, e.g. a chart or a player."""

    def update(self, samples: np.ndarray) -> None: ...


# ─── Sources ────────────────────────────────────────────────────────────────


class ArraySource:
    """Replay in-memory channels as consecutive blocks.

    Each channel keeps its own read position, so left and right blocks can be
    read in any interleaving.  The source is exhausted once both channels
    have been read to the end.
    """

    def __init__(
        self,
        left: Union[Sequence[float], np.ndarray],
        right: Union[Sequence[float], np.ndarray],
        block_size: int = DEFAULT_BLOCK_SIZE,
    ) -> None:
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self._left = np.array(left, dtype=np.float64).reshape(-1)
        self._right = np.array(right, dtype=np.float64).reshape(-1)
        self.block_size = block_size
        self._left_pos = 0
        self._right_pos = 0

    def has_more(self) -> bool:
        return self._left_pos < self._left.size or self._right_pos < self._right.size

    def next_left(self) -> np.ndarray:
        if not self.has_more():
            raise ValueError("End of source reached")
        block = self._left[self._left_pos : self._left_pos + self.block_size]
        self._left_pos += self.block_size
        return block.copy()

    def next_right(self) -> np.ndarray:
        if not self.has_more():
            raise ValueError("End of source reached")
        block = self._right[self._right_pos : self._right_pos + self.block_size]
        self._right_pos += self.block_size
        return block.copy()


class SoundDeviceSource:
    """Capture stereo blocks from an input device.

    Args:
        device: ``sounddevice`` input device index or name.  ``None`` selects
            the default device.
        duration: Seconds of audio to capture before the source is exhausted.
        block_size: Number of frames read per block.
        sample_rate: Capture rate in hertz.
        channels: Number of input channels to open.  A mono capture is
            duplicated into both the left and right block.
        stop_event: Optional event that, when set, ends the capture early.

    The input stream is opened on the first read and closed once the source
    reports no more data, or explicitly through :meth:`close` or the context
    manager protocol.
    """

    def __init__(
        self,
        device: Optional[Union[int, str]] = None,
        *,
        duration: float,
        block_size: int = DEFAULT_BLOCK_SIZE,
        sample_rate: int = SAMPLES_PER_SECOND,
        channels: int = 2,
        stop_event: Optional[threading.Event] = None,
    ) -> None:
        self.device = device
        self.block_size = block_size
        self.sample_rate = sample_rate
        self.channels = channels
        self.stop_event = stop_event
        self._limit = int(duration * sample_rate)
        self._captured = 0
        self._stream = None
        self._pending_right: Optional[np.ndarray] = None

    def __enter__(self) -> "SoundDeviceSource":
        return self

    def __exit__(self, *_) -> None:
        self.close()

    def _open(self) -> None:
        import sounddevice as sd

        self._stream = sd.InputStream(
            device=self.device,
            channels=self.channels,
            samplerate=self.sample_rate,
            blocksize=self.block_size,
            dtype="float32",
        )
        self._stream.start()

    def close(self) -> None:
        if self._stream is not None:
            self._stream.stop()
            self._stream.close()
            self._stream = None

    def has_more(self) -> bool:
        if self._pending_right is not None:
            return True
        stopped = self.stop_event is not None and self.stop_event.is_set()
        if stopped or self._captured >= self._limit:
            if self._stream is not None:
                logger.debug("capture finished after %d frames", self._captured)
            self.close()
            return False
        return True

    def next_left(self) -> np.ndarray:
        if not self.has_more():
            raise ValueError("End of source reached")
        if self._stream is None:
            self._open()
        frames = min(self.block_size, self._limit - self._captured)
        data, overflowed = self._stream.read(frames)
        if overflowed:
            logger.warning("input overflow while capturing from %r", self.device)
        data = np.asarray(data, dtype=np.float64)
        if data.ndim == 1:
            data = data.reshape(-1, 1)
        left = data[:, 0]
        right = data[:, 1] if data.shape[1] > 1 else left
        self._captured += data.shape[0]
        self._pending_right = right.copy()
        return left.copy()

    def next_right(self) -> np.ndarray:
        if self._pending_right is None:
            raise ValueError("next_right() called before next_left()")
        block, self._pending_right = self._pending_right, None
        return block


def wave_from_source(source: AudioSource) -> Wave:
    """Read ``source`` until it is exhausted and return the assembled wave."""
    wave = Wave()
    blocks = 0
    while source.has_more():
        wave.append(source.next_left(), source.next_right())
        blocks += 1
    logger.debug("assembled %d samples from %d blocks", len(wave), blocks)
    return wave


# ─── Sinks ──────────────────────────────────────────────────────────────────


class SoundDevicePlayer:
    """Sink that plays every block through ``sounddevice`` and waits for it."""

    def __init__(
        self,
        sample_rate: int = SAMPLES_PER_SECOND,
        device: Optional[Union[int, str]] = None,
    ) -> None:
        self.sample_rate = sample_rate
        self.device = device

    def update(self, samples: np.ndarray) -> None:
        import sounddevice as sd

        sd.play(np.asarray(samples, dtype=np.float32), samplerate=self.sample_rate, device=self.device)
        sd.wait()


def stream_to_sink(
    wave: Wave,
    sink: SampleSink,
    *,
    channel: str = "left",
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> int:
    """Send one channel of ``wave`` to ``sink`` in consecutive blocks.

    Args:
        wave: Wave to stream.
        sink: Object receiving each block through ``update``.
        channel: ``"left"`` or ``"right"``.
        block_size: Samples per block; the last block may be shorter.

    Returns:
        Number of blocks delivered.
    """

    if channel == "left":
        samples = wave.left_channel()
    elif channel == "right":
        samples = wave.right_channel()
    else:
        raise ValueError(f"Unknown channel: {channel!r}")
    if block_size <= 0:
        raise ValueError("block_size must be positive")

    count = 0
    for start in range(0, samples.size, block_size):
        sink.update(samples[start : start + block_size])
        count += 1
    return count


__all__ = [
    "AudioSource",
    "SampleSink",
    "ArraySource",
    "SoundDeviceSource",
    "wave_from_source",
    "SoundDevicePlayer",
    "stream_to_sink",
]
