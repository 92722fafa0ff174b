import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from stereowave.constants import SAMPLES_PER_SECOND
from stereowave.wave import Wave, equalize, normalize


def test_channel_getters_return_copies() -> None:
    wave = Wave([0.1, 0.2], [0.3, 0.4])
    left = wave.left_channel()
    left[0] = 99.0
    assert wave.left_channel()[0] == pytest.approx(0.1)
    right = wave.right_channel()
    right[:] = 0.0
    assert np.allclose(wave.right_channel(), [0.3, 0.4])


def test_constructor_copies_input() -> None:
    source = np.array([0.1, 0.2])
    wave = Wave(source, source)
    source[0] = 5.0
    assert wave.left_channel()[0] == pytest.approx(0.1)


def test_duration() -> None:
    wave = Wave(np.zeros(SAMPLES_PER_SECOND // 2), np.zeros(SAMPLES_PER_SECOND // 2))
    assert wave.duration() == pytest.approx(0.5)
    assert Wave().duration() == 0.0


def test_append_channels_in_place() -> None:
    wave = Wave([1.0], [2.0])
    wave.append([3.0, 4.0], [5.0, 6.0])
    assert np.allclose(wave.left_channel(), [1.0, 3.0, 4.0])
    assert np.allclose(wave.right_channel(), [2.0, 5.0, 6.0])


def test_append_wave() -> None:
    wave = Wave([0.1], [0.2])
    other = Wave([0.3], [0.4])
    wave.append(other)
    assert np.allclose(wave.left_channel(), [0.1, 0.3])
    assert np.allclose(wave.right_channel(), [0.2, 0.4])
    assert np.allclose(other.left_channel(), [0.3])


def test_append_empty_to_empty() -> None:
    wave = Wave()
    wave.append(Wave())
    wave.append([], [])
    assert len(wave) == 0
    assert wave.right_channel().size == 0


def test_append_requires_right_channel() -> None:
    with pytest.raises(TypeError):
        Wave().append([1.0])


def test_add_longer_wave_without_normalisation() -> None:
    a = Wave([0.5, 0.3, 0.2], [0.5, 0.3, 0.2])
    b = Wave([0.4, 0.4, 0.3, 0.1], [0.4, 0.4, 0.3, 0.1])
    result = a.add(b)
    assert np.allclose(result.left_channel(), [0.9, 0.7, 0.5, 0.1], atol=1e-5)
    assert np.allclose(result.right_channel(), [0.9, 0.7, 0.5, 0.1], atol=1e-5)
    assert len(a) == 3
    assert len(b) == 4


def test_add_shorter_wave_normalises() -> None:
    a = Wave([0.2, 0.6, -0.7, 0.2], [0.2, 0.6, -0.7, 0.2])
    b = Wave([0.3, 0.5], [0.3, 0.5])
    expected = [0.5 / 1.1, 1.0, -0.7 / 1.1, 0.2 / 1.1]
    result = a.add(b)
    assert np.allclose(result.left_channel(), expected, atol=1e-5)
    assert np.allclose(result.right_channel(), expected, atol=1e-5)


def test_add_empty_to_empty() -> None:
    result = Wave().add(Wave())
    assert len(result) == 0


def test_echo_positive_delay() -> None:
    wave = Wave([1.0, 1.0, 1.0], [1.0, 1.0, 1.0])
    result = wave.add_echo(1, 0.5)
    expected = [1.0 / 1.5, 1.0, 1.0, 0.5 / 1.5]
    assert np.allclose(result.left_channel(), expected, atol=1e-4)
    assert np.allclose(result.right_channel(), expected, atol=1e-4)
    assert np.allclose(wave.left_channel(), [1.0, 1.0, 1.0])


def test_echo_negative_delay() -> None:
    wave = Wave([1.0, 1.0, 1.0], [1.0, 1.0, 1.0])
    result = wave.add_echo(-1, 0.5)
    expected = [1.0, 1.0, 1.0 / 1.5]
    assert np.allclose(result.left_channel(), expected, atol=1e-4)
    assert np.allclose(result.right_channel(), expected, atol=1e-4)


def test_echo_fractional_delay_is_truncated() -> None:
    wave = Wave([1.0, 1.0, 1.0], [1.0, 1.0, 1.0])
    truncated = wave.add_echo(1.7, 0.5)
    whole = wave.add_echo(1, 0.5)
    assert np.allclose(truncated.left_channel(), whole.left_channel())


def test_echo_swaps_channels() -> None:
    wave = Wave([1.0, 0.0, 0.0], [0.0, 0.0, 0.0])
    result = wave.add_echo(1, 0.5)
    assert np.allclose(result.left_channel(), [1.0, 0.0, 0.0, 0.0])
    assert np.allclose(result.right_channel(), [0.0, 0.5, 0.0, 0.0])


def test_echo_offset_longer_than_wave_raises() -> None:
    with pytest.raises(ValueError):
        Wave([1.0, 1.0, 1.0], [1.0, 1.0, 1.0]).add_echo(-4, 0.5)


def test_echo_results_stay_in_range() -> None:
    rng = np.random.default_rng(7)
    left = rng.uniform(-1, 1, size=32)
    right = rng.uniform(-1, 1, size=32)
    result = Wave(left, right).add_echo(5, 0.9)
    assert np.all(np.abs(result.left_channel()) <= 1.0 + 1e-9)
    assert np.all(np.abs(result.right_channel()) <= 1.0 + 1e-9)


def test_scale_without_normalisation() -> None:
    wave = Wave([0.5, 0.4, 0.2], [0.5, 0.4, 0.2])
    wave.scale(2.0)
    assert np.allclose(wave.left_channel(), [1.0, 0.8, 0.4], atol=1e-5)
    assert np.allclose(wave.right_channel(), [1.0, 0.8, 0.4], atol=1e-5)


def test_scale_normalises_each_channel_independently() -> None:
    wave = Wave([0.5, 0.4, 0.2], [0.7, 0.4, 0.8])
    wave.scale(3.0)
    assert np.allclose(wave.left_channel(), [1.0, 0.8, 0.4], atol=1e-5)
    assert np.allclose(wave.right_channel(), [2.1 / 2.4, 1.2 / 2.4, 1.0], atol=1e-5)


def test_scale_empty() -> None:
    wave = Wave()
    wave.scale(0.0)
    assert len(wave) == 0


def test_scaled_leaves_receiver_unchanged() -> None:
    wave = Wave([0.5, 0.25], [0.5, 0.25])
    result = wave.scaled(4.0)
    assert np.allclose(result.left_channel(), [1.0, 0.5])
    assert np.allclose(wave.left_channel(), [0.5, 0.25])


def test_normalize_uses_negative_peak() -> None:
    result = normalize(Wave([-2.0, 1.0], [0.5, -0.5]))
    assert np.allclose(result.left_channel(), [-1.0, 0.5])
    assert np.allclose(result.right_channel(), [0.5, -0.5])


def test_equalize_pads_at_end() -> None:
    padded, unchanged = equalize(Wave([0.1], [0.2]), Wave([0.3, 0.4, 0.5], [0.6, 0.7, 0.8]))
    assert np.allclose(padded.left_channel(), [0.1, 0.0, 0.0])
    assert np.allclose(padded.right_channel(), [0.2, 0.0, 0.0])
    assert np.allclose(unchanged.left_channel(), [0.3, 0.4, 0.5])
