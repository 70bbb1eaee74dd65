"""Tests for the neon grade filter."""

import numpy as np
import pytest

from pixstyle.styles.cyberpunk import bloom, edge_factor, stylize_cyberpunk, tonal_weights


def test_tonal_weights():
    lum = np.array([0.0, 0.5, 1.0], dtype=np.float32)
    s, m, h = tonal_weights(lum)
    assert s.tolist() == pytest.approx([1.0, 0.25, 0.0])
    assert h.tolist() == pytest.approx([0.0, 0.25, 1.0])
    assert m.tolist() == pytest.approx([0.0, 0.5, 0.0])


def test_alpha_passthrough(gradient_rgba):
    out = stylize_cyberpunk(gradient_rgba)
    assert out.shape == gradient_rgba.shape
    assert np.array_equal(out[..., 3], gradient_rgba[..., 3])


def test_bloom_only_on_bright_pixels():
    rgb = np.zeros((7, 7, 3), dtype=np.float32)
    lum = np.zeros((7, 7), dtype=np.float32)
    rgb[3, 3] = 1.0
    lum[3, 3] = 1.0
    b = bloom(rgb, lum)
    assert b[3, 3].tolist() == pytest.approx([1.0, 0.45, 1.3])
    b[3, 3] = 0
    assert not b.any()


def test_bloom_weights_neighbours():
    rgb = np.zeros((1, 3, 3), dtype=np.float32)
    lum = np.full((1, 3), 0.9, dtype=np.float32)
    rgb[0, 1, 0] = 1.0
    b = bloom(rgb, lum)
    # Centre (weight 1) is red, both sides (weight 1/2) are black
    assert b[0, 1, 0] == pytest.approx(0.5 * 0.9 + 0.1)
    # Left pixel: itself (w=1) black, centre (w=1/2) red, right (w=1/5) black
    assert b[0, 0, 0] == pytest.approx((0.5 / 1.7) * 0.9 + 0.1)


def test_edge_factor_flat_is_zero():
    assert not edge_factor(np.full((4, 4), 0.3, dtype=np.float32)).any()


def test_edge_factor_step():
    lum = np.zeros((3, 4), dtype=np.float32)
    lum[:, 2:] = 1.0
    e = edge_factor(lum)
    # Central difference across the step is 0.5 -> (0.5 - 0.08) / 0.5
    assert e[1, 1] == pytest.approx(0.84)
    assert e[1, 2] == pytest.approx(0.84)


def test_uniform_dark_image_shifts_blue():
    arr = np.zeros((6, 6, 4), dtype=np.uint8)
    arr[..., :3] = 40
    arr[..., 3] = 200
    out = stylize_cyberpunk(arr)
    assert np.all(out[..., 2] > out[..., 1])
    assert np.all(out == out[0, 0])


def test_chromatic_offset_only_on_edges(checker_rgba):
    out = stylize_cyberpunk(checker_rgba)
    # Centres of flat squares carry no glow or offset
    flat_white = stylize_cyberpunk(np.full((20, 20, 4), 255, dtype=np.uint8))
    assert out[5, 15, :3].tolist() == flat_white[10, 10, :3].tolist()
    assert not np.array_equal(out[5, 9, :3], out[5, 5, :3])


@pytest.mark.parametrize("shape", [(1, 1), (2, 2), (1, 6)])
def test_degenerate_sizes(shape):
    arr = np.random.default_rng(5).integers(0, 256, size=shape + (4,), dtype=np.uint8)
    out = stylize_cyberpunk(arr)
    assert out.shape == arr.shape
    assert np.array_equal(out[..., 3], arr[..., 3])


def test_input_not_modified(gradient_rgba):
    before = gradient_rgba.copy()
    stylize_cyberpunk(gradient_rgba)
    assert np.array_equal(before, gradient_rgba)


@pytest.fixture
def grey_step():
    """3x4 opaque image: two black columns then two white columns."""
    arr = np.zeros((3, 4, 4), dtype=np.uint8)
    arr[:, 2:, :3] = 255
    arr[..., 3] = 255
    return arr


def test_flat_pixels_pin_grade_and_saturation(grey_step):
    out = stylize_cyberpunk(grey_step)
    # Black, no edge: B = 0.20 shadows -> avg 0.0667 -> x1.35 saturation = 0.2467
    assert out[1, 0, :3].tolist() == [0, 0, 62]
    # White, no edge: G = 0.85 -> 0.815 after saturation, +0.20 * 0.45 bloom = 0.905
    assert out[1, 3, :3].tolist() == [255, 230, 255]


def test_edge_pixels_pin_glow_and_chromatic_offset(grey_step):
    out = stylize_cyberpunk(grey_step)
    # Column 1 edge factor (0.5 - 0.08) / 0.5 = 0.84: R = 0.126, B = 0.4567 after glow.
    # R averages with column 2 (R = 1): (0.126 + 1) / 2 / 1.5 = 0.3753
    # B averages with column 0 (B = 0.2467): (0.4567 + 0.2467) / 2 / 1.5 = 0.2344
    assert out[1, 1, :3].tolist() == [95, 0, 59]
    # Column 2: B averages with column 1 (0.4567): (1 + 0.4567) / 2 / 1.5 = 0.4856
    assert out[1, 2, 1] == 230
    assert out[1, 2, 2] == 123
    # Every row is identical
    assert np.array_equal(out[0], out[2])
