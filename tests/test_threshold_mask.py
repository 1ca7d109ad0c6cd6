"""Unit tests for the luminance threshold mask.

Tests:
    - Black/white classification and mask shape (H, W)
    - Luminance weights on a mid-grey pixel around the cutoff
    - Threshold 0 never marks anything
    - Alpha channel ignored
    - Buffer types: bytes, list, (H, W, 4) array
    - Dimension mismatch → InvalidInput (a ValueError)
"""

import numpy as np
import pytest

from raster_plotter.pipeline.threshold_mask import build_mask
from raster_plotter.utils.validators import InvalidInput


def test_black_and_white(make_rgba):
    grid = [[True, False, False],
            [False, False, True]]
    pixels, w, h = make_rgba(grid)

    mask = build_mask(pixels, w, h, 0.5)

    assert mask.shape == (2, 3)
    assert mask.dtype == bool
    np.testing.assert_array_equal(mask, np.array(grid))


def test_row_major_pixel_addressing():
    """Pixel (x=2, y=1) lives at buffer index (1*3 + 2)*4."""
    w, h = 3, 2
    buf = bytearray([255] * (w * h * 4))
    idx = (1 * w + 2) * 4
    buf[idx:idx + 3] = b"\x00\x00\x00"

    mask = build_mask(bytes(buf), w, h, 0.5)

    assert mask[1, 2]
    assert mask.sum() == 1


def test_luminance_weights_around_cutoff():
    # (0.299*100 + 0.587*150 + 0.114*200) / 255 = 140.75 / 255 ≈ 0.552
    pixel = [100, 150, 200, 255]

    assert not build_mask(pixel, 1, 1, 0.55)[0, 0]
    assert build_mask(pixel, 1, 1, 0.56)[0, 0]


def test_pure_green_darker_than_pure_blue_weighting():
    # green alone: 0.587, blue alone: 0.114
    pixels = [0, 255, 0, 255, 0, 0, 255, 255]
    mask = build_mask(pixels, 2, 1, 0.5)
    np.testing.assert_array_equal(mask, [[False, True]])


def test_threshold_zero_marks_nothing(make_rgba):
    pixels, w, h = make_rgba(np.ones((4, 4), dtype=bool))
    assert not build_mask(pixels, w, h, 0.0).any()


def test_alpha_is_ignored():
    transparent_black = [0, 0, 0, 0]
    assert build_mask(transparent_black, 1, 1, 0.5)[0, 0]


def test_accepts_hwc_array():
    rgba = np.full((2, 2, 4), 255, dtype=np.uint8)
    rgba[0, 1, :3] = 0

    mask = build_mask(rgba, 2, 2, 0.5)

    np.testing.assert_array_equal(mask, [[False, True], [False, False]])


def test_empty_image():
    mask = build_mask(b"", 0, 0, 0.5)
    assert mask.shape == (0, 0)


def test_length_mismatch_raises():
    with pytest.raises(InvalidInput, match="expected 16"):
        build_mask(b"\x00" * 12, 2, 2, 0.5)


def test_negative_dimension_raises():
    with pytest.raises(InvalidInput, match="non-negative"):
        build_mask(b"", -1, 0, 0.5)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        build_mask([0, 0, 0], 1, 1, 0.5)


def test_swapped_hwc_array_rejected():
    rgba = np.zeros((2, 3, 4), dtype=np.uint8)  # height 2, width 3

    with pytest.raises(InvalidInput, match="shape"):
        build_mask(rgba, 2, 3, 0.5)
