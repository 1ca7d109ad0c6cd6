"""Luminance threshold: RGBA pixel buffer → boolean foreground mask."""

import logging
from typing import Sequence, Union

import numpy as np

from ..utils.validators import InvalidInput

logger = logging.getLogger(__name__)

# Rec. 601 luma weights on 8-bit channels
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

PixelBuffer = Union[bytes, bytearray, memoryview, np.ndarray, Sequence[int]]


def build_mask(
    pixels: PixelBuffer,
    width: int,
    height: int,
    threshold: float
) -> np.ndarray:
    """Mark pixels darker than ``threshold`` as foreground.

    Parameters
    ----------
    pixels : bytes | np.ndarray | Sequence[int]
        RGBA buffer, 8-bit channels, row-major; flat length width*height*4
        or an array of shape (height, width, 4)
    width : int
        Image width in pixels
    height : int
        Image height in pixels
    threshold : float
        Luminance cutoff in [0, 1]; a pixel is foreground iff its
        luminance is strictly below it, so 0.0 yields an empty mask

    Returns
    -------
    mask : np.ndarray
        Boolean array, shape (height, width), True for foreground

    Raises
    ------
    InvalidInput
        If a dimension is negative, the buffer length does not match
        width*height*4, or a shaped array is not (height, width, 4).
        Raised before the mask is allocated.

    Notes
    -----
    luminance = (0.299*R + 0.587*G + 0.114*B) / 255; alpha is ignored.
    """
    if width < 0 or height < 0:
        raise InvalidInput(f"Image dimensions must be non-negative, got {width}x{height}")

    if isinstance(pixels, (bytes, bytearray, memoryview)):
        buf = np.frombuffer(pixels, dtype=np.uint8)
    else:
        buf = np.asarray(pixels)
        if buf.ndim > 1 and buf.shape != (height, width, 4):
            raise InvalidInput(
                f"Pixel array has shape {buf.shape}, expected {(height, width, 4)} for {width}x{height} RGBA"
            )

    expected = width * height * 4
    if buf.size != expected:
        raise InvalidInput(
            f"Pixel buffer has {buf.size} values, expected {expected} for {width}x{height} RGBA"
        )

    rgba = buf.reshape(height, width, 4).astype(np.float64)
    r, g, b = rgba[..., 0], rgba[..., 1], rgba[..., 2]
    luminance = (LUMA_WEIGHTS[0] * r + LUMA_WEIGHTS[1] * g + LUMA_WEIGHTS[2] * b) / 255.0

    mask = luminance < threshold

    if mask.size:
        logger.debug(f"Foreground mask {width}x{height}: {int(mask.sum())} px ({mask.mean() * 100:.2f}%)")
    return mask
