"""Capture collaborator: image file → RGBA pixel buffer.

Stands in for grabbing a rendering surface: whatever produced the picture,
the pipeline only needs raw RGBA bytes plus width and height.
"""

import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from .utils.validators import InvalidInput

logger = logging.getLogger(__name__)


def rgba_from_image(img: Image.Image) -> Tuple[np.ndarray, int, int]:
    """Convert a PIL image to a flat RGBA uint8 buffer.

    Parameters
    ----------
    img : PIL.Image.Image
        Any mode; converted to RGBA

    Returns
    -------
    pixels : np.ndarray
        Flat uint8 array, length width*height*4, row-major
    width, height : int
        Image size in pixels
    """
    rgba = np.asarray(img.convert('RGBA'), dtype=np.uint8)
    height, width = rgba.shape[:2]
    return rgba.reshape(-1), width, height


def load_rgba(path: Union[str, Path]) -> Tuple[np.ndarray, int, int]:
    """Load an image file as a flat RGBA buffer.

    Parameters
    ----------
    path : Union[str, Path]
        Image file (any format Pillow reads)

    Returns
    -------
    pixels : np.ndarray
        Flat uint8 RGBA buffer
    width, height : int
        Image size in pixels

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    InvalidInput
        If Pillow cannot identify the file as an image
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {path}")

    try:
        with Image.open(path) as img:
            pixels, width, height = rgba_from_image(img)
    except UnidentifiedImageError as e:
        raise InvalidInput(f"Not a readable image: {path}") from e

    logger.info(f"Captured {path.name}: {width}x{height}")
    return pixels, width, height
