"""Shared test fixtures."""

import logging
import sys

import numpy as np
import pytest

from raster_plotter.utils import logging_config

INK = (0, 0, 0, 255)
PAPER = (255, 255, 255, 255)


def rgba_from_grid(grid) -> bytes:
    """Encode a boolean grid (rows of bools) as RGBA bytes: True → black, False → white."""
    grid = np.asarray(grid, dtype=bool)
    rgba = np.empty(grid.shape + (4,), dtype=np.uint8)
    rgba[grid] = INK
    rgba[~grid] = PAPER
    return rgba.tobytes()


@pytest.fixture
def make_rgba():
    """Factory: boolean grid → (RGBA bytes, width, height)."""
    def _make(grid):
        grid = np.asarray(grid, dtype=bool)
        height, width = grid.shape
        return rgba_from_grid(grid), width, height
    return _make


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger, excepthook and context changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    excepthook = sys.excepthook
    yield
    logging_config.shutdown()
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    sys.excepthook = excepthook
    logging_config.pop_context()
