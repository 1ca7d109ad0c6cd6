"""Greedy path tracing over a foreground mask.

Walks the mask in row-major order. Every still-foreground cell seeds a new
path, which is then extended one pixel at a time from its last point by
testing a fixed list of offsets and taking the first foreground hit. Each
visited cell is cleared, so a pixel contributes to at most one path and the
mask is empty when tracing returns.

The walk is single-branch and never backtracks: a pixel cluster with several
branches becomes one path threaded through it in offset-priority order, and
the leftover branches seed later paths. The output therefore depends on the
scan order and on the exact order of NEIGHBOR_OFFSETS. It is deterministic for
a fixed mask but not invariant under rotation or reflection. Changing either
order changes the traced geometry.
"""

import logging
from typing import List

import numpy as np

from ..utils.geometry import PixelCoordinate, Polyline

logger = logging.getLogger(__name__)

# (dx, dy) in priority order: the 8 unit neighbours, then the distance-2 diagonal corners
NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
    (-2, -2), (2, -2),
    (-2, 2), (2, 2),
)


def _walk(mask: np.ndarray, x: int, y: int) -> Polyline:
    """Consume a path starting at seed (x, y).

    Parameters
    ----------
    mask : np.ndarray
        Foreground mask, shape (H, W), mutated in place
    x, y : int
        Seed pixel; must be foreground

    Returns
    -------
    path : Polyline
        Visited pixels in walk order, seed first
    """
    H, W = mask.shape
    mask[y, x] = False
    path = [PixelCoordinate(x, y)]

    while True:
        cx, cy = path[-1]
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = cx + dx, cy + dy
            if 0 <= nx < W and 0 <= ny < H and mask[ny, nx]:
                mask[ny, nx] = False
                path.append(PixelCoordinate(nx, ny))
                break
        else:
            return tuple(path)


def trace(mask: np.ndarray) -> List[Polyline]:
    """Trace a foreground mask into paths, consuming it.

    Parameters
    ----------
    mask : np.ndarray
        Boolean foreground mask, shape (H, W). Owned by this call: every
        cell is False on return.

    Returns
    -------
    paths : List[Polyline]
        Paths in seed order (row-major), each with at least 2 points.
        Single-pixel paths are discarded.

    Notes
    -----
    O(H*W): each cell is cleared at most once and each extension step
    checks at most 12 offsets. An empty or all-background mask yields [].
    """
    paths: List[Polyline] = []
    dropped = 0

    # argwhere lists the initial foreground cells in row-major (y, x) order;
    # cells consumed by an earlier walk are skipped when their turn comes.
    for y, x in np.argwhere(mask):
        if not mask[y, x]:
            continue
        path = _walk(mask, int(x), int(y))
        if len(path) > 1:
            paths.append(path)
        else:
            dropped += 1

    num_points = sum(len(p) for p in paths)
    logger.info(f"Traced {len(paths)} paths ({num_points} points)")
    if dropped:
        logger.debug(f"  Dropped {dropped} isolated single-pixel paths")
    return paths
