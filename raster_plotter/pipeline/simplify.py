"""Optional direction-change point reduction for traced paths.

A traced path has one point per pixel, so a straight run of N pixels costs N
``L`` commands. This filter keeps only the points where the step direction
changes by more than a threshold, which shrinks the SVG and the plotter's
command stream without moving any kept point.

Disabled by default (``simplify.enabled: false``): it is a size optimisation
applied after tracing, not part of the tracing contract.
"""

import logging
import math
from typing import List, Sequence

from ..utils.geometry import Polyline

logger = logging.getLogger(__name__)


def simplify_path(path: Polyline, angle_threshold_rad: float) -> Polyline:
    """Drop points that continue in the current direction.

    Parameters
    ----------
    path : Polyline
        Traced path
    angle_threshold_rad : float
        A point is kept when its incoming step direction differs from the
        last kept direction by more than this (radians)

    Returns
    -------
    simplified : Polyline
        First and last points always kept; paths of ≤ 2 points unchanged

    Notes
    -----
    Directions come from atan2 and are compared by plain absolute
    difference, so steps on either side of the ±π seam (pointing left)
    count as a direction change.
    """
    if len(path) <= 2:
        return path

    result = [path[0]]
    last_direction = None

    for prev, current in zip(path, path[1:]):
        direction = math.atan2(current.y - prev.y, current.x - prev.x)
        if last_direction is None or abs(direction - last_direction) > angle_threshold_rad:
            result.append(current)
            last_direction = direction

    if result[-1] != path[-1]:
        result.append(path[-1])

    return tuple(result)


def simplify_paths(paths: Sequence[Polyline], angle_threshold_deg: float = 2.0) -> List[Polyline]:
    """Apply simplify_path to every path, preserving path order.

    Parameters
    ----------
    paths : Sequence[Polyline]
        Traced paths
    angle_threshold_deg : float
        Direction-change threshold in degrees, default 2.0

    Returns
    -------
    List[Polyline]
        Simplified paths, same count and order as the input
    """
    threshold_rad = math.radians(angle_threshold_deg)
    simplified = [simplify_path(p, threshold_rad) for p in paths]

    before = sum(len(p) for p in paths)
    after = sum(len(p) for p in simplified)
    logger.info(f"Simplified {len(paths)} paths: {before} → {after} points")
    return simplified
