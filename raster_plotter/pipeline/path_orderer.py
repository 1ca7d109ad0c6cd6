"""Greedy nearest-endpoint path ordering.

Reduces pen-up travel by always drawing next the remaining path whose first
point is closest to where the pen currently is (the last point of the path
just drawn). This is a locally greedy heuristic, not a tour optimiser: earlier
choices are never revisited and paths are never reversed.
"""

import logging
from typing import List, Sequence

from ..utils.geometry import Polyline, endpoint_gap, travel_distance

logger = logging.getLogger(__name__)


def order(paths: Sequence[Polyline]) -> List[Polyline]:
    """Reorder paths by greedy nearest neighbour over endpoints.

    Parameters
    ----------
    paths : Sequence[Polyline]
        Traced paths in any order

    Returns
    -------
    ordered : List[Polyline]
        Permutation of ``paths``; each path's point order is untouched.
        The first input path always stays first.

    Notes
    -----
    Among remaining paths the one with the smallest Euclidean distance from
    the current path's last point to its first point wins; on equal
    distances the earliest remaining path wins. O(n²) in the number of
    paths. Zero or one path is returned unchanged (as a new list).
    """
    if len(paths) <= 1:
        return list(paths)

    ordered = [paths[0]]
    remaining = list(paths[1:])

    while remaining:
        current = ordered[-1]
        closest_idx = 0
        min_dist = endpoint_gap(current, remaining[0])
        for i in range(1, len(remaining)):
            dist = endpoint_gap(current, remaining[i])
            if dist < min_dist:
                min_dist = dist
                closest_idx = i
        ordered.append(remaining.pop(closest_idx))

    logger.debug(
        f"Ordered {len(ordered)} paths: pen-up travel "
        f"{travel_distance(paths):.1f} → {travel_distance(ordered):.1f} px"
    )
    return ordered
