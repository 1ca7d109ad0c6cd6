"""Pixel-space geometry for traced paths.

Provides:
    - PixelCoordinate: integer (x, y) pixel position
    - Polyline: immutable ordered sequence of PixelCoordinate (a traced path)
    - Point distance, polyline length
    - Endpoint gap and total pen-up travel for an ordered path set

Used by:
    - Path tracer: builds Polyline values from the foreground mask
    - Path orderer: nearest-endpoint selection
    - Pipeline runner: travel metrics before/after ordering, pen-down length

All coordinates are pixels in image frame (top-left origin, +Y down).
"""

import math
from typing import NamedTuple, Sequence, Tuple


class PixelCoordinate(NamedTuple):
    """Pixel position, 0 ≤ x < width, 0 ≤ y < height."""
    x: int
    y: int


Polyline = Tuple[PixelCoordinate, ...]
"""One traced path; length ≥ 2 once it leaves the tracer."""


def point_distance(a: Tuple[int, int], b: Tuple[int, int]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def polyline_length(points: Sequence[Tuple[int, int]]) -> float:
    """Total length of a polyline (sum of segment lengths), 0.0 below two points."""
    return sum(point_distance(points[i - 1], points[i]) for i in range(1, len(points)))


def endpoint_gap(prev: Polyline, nxt: Polyline) -> float:
    """Pen-up distance from the last point of ``prev`` to the first point of ``nxt``."""
    return point_distance(prev[-1], nxt[0])


def travel_distance(paths: Sequence[Polyline]) -> float:
    """Total pen-up travel for drawing ``paths`` in order.

    Parameters
    ----------
    paths : Sequence[Polyline]
        Ordered path set

    Returns
    -------
    float
        Sum of endpoint gaps between consecutive paths; 0.0 for fewer than two paths

    Notes
    -----
    Travel from the plotter's home position to the first path is not counted.
    """
    return sum(endpoint_gap(paths[i - 1], paths[i]) for i in range(1, len(paths)))
