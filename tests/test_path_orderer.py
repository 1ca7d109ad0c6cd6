"""Unit tests for greedy nearest-endpoint path ordering."""

import pytest

from raster_plotter.pipeline.path_orderer import order
from raster_plotter.utils.geometry import PixelCoordinate as P, travel_distance


def _hline(x0, y, n=2):
    return tuple(P(x0 + i, y) for i in range(n))


A = _hline(0, 0)
B = _hline(10, 0)
C = _hline(20, 0)


def test_empty_and_single():
    assert order([]) == []
    assert order([A]) == [A]


def test_returns_new_list():
    paths = [A]
    result = order(paths)
    assert result == paths
    assert result is not paths


def test_nearest_next():
    assert order([A, C, B]) == [A, B, C]


def test_first_path_stays_first():
    result = order([C, A, B])
    assert result[0] == C


def test_paths_never_reversed():
    # Reversing the second path would bring its start closer, but ordering never reverses.
    first = (P(0, 0), P(1, 0))
    far_start = (P(50, 0), P(2, 0))
    near_start = (P(10, 0), P(11, 0))

    result = order([first, far_start, near_start])

    assert result == [first, near_start, far_start]
    assert result[2] == far_start


def test_tie_goes_to_earliest_remaining():
    origin = (P(5, 5), P(6, 5))
    left = (P(4, 5), P(3, 5))     # |(6,5)-(4,5)| = 2
    right = (P(8, 5), P(9, 5))    # |(6,5)-(8,5)| = 2

    assert order([origin, left, right])[1] == left
    assert order([origin, right, left])[1] == right


def test_permutation_preserved():
    paths = [_hline(x, y) for x, y in [(30, 4), (0, 0), (12, 9), (3, 3), (25, 1)]]

    result = order(paths)

    assert sorted(result) == sorted(paths)
    assert len(result) == len(paths)


def test_idempotent():
    paths = [_hline(x, y) for x, y in [(30, 4), (0, 0), (12, 9), (3, 3), (25, 1)]]
    once = order(paths)
    assert order(once) == once


@pytest.mark.parametrize("seed_order", [[0, 1, 2, 3], [0, 3, 2, 1], [0, 2, 1, 3]])
def test_travel_not_worse_on_collinear_paths(seed_order):
    base = [_hline(0, 0), _hline(5, 0), _hline(10, 0), _hline(15, 0)]
    paths = [base[i] for i in seed_order]

    result = order(paths)

    assert result == base
    assert travel_distance(result) <= travel_distance(paths)
