"""Tests for the band mapper.

Tests verify:
- Scores always land in 1..5 for either direction.
- Bigger-is-better scores never decrease as the value grows; smaller-is-better never increase.
- A value equal to a breakpoint stays in the lower band.
- Duration breakpoints behave like integer ones.
"""

from datetime import timedelta

import pytest

from repograde.analyzers.bands import band_index, band_score
from repograde.models.schemas import Direction

BREAKPOINTS = (50, 200, 500, 1000)
VALUES = [-10**9, -1, 0, 49, 50, 51, 199, 200, 201, 499, 500, 501, 999, 1000, 1001, 10**9]

YEAR = timedelta(days=365)


@pytest.mark.parametrize("direction", list(Direction))
@pytest.mark.parametrize("value", VALUES)
def test_score_in_range(value, direction):
    assert band_score(value, BREAKPOINTS, direction) in {1, 2, 3, 4, 5}


@pytest.mark.parametrize(
    "value,expected",
    [(0, 0), (50, 0), (51, 1), (200, 1), (201, 2), (500, 2), (501, 3), (1000, 3), (1001, 4)],
)
def test_band_index_counts_strictly_exceeded_breakpoints(value, expected):
    assert band_index(value, BREAKPOINTS) == expected


def test_bigger_is_better_is_monotonic():
    scores = [band_score(v, BREAKPOINTS, Direction.BIGGER_IS_BETTER) for v in VALUES]
    assert scores == sorted(scores)
    assert scores[0] == 1
    assert scores[-1] == 5


def test_smaller_is_better_is_monotonic():
    scores = [band_score(v, BREAKPOINTS, Direction.SMALLER_IS_BETTER) for v in VALUES]
    assert scores == sorted(scores, reverse=True)
    assert scores[0] == 5
    assert scores[-1] == 1


@pytest.mark.parametrize("direction", list(Direction))
@pytest.mark.parametrize("breakpoint", BREAKPOINTS)
def test_equality_does_not_cross_breakpoint(breakpoint, direction):
    assert band_score(breakpoint, BREAKPOINTS, direction) == band_score(
        breakpoint - 1, BREAKPOINTS, direction
    )
    assert band_score(breakpoint + 1, BREAKPOINTS, direction) != band_score(
        breakpoint, BREAKPOINTS, direction
    )


def test_directions_mirror_each_other():
    for value in VALUES:
        bigger = band_score(value, BREAKPOINTS, Direction.BIGGER_IS_BETTER)
        smaller = band_score(value, BREAKPOINTS, Direction.SMALLER_IS_BETTER)
        assert bigger + smaller == 6


def test_duration_breakpoints():
    """Six years against [1y, 5y, 10y, 20y] exceeds two breakpoints."""
    breakpoints = (1 * YEAR, 5 * YEAR, 10 * YEAR, 20 * YEAR)
    assert band_score(6 * YEAR, breakpoints, Direction.BIGGER_IS_BETTER) == 3
    assert band_score(5 * YEAR, breakpoints, Direction.BIGGER_IS_BETTER) == 2
    assert band_score(timedelta(0), breakpoints, Direction.SMALLER_IS_BETTER) == 5


def test_unordered_breakpoints_still_total():
    assert band_score(300, (1000, 500, 200, 50), Direction.BIGGER_IS_BETTER) in {1, 2, 3, 4, 5}
