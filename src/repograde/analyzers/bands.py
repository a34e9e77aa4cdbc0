"""Band mapping from a raw metric value to a 1-5 score."""

from datetime import timedelta
from typing import Sequence, TypeVar

from repograde.models.schemas import Direction

T = TypeVar("T", int, float, timedelta)


def band_index(value: T, breakpoints: Sequence[T]) -> int:
    """Count the breakpoints strictly exceeded by ``value`` (0-4).

    A value equal to a breakpoint stays in the lower band.
    """
    return sum(1 for bp in breakpoints if value > bp)


def band_score(value: T, breakpoints: Sequence[T], direction: Direction) -> int:
    """Map a value to a score in 1..5.

    Args:
        value: Raw or derived metric value.
        breakpoints: Four ascending breakpoints in the metric's unit.
        direction: Whether bigger or smaller values are better.

    Returns:
        Score from 1 (worst) to 5 (best).
    """
    band = band_index(value, breakpoints)
    if direction == Direction.BIGGER_IS_BETTER:
        return band + 1
    return 5 - band
