"""Weighted aggregation of OpenSSF Scorecard check results."""

import logging
from collections.abc import Iterable, Mapping

from repograde.analyzers.errors import DivideByZeroError, MissingCheckError
from repograde.models.schemas import ScorecardCheck

logger = logging.getLogger(__name__)

# Score reported by Scorecard when a check does not apply to a repository
NOT_APPLICABLE = -1


def aggregate_checks(
    checks: Iterable[ScorecardCheck],
    weights: Mapping[str, int],
) -> int:
    """Combine named check results into a single composite score.

    Every name in ``weights`` is required. Checks scored ``NOT_APPLICABLE``
    are left out of both the weighted sum and the total weight. Checks not
    named in ``weights`` are ignored.

    The result is ``((weighted_sum + 1) // total_weight) // 2``, two
    separate truncating divisions, which maps check scores in [0, 10]
    onto [0, 5]. Existing reports were computed this way, so do not fold
    the divisions together.

    Args:
        checks: Check results, typically ``ScorecardStats.checks``.
        weights: Positive integer weight per required check name.

    Returns:
        Composite score from 0 to 5.

    Raises:
        MissingCheckError: A weighted check has no result.
        DivideByZeroError: Every weighted check was not applicable.
    """
    by_name: dict[str, ScorecardCheck] = {}
    for check in checks:
        # First result wins when a name is repeated
        by_name.setdefault(check.name, check)

    weighted_sum = 0
    total_weight = 0
    excluded: list[str] = []

    for name, weight in weights.items():
        check = by_name.get(name)
        if check is None:
            raise MissingCheckError(name)

        if check.score == NOT_APPLICABLE:
            logger.debug(f"Scorecard check {name} not applicable, excluded")
            excluded.append(name)
            continue

        weighted_sum += check.score * weight
        total_weight += weight

    if total_weight == 0:
        raise DivideByZeroError(excluded)

    result = (weighted_sum + 1) // total_weight
    result = result // 2
    logger.debug(
        f"Scorecard aggregate: sum={weighted_sum} weight={total_weight} -> {result}"
    )
    return result
