"""Derived metric values fed to the band mapper.

Each function returns the scalar a metric's thresholds are calibrated
against. Ratios use integer division over non-negative counts, which
truncates toward zero.
"""

import logging
from datetime import datetime, timedelta

from repograde.analyzers.errors import InvalidInputError
from repograde.models.schemas import GitHubStats, SonarStats

logger = logging.getLogger(__name__)


def maturity(github: GitHubStats, now: datetime) -> timedelta:
    """Time elapsed since the first commit."""
    return now - github.first_commit_date


def activity(github: GitHubStats, now: datetime) -> timedelta:
    """Time elapsed since the last commit."""
    return now - github.last_commit_date


def popularity(github: GitHubStats) -> int:
    return github.stars


def contributors(github: GitHubStats) -> int:
    return github.active_contributors


def size(sonar: SonarStats) -> int:
    return sonar.lines_of_code


def cyclomatic_complexity(sonar: SonarStats) -> int:
    """Percentage of functions flagged as overly complex (brain overload)."""
    _require_nonzero("cyclomatic_complexity", "functions", sonar.functions)
    return 100 * sonar.brain_overload // sonar.functions


def cognitive_complexity(sonar: SonarStats) -> int:
    """Mean cognitive complexity per function."""
    _require_nonzero("cognitive_complexity", "functions", sonar.functions)
    return sonar.cognitive_complexity // sonar.functions


def duplication(sonar: SonarStats) -> int:
    """Duplicated line density, truncated to a whole percentage."""
    return int(sonar.duplication_density)


def code_smells(sonar: SonarStats) -> int:
    """Mean number of lines between two code smells."""
    _require_nonzero("code_smells", "code_smells", sonar.code_smells)
    return sonar.lines_of_code // sonar.code_smells


def _require_nonzero(metric: str, field: str, value: int) -> None:
    if value == 0:
        logger.debug(f"{metric}: divisor {field} is zero")
        raise InvalidInputError(metric, f"{field} count is zero")
