"""Score calculator for repository maturity, activity and quality."""

import logging
from datetime import datetime, timedelta, timezone

from repograde.analyzers import metrics
from repograde.analyzers.bands import band_score
from repograde.analyzers.scorecard import aggregate_checks
from repograde.config import DEFAULT_CONFIG, ScoringConfig
from repograde.models.schemas import (
    CommunityScores,
    DurationThresholds,
    GitHubStats,
    ProjectScores,
    ProjectStats,
    ScorecardStats,
    SecurityScores,
    SonarStats,
    TechScores,
    Thresholds,
)

logger = logging.getLogger(__name__)


class Scorer:
    """Calculates banded scores from collected stats.

    Score groups:
    - Community (1-5 each): maturity, activity, popularity, contributors
    - Tech (1-5 each): size, cyclomatic complexity, cognitive complexity,
      duplication, code smells
    - Security (0-5): weighted OpenSSF Scorecard composite

    The scorer holds no state besides its configuration, so one instance
    can score any number of repositories, from any number of threads.
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def calculate_scores(
        self,
        stats: ProjectStats,
        now: datetime | None = None,
    ) -> ProjectScores:
        """Calculate all score groups.

        Args:
            stats: Collected stats for one repository.
            now: Reference instant for elapsed-time metrics. Defaults to the
                current UTC time; pass it explicitly for reproducible results.

        Returns:
            ProjectScores with every group populated.

        Raises:
            InvalidInputError: A derived ratio has a zero divisor.
            MissingCheckError: A weighted scorecard check has no result.
            DivideByZeroError: No weighted scorecard check was applicable.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        community = self._calculate_community_scores(stats.github, now)
        tech = self._calculate_tech_scores(stats.sonar)
        security = self._calculate_security_scores(stats.scorecard)

        return ProjectScores(community=community, tech=tech, security=security)

    def _calculate_community_scores(self, github: GitHubStats, now: datetime) -> CommunityScores:
        config = self.config
        return CommunityScores(
            maturity=self._band("maturity", metrics.maturity(github, now), config.maturity),
            activity=self._band("activity", metrics.activity(github, now), config.activity),
            popularity=self._band("popularity", metrics.popularity(github), config.popularity),
            contributors=self._band(
                "contributors", metrics.contributors(github), config.contributors
            ),
        )

    def _calculate_tech_scores(self, sonar: SonarStats) -> TechScores:
        config = self.config
        return TechScores(
            size=self._band("size", metrics.size(sonar), config.size),
            cyclomatic_complexity=self._band(
                "cyclomatic_complexity",
                metrics.cyclomatic_complexity(sonar),
                config.cyclomatic_complexity,
            ),
            cognitive_complexity=self._band(
                "cognitive_complexity",
                metrics.cognitive_complexity(sonar),
                config.cognitive_complexity,
            ),
            duplication=self._band(
                "duplication", metrics.duplication(sonar), config.duplication
            ),
            code_smells=self._band(
                "code_smells", metrics.code_smells(sonar), config.code_smells
            ),
        )

    def _calculate_security_scores(self, scorecard: ScorecardStats) -> SecurityScores:
        return SecurityScores(
            scorecard=aggregate_checks(scorecard.checks, self.config.weights),
        )

    def _band(
        self,
        name: str,
        value: int | timedelta,
        thresholds: Thresholds | DurationThresholds,
    ) -> int:
        score = band_score(value, thresholds.breakpoints, thresholds.direction)
        logger.debug(f"{name}: value={value} -> {score}")
        return score


def compute_scores(
    stats: ProjectStats,
    config: ScoringConfig | None = None,
    now: datetime | None = None,
) -> ProjectScores:
    """Score one repository with a throwaway Scorer."""
    return Scorer(config).calculate_scores(stats, now=now)
