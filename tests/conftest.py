"""Shared pytest fixtures for the repograde test suite.

Fixtures:
    now            : fixed reference instant (2025-01-01 UTC).
    github_stats   : hosting activity for a mid-sized, active project.
    sonar_stats    : static-analysis measures for the same project.
    scorecard_stats: every default-weighted check scored 8.
    project_stats  : the three combined.
"""

from datetime import datetime, timezone

import pytest

from repograde.config import CONFIG_ENV_VAR, DEFAULT_WEIGHTS
from repograde.models.schemas import (
    GitHubStats,
    ProjectStats,
    ScorecardCheck,
    ScorecardStats,
    SonarStats,
)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    """Keep a developer's REPOGRADE_CONFIG out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def now() -> datetime:
    return datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def github_stats() -> GitHubStats:
    return GitHubStats(
        first_commit_date=datetime(2018, 3, 1, 12, 0, tzinfo=timezone.utc),
        last_commit_date=datetime(2024, 12, 20, 8, 30, tzinfo=timezone.utc),
        stars=1_200,
        active_contributors=8,
    )


@pytest.fixture
def sonar_stats() -> SonarStats:
    return SonarStats(
        lines_of_code=42_000,
        functions=2_100,
        code_smells=120,
        brain_overload=30,
        cyclomatic_complexity=6_300,
        cognitive_complexity=9_800,
        duplication_density=2.4,
    )


@pytest.fixture
def scorecard_stats() -> ScorecardStats:
    return ScorecardStats(
        checks=[ScorecardCheck(name=name, score=8) for name in DEFAULT_WEIGHTS]
    )


@pytest.fixture
def project_stats(github_stats, sonar_stats, scorecard_stats) -> ProjectStats:
    return ProjectStats(
        repository="acme/widget",
        github=github_stats,
        sonar=sonar_stats,
        scorecard=scorecard_stats,
    )
