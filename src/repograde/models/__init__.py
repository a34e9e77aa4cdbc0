"""Data models and schemas."""

from repograde.models.schemas import (
    CommunityScores,
    Direction,
    DurationThresholds,
    GitHubStats,
    ProjectScores,
    ProjectStats,
    ScorecardCheck,
    ScorecardStats,
    SecurityScores,
    SonarStats,
    TechScores,
    Thresholds,
)

__all__ = [
    "CommunityScores",
    "Direction",
    "DurationThresholds",
    "GitHubStats",
    "ProjectScores",
    "ProjectStats",
    "ScorecardCheck",
    "ScorecardStats",
    "SecurityScores",
    "SonarStats",
    "TechScores",
    "Thresholds",
]
