"""Pydantic models for repository stats and scores."""

from datetime import datetime, timedelta, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Direction(str, Enum):
    """Whether higher or lower raw values map to higher scores."""

    BIGGER_IS_BETTER = "bigger_is_better"
    SMALLER_IS_BETTER = "smaller_is_better"


# --- Raw Stats Models ---


class GitHubStats(BaseModel):
    """Activity stats collected from the hosting API."""

    first_commit_date: datetime
    last_commit_date: datetime
    stars: int = Field(default=0, ge=0)
    active_contributors: int = Field(default=0, ge=0)

    @field_validator("first_commit_date", "last_commit_date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class SonarStats(BaseModel):
    """Static-analysis measures from SonarQube."""

    lines_of_code: int = Field(default=0, ge=0)  # ncloc
    functions: int = Field(default=0, ge=0)
    code_smells: int = Field(default=0, ge=0)
    brain_overload: int = Field(default=0, ge=0)  # issues tagged brain-overload
    cyclomatic_complexity: int = Field(default=0, ge=0)
    cognitive_complexity: int = Field(default=0, ge=0)
    duplication_density: float = Field(default=0.0, ge=0, le=100, allow_inf_nan=False)  # percentage


class ScorecardCheck(BaseModel):
    """A single OpenSSF Scorecard check result.

    A score of -1 means the check does not apply to the repository.
    """

    name: str
    score: int = Field(ge=-1, le=10)


class ScorecardStats(BaseModel):
    """Scorecard results.

    Extra keys from ``scorecard --format=json`` are ignored, so its raw
    output validates directly into this model.
    """

    checks: list[ScorecardCheck] = Field(default_factory=list)


class ProjectStats(BaseModel):
    """Everything the scorer needs for one repository."""

    repository: str | None = None  # owner/repo, display only
    github: GitHubStats
    sonar: SonarStats = Field(default_factory=SonarStats)
    scorecard: ScorecardStats = Field(default_factory=ScorecardStats)


# --- Threshold Models ---


class Thresholds(BaseModel):
    """Four ascending breakpoints delimiting five bands.

    Ordering is not validated; a non-increasing tuple still maps every
    value to some score.
    """

    model_config = ConfigDict(frozen=True)

    breakpoints: tuple[int, int, int, int]
    direction: Direction


class DurationThresholds(BaseModel):
    """Breakpoints for elapsed-time metrics."""

    model_config = ConfigDict(frozen=True)

    breakpoints: tuple[timedelta, timedelta, timedelta, timedelta]
    direction: Direction


# --- Scoring Models ---


class CommunityScores(BaseModel):
    """Scores derived from hosting activity."""

    model_config = ConfigDict(frozen=True)

    maturity: int = Field(ge=1, le=5)
    activity: int = Field(ge=1, le=5)
    popularity: int = Field(ge=1, le=5)
    contributors: int = Field(ge=1, le=5)


class TechScores(BaseModel):
    """Scores derived from static analysis."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(ge=1, le=5)
    cyclomatic_complexity: int = Field(ge=1, le=5)
    cognitive_complexity: int = Field(ge=1, le=5)
    duplication: int = Field(ge=1, le=5)
    code_smells: int = Field(ge=1, le=5)


class SecurityScores(BaseModel):
    """Composite supply-chain security score."""

    model_config = ConfigDict(frozen=True)

    scorecard: int = Field(ge=0, le=5)


class ProjectScores(BaseModel):
    """All score groups for a repository."""

    model_config = ConfigDict(frozen=True)

    community: CommunityScores
    tech: TechScores
    security: SecurityScores
