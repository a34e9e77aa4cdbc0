"""Scoring thresholds and check weights.

Defaults live here so calibration changes stay in one file. A JSON file
can override any subset of them:

    {
        "popularity": {"breakpoints": [50, 500, 5000, 20000], "direction": "bigger_is_better"},
        "maturity": {"breakpoints": ["P30D", "P365D", "P730D", "P1825D"], "direction": "bigger_is_better"},
        "weights": {"Code-Review": 3, "Maintained": 3}
    }

Durations accept seconds or ISO 8601. A ``weights`` table replaces the
default table entirely.
"""

import json
import logging
import os
from collections.abc import Mapping
from datetime import timedelta
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator

from repograde.models.schemas import Direction, DurationThresholds, Thresholds

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "REPOGRADE_CONFIG"

DAY = timedelta(days=1)

# OpenSSF Scorecard risk levels (Critical 10, High 7.5, Medium 5, Low 2.5) scaled to integers
DEFAULT_WEIGHTS: dict[str, int] = {
    "Dangerous-Workflow": 4,
    "Binary-Artifacts": 3,
    "Branch-Protection": 3,
    "Code-Review": 3,
    "Dependency-Update-Tool": 3,
    "Maintained": 3,
    "Signed-Releases": 3,
    "Token-Permissions": 3,
    "Vulnerabilities": 3,
    "Fuzzing": 2,
    "Packaging": 2,
    "Pinned-Dependencies": 2,
    "SAST": 2,
    "Security-Policy": 2,
    "CI-Tests": 1,
    "CII-Best-Practices": 1,
    "Contributors": 1,
    "License": 1,
}


def _bigger(*breakpoints) -> Thresholds:
    return Thresholds(breakpoints=breakpoints, direction=Direction.BIGGER_IS_BETTER)


def _smaller(*breakpoints) -> Thresholds:
    return Thresholds(breakpoints=breakpoints, direction=Direction.SMALLER_IS_BETTER)


class ScoringConfig(BaseModel):
    """Thresholds for every tracked metric plus the scorecard weight table.

    Treated as read-only once built; one instance can be shared by every
    scoring call in a process.
    """

    model_config = ConfigDict(frozen=True)

    # Community
    maturity: DurationThresholds = Field(
        default_factory=lambda: DurationThresholds(
            breakpoints=(90 * DAY, 365 * DAY, 730 * DAY, 1825 * DAY),
            direction=Direction.BIGGER_IS_BETTER,
        )
    )
    activity: DurationThresholds = Field(
        default_factory=lambda: DurationThresholds(
            breakpoints=(30 * DAY, 180 * DAY, 365 * DAY, 730 * DAY),
            direction=Direction.SMALLER_IS_BETTER,
        )
    )
    popularity: Thresholds = Field(default_factory=lambda: _bigger(10, 100, 500, 2_000))
    contributors: Thresholds = Field(default_factory=lambda: _bigger(1, 5, 20, 50))

    # Tech
    size: Thresholds = Field(
        default_factory=lambda: _smaller(1_000, 10_000, 100_000, 1_000_000)
    )
    cyclomatic_complexity: Thresholds = Field(default_factory=lambda: _smaller(1, 2, 5, 10))
    cognitive_complexity: Thresholds = Field(default_factory=lambda: _smaller(10, 20, 30, 50))
    duplication: Thresholds = Field(default_factory=lambda: _smaller(3, 5, 10, 20))
    code_smells: Thresholds = Field(default_factory=lambda: _bigger(50, 200, 500, 1_000))

    # Security
    weights: Mapping[str, PositiveInt] = Field(
        default_factory=lambda: dict(DEFAULT_WEIGHTS), validate_default=True
    )

    @field_validator("weights")
    @classmethod
    def _read_only_weights(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(value))


DEFAULT_CONFIG = ScoringConfig()


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid configuration {path}: {reason}")


def load_config(path: Path) -> ScoringConfig:
    """Load a scoring configuration from a JSON file.

    Keys missing from the file keep their default values.

    Raises:
        ConfigError: If the file is missing, not JSON, or fails validation.
    """
    try:
        data = json.loads(path.read_text())
    except OSError as e:
        raise ConfigError(path, str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(path, f"not valid JSON ({e})") from e

    try:
        config = ScoringConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(path, str(e)) from e

    logger.debug(f"Loaded scoring configuration from {path}")
    return config


def resolve_config(path: Path | None = None) -> ScoringConfig:
    """Pick the configuration to use.

    Order: explicit path, then the REPOGRADE_CONFIG environment variable,
    then the built-in defaults.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)

    if path is None:
        return DEFAULT_CONFIG
    return load_config(path)
