"""Analyzers for turning collected stats into scores."""

from repograde.analyzers.bands import band_score
from repograde.analyzers.errors import (
    DivideByZeroError,
    InvalidInputError,
    MissingCheckError,
    ScoringError,
)
from repograde.analyzers.scorecard import aggregate_checks
from repograde.analyzers.scorer import Scorer, compute_scores

__all__ = [
    "DivideByZeroError",
    "InvalidInputError",
    "MissingCheckError",
    "Scorer",
    "ScoringError",
    "aggregate_checks",
    "band_score",
    "compute_scores",
]
