"""Errors raised while converting stats into scores.

All of them abort the scoring call for one repository. Callers scoring
many repositories catch ``ScoringError`` and move on to the next one.
"""


class ScoringError(Exception):
    """Base class for scoring failures."""


class InvalidInputError(ScoringError, ValueError):
    """Raised when a derived ratio has a zero divisor."""

    def __init__(self, metric: str, reason: str) -> None:
        self.metric = metric
        self.reason = reason
        super().__init__(f"Cannot compute {metric}: {reason}")


class MissingCheckError(ScoringError, LookupError):
    """Raised when a weighted check is absent from the scorecard results."""

    def __init__(self, check: str) -> None:
        self.check = check
        super().__init__(f"Scorecard check '{check}' not found in results")


class DivideByZeroError(ScoringError, ZeroDivisionError):
    """Raised when every weighted check was not applicable."""

    def __init__(self, excluded: list[str]) -> None:
        self.excluded = excluded
        names = ", ".join(excluded) or "none"
        super().__init__(f"No applicable scorecard checks (excluded: {names})")
