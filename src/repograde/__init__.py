"""Repository maturity, activity and quality scoring."""

__version__ = "0.1.0"
