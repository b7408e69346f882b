"""Service layer exports."""

from .errors import FactoryError, ProgressionError
from .progression_service import ProgressionResult, ProgressionService, ProgressionSummary
from .stats_service import StatSheet, StatsService

__all__ = [
    "FactoryError",
    "ProgressionError",
    "ProgressionResult",
    "ProgressionService",
    "ProgressionSummary",
    "StatSheet",
    "StatsService",
]
