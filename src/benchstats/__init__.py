"""Descriptive statistics for benchmark run times."""

from .config import StatisticsConfig
from .stats import (
    DegenerateAverageError,
    EmptyInputError,
    JobStatistics,
    JobSuite,
    StatisticsError,
    job_statistics,
    sort,
    statistics,
)
from .time import microseconds_to_seconds

__all__ = [
    "DegenerateAverageError",
    "EmptyInputError",
    "JobStatistics",
    "JobSuite",
    "StatisticsConfig",
    "StatisticsError",
    "job_statistics",
    "microseconds_to_seconds",
    "sort",
    "statistics",
]
