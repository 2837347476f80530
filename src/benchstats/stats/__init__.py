"""Statistics over benchmark run times."""

from .errors import DegenerateAverageError, EmptyInputError, StatisticsError
from .summary import job_statistics, sort, statistics
from .types import JobStatistics, JobSuite

__all__ = [
    "DegenerateAverageError",
    "EmptyInputError",
    "JobStatistics",
    "JobSuite",
    "StatisticsError",
    "job_statistics",
    "sort",
    "statistics",
]
