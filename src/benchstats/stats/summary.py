"""Statistics over raw benchmark run times."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

import numpy as np

from benchstats.config import StatisticsConfig
from benchstats.time import microseconds_to_seconds

from .errors import DegenerateAverageError, EmptyInputError, StatisticsError
from .types import JobStatistics, JobSuite, RunTimes

logger = logging.getLogger(__name__)


def statistics(
    suite: JobSuite | Iterable[tuple[str, RunTimes]],
    config: StatisticsConfig | None = None,
) -> list[tuple[str, JobStatistics]]:
    """
    Compute statistics for every job in a suite.

    Jobs keep the order they have in the suite, duplicates included. The
    first job that fails stops the whole batch.

    Args:
        suite: Job suite, or any iterable of (name, run times) pairs
        config: Statistics configuration (defaults if not provided)

    Returns:
        List of (name, JobStatistics) in suite order

    Raises:
        StatisticsError: A job could not be summarized; ``job`` names it
    """
    jobs = suite.jobs if isinstance(suite, JobSuite) else list(suite)
    config = config or StatisticsConfig()

    results: list[tuple[str, JobStatistics]] = []
    for name, run_times in jobs:
        try:
            job_stats = job_statistics(run_times, config)
        except StatisticsError as e:
            e.job = name
            logger.warning(f"Statistics failed: {e}")
            raise

        logger.debug(
            f"{name}: average={job_stats.average:.2f}μs, "
            f"ips={job_stats.ips:.2f}, median={job_stats.median:.2f}μs"
        )
        results.append((name, job_stats))

    logger.debug(f"Computed statistics for {len(results)} jobs")
    return results


def job_statistics(
    run_times: RunTimes,
    config: StatisticsConfig | None = None,
) -> JobStatistics:
    """
    Calculate statistics for a series of run times in microseconds.

    The run times are not modified.

    Args:
        run_times: Measured run times of one job, in μs
        config: Statistics configuration (defaults if not provided)

    Returns:
        JobStatistics for the series

    Raises:
        EmptyInputError: run_times is empty
        DegenerateAverageError: The average is zero and the config says raise
    """
    config = config or StatisticsConfig()

    iterations = len(run_times)
    if iterations == 0:
        raise EmptyInputError("Cannot compute statistics of an empty run times series")

    total_time = sum(run_times)
    average = total_time / iterations
    if average == 0 and config.zero_average == "raise":
        raise DegenerateAverageError(
            "Average run time is zero, ips and std_dev_ratio are undefined"
        )

    deviation = _standard_deviation(run_times, average, iterations)
    median = _median(run_times, iterations)

    if average == 0:
        ips = math.inf
        std_dev_ratio = math.nan
    else:
        ips = _iterations_per_second(iterations, total_time)
        std_dev_ratio = deviation / average

    return JobStatistics(
        average=float(average),
        ips=float(ips),
        std_dev=deviation,
        std_dev_ratio=float(std_dev_ratio),
        median=median,
    )


def sort(
    jobs: Iterable[tuple[str, JobStatistics]],
) -> list[tuple[str, JobStatistics]]:
    """
    Sort jobs fastest to slowest by average.

    Jobs with the same average keep their relative order.

    Args:
        jobs: (name, statistics) pairs; statistics need an ``average``

    Returns:
        New list sorted by ascending average
    """
    return sorted(jobs, key=lambda job: job[1].average)


def _iterations_per_second(iterations: int, time_microseconds: float) -> float:
    return iterations / microseconds_to_seconds(time_microseconds)


def _standard_deviation(samples: RunTimes, average: float, iterations: int) -> float:
    arr = np.asarray(samples, dtype=float)
    variance = float(np.sum((arr - average) ** 2)) / iterations
    return math.sqrt(variance)


def _median(run_times: Sequence[int | float], iterations: int) -> float:
    # O(n log n) because of the sort; a selection algorithm would be O(n)
    sorted_times = np.sort(np.asarray(run_times, dtype=float))
    middle = iterations // 2

    if iterations % 2 == 1:
        return float(sorted_times[middle])
    return float((sorted_times[middle] + sorted_times[middle - 1]) / 2)
