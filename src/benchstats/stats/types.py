"""Data types for benchmark jobs and their statistics."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, field

RunTimes = Sequence[int | float]


@dataclass(frozen=True)
class JobStatistics:
    """
    Statistics of one job's run times.

    Attributes:
        average: Average run time in μs (lower is better)
        ips: Iterations per second, how often the job runs within one
            second (higher is better)
        std_dev: Standard deviation in μs, how much run times vary
        std_dev_ratio: Standard deviation relative to the average
        median: Middle run time when sorted, or the mean of the two middle
            run times for an even count
    """

    average: float
    ips: float
    std_dev: float
    std_dev_ratio: float
    median: float

    def as_dict(self) -> dict[str, float]:
        """Return the statistics as a plain dict."""
        return asdict(self)


@dataclass
class JobSuite:
    """Named run-time series of the jobs being compared."""

    jobs: list[tuple[str, RunTimes]] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, run_times: Mapping[str, RunTimes]) -> JobSuite:
        """Build a suite from a name -> run times mapping, keeping its order."""
        return cls(jobs=list(run_times.items()))

    def __len__(self) -> int:
        return len(self.jobs)
