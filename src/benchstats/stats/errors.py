"""Errors raised while computing run-time statistics."""

from __future__ import annotations


class StatisticsError(ValueError):
    """Base class for statistics failures."""

    def __init__(self, message: str, job: str | None = None) -> None:
        super().__init__(message)
        self.job = job

    def __str__(self) -> str:
        message = super().__str__()
        if self.job is None:
            return message
        return f"{message} (job: {self.job!r})"


class EmptyInputError(StatisticsError):
    """Raised when a job has no run times."""


class DegenerateAverageError(StatisticsError):
    """Raised when a job averages exactly zero, so ips and std_dev_ratio are undefined."""
