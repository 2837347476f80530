"""Configuration models for statistics computation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class StatisticsConfig(BaseModel):
    """Settings that control how run-time statistics are computed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    zero_average: Literal["raise", "nan"] = Field(
        default="raise",
        description=(
            "What to do when a job averages exactly zero: 'raise' a "
            "DegenerateAverageError, or 'nan' to report ips as inf and "
            "std_dev_ratio as nan"
        ),
    )
