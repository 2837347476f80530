"""Configuration for benchstats."""

from .base import StatisticsConfig

__all__ = ["StatisticsConfig"]
