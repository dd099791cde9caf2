"""Data models and schemas."""

from .observation import Observation
from .rate_series import DEFAULT_DATE_FORMAT, RateSeries

__all__ = [
    "Observation",
    "RateSeries",
    "DEFAULT_DATE_FORMAT",
]
