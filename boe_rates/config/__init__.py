"""Configuration management."""

from .settings import Settings, settings
from .series_registry import (
    BASE_RATE_SERIES_ID,
    REGISTRY,
    SeriesSpec,
    get_series_spec,
    list_all_series,
)

__all__ = [
    "Settings",
    "settings",
    "SeriesSpec",
    "REGISTRY",
    "BASE_RATE_SERIES_ID",
    "get_series_spec",
    "list_all_series",
]
