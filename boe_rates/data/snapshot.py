"""Snapshot file for the base-rate series."""

import logging
from pathlib import Path
from typing import Optional, Union

from ..config.settings import settings
from ..models.rate_series import RateSeries

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def snapshot_path(path: Optional[PathLike] = None) -> Path:
    """Resolve the snapshot location, defaulting to the configured path."""
    return Path(path if path is not None else settings.SNAPSHOT_PATH)


def save_snapshot(
    series: RateSeries,
    path: Optional[PathLike] = None,
    date_format: Optional[str] = None,
) -> Path:
    """Write the series to its snapshot file.

    Args:
        series: Series to serialize
        path: Target file (default: settings.SNAPSHOT_PATH)
        date_format: strftime pattern (default: settings.SNAPSHOT_DATE_FORMAT)

    Returns:
        Path written
    """
    target = snapshot_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        series.to_text(date_format or settings.SNAPSHOT_DATE_FORMAT), encoding="utf-8"
    )
    logger.info("Wrote %d observations to %s", len(series), target)
    return target


def load_snapshot(path: Optional[PathLike] = None, date_format: Optional[str] = None) -> RateSeries:
    """Read a series back from its snapshot file.

    Args:
        path: Snapshot file (default: settings.SNAPSHOT_PATH)
        date_format: strptime pattern the file was written with (default:
            settings.SNAPSHOT_DATE_FORMAT)

    Raises:
        FileNotFoundError: If the snapshot does not exist
        ParseError: If the file is not a JSON list of records
    """
    source = snapshot_path(path)
    series = RateSeries.from_text(
        source.read_text(encoding="utf-8"), date_format or settings.SNAPSHOT_DATE_FORMAT
    )
    logger.info("Loaded %d observations from %s", len(series), source)
    return series
