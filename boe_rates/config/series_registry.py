"""Series registry for Bank of England rate series."""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class SeriesSpec:
    """Specification for a data series."""

    name: str
    code: str  # IADB series code, sent as the C query parameter
    freq: str  # e.g., 'D' for daily, 'M' for monthly
    source: str  # Data source/provider name
    units: str  # Unit of measurement
    timezone: str = "Europe/London"  # Zone the source publishes dates in


BASE_RATE_SERIES_ID = "BOE_BASE_RATE"

# Registry of all available data series
REGISTRY: Dict[str, SeriesSpec] = {
    # Official Bank Rate, published on business days only
    BASE_RATE_SERIES_ID: SeriesSpec(
        name="Official Bank Rate",
        code="13T",
        freq="D",
        source="BOE_IADB",
        units="Percent per annum",
    ),
}


def get_series_spec(name: str) -> Optional[SeriesSpec]:
    """Get series specification by name.

    Args:
        name: Series name/identifier

    Returns:
        SeriesSpec if found, None otherwise
    """
    return REGISTRY.get(name)


def list_all_series() -> List[str]:
    """List all registered series names.

    Returns:
        List of series names
    """
    return sorted(REGISTRY.keys())
