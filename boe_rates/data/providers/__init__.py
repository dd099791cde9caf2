"""Data providers for external sources."""

from .base import ProviderError, RawDocument, SeriesProvider, Transport
from .boe import BASE_PARAMS, BoeRateProvider, build_params
from .transport import RequestsTransport

__all__ = [
    "SeriesProvider",
    "ProviderError",
    "RawDocument",
    "Transport",
    "BoeRateProvider",
    "BASE_PARAMS",
    "build_params",
    "RequestsTransport",
]
