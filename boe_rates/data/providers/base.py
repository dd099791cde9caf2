"""Base provider interface for data sources."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Mapping, Optional, Protocol

from ..dates import DateLike
from ...errors import ProviderError
from ...models.observation import Observation


@dataclass(frozen=True)
class RawDocument:
    """Body of a remote response together with its declared content type."""

    body: str
    content_type: str
    url: Optional[str] = None


class Transport(Protocol):
    """Performs one HTTP GET and returns the raw response document."""

    def __call__(self, url: str, params: Mapping[str, str]) -> RawDocument: ...


class SeriesProvider(ABC):
    """Interface for a rate series data source."""

    @abstractmethod
    def fetch(
        self,
        from_date: Optional[DateLike] = None,
        to_date: Optional[DateLike] = None,
    ) -> RawDocument:
        """Return the raw document covering [from_date, to_date]."""
        ...

    @abstractmethod
    def fetch_observations(
        self,
        from_date: Optional[DateLike] = None,
        to_date: Optional[DateLike] = None,
    ) -> List[Observation]:
        """Return parsed observations covering [from_date, to_date]."""
        ...


__all__ = ["RawDocument", "Transport", "SeriesProvider", "ProviderError"]
