"""Exceptions raised by the base-rate package."""

from datetime import date
from typing import Optional


class ParseError(ValueError):
    """Input document or snapshot is not readable."""


class ProviderError(RuntimeError):
    """Error raised by data providers."""


class UnexpectedContentTypeError(ProviderError):
    """Remote answered with something other than an XML document."""

    def __init__(self, content_type: str, url: Optional[str] = None):
        self.content_type = content_type
        self.url = url
        where = f" from {url}" if url else ""
        super().__init__(
            f"The remote website did not return XML{where} (content type: {content_type or 'missing'})"
        )


class InvalidRangeError(ProviderError, ValueError):
    """Requested date range is inverted."""

    def __init__(self, from_date: date, to_date: date):
        self.from_date = from_date
        self.to_date = to_date
        super().__init__(
            f"The from date {from_date.isoformat()} cannot be after the to date {to_date.isoformat()}"
        )


class EmptySeriesError(LookupError):
    """Query attempted on a series holding no observations."""

    def __init__(self, message: str = "The rate series holds no observations"):
        super().__init__(message)


class OutOfRangeError(LookupError):
    """Query date falls outside the dates covered by the series."""

    def __init__(self, requested: date, first: date, last: date):
        self.requested = requested
        self.first = first
        self.last = last
        super().__init__(
            f"The given date {requested.isoformat()} is not within the range of the data set "
            f"starting {first.isoformat()} and ending {last.isoformat()}"
        )
