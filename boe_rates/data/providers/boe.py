"""Bank of England Interactive Database (IADB) provider for the base rate.

All available dates:
    ?Travel=NIxRPxSUx&FromSeries=1&ToSeries=50&DAT=ALL&VFD=N&CSVF=TT&C=13T&Filter=N&xml.x=1&xml.y=1
Specific range of dates:
    ?Travel=NIxRPxSUx&FromSeries=1&ToSeries=50&DAT=RNG&FD=1&FM=Jan&FY=1998&TD=1&TM=Sep&TY=2013&VFD=N&...
"""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

from ...config.series_registry import BASE_RATE_SERIES_ID, REGISTRY, SeriesSpec
from ...config.settings import settings
from ...errors import InvalidRangeError, UnexpectedContentTypeError
from ...models.observation import Observation
from ..boe_xml import parse
from ..dates import DateLike, month_abbr, now_local, to_calendar_date
from .base import RawDocument, SeriesProvider, Transport

logger = logging.getLogger(__name__)

# Fixed IADB query parameters; C selects the series
BASE_PARAMS: Dict[str, str] = {
    "Travel": "NIxRPxSUx",
    "FromSeries": "1",
    "ToSeries": "50",
    "VFD": "N",
    "xml.x": "1",
    "xml.y": "1",
    "CSVF": "TT",
    "Filter": "N",
}


def build_params(
    from_date: Optional[DateLike] = None,
    to_date: Optional[DateLike] = None,
    now: Optional[datetime] = None,
    series_code: str = REGISTRY[BASE_RATE_SERIES_ID].code,
) -> Dict[str, str]:
    """Build the IADB GET parameters for a date range.

    Args:
        from_date: First day requested; full history when omitted
        to_date: Last day requested; defaults to ``now`` when only
            ``from_date`` is given
        now: Current moment, defaults to the present in UK time
        series_code: IADB series code

    Raises:
        InvalidRangeError: If from_date is after to_date
    """
    params = dict(BASE_PARAMS)
    params["C"] = series_code

    # No from date: return all available data
    if from_date is None:
        params["DAT"] = "ALL"
        return params

    # No to date: assume from -> now
    if to_date is None:
        to_date = now if now is not None else now_local()

    start = to_calendar_date(from_date)
    end = to_calendar_date(to_date)
    if start > end:
        raise InvalidRangeError(start, end)

    params.update(
        {
            "DAT": "RNG",
            "FD": str(start.day),
            "FM": month_abbr(start),
            "FY": str(start.year),
            "TD": str(end.day),
            "TM": month_abbr(end),
            "TY": str(end.year),
        }
    )
    return params


def is_xml_content_type(content_type: Optional[str]) -> bool:
    return bool(content_type) and "xml" in content_type.lower()


class BoeRateProvider(SeriesProvider):
    """Retrieves the base rate from the Bank of England website."""

    def __init__(
        self,
        transport: Transport,
        url: Optional[str] = None,
        endpoint: Optional[str] = None,
        series: SeriesSpec = REGISTRY[BASE_RATE_SERIES_ID],
        clock: Callable[[], datetime] = now_local,
    ):
        self.transport = transport
        self.endpoint = endpoint or settings.BOE_ENDPOINT
        self.series = series
        self._override_url = url
        self._url = url
        self._clock = clock

    @property
    def url(self) -> Optional[str]:
        """URL of the last request, or the override URL; None before any request."""
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._override_url = value
        self._url = value

    def fetch(
        self,
        from_date: Optional[DateLike] = None,
        to_date: Optional[DateLike] = None,
    ) -> RawDocument:
        """Fetch the raw XML document for the requested range.

        Raises:
            InvalidRangeError: If from_date is after to_date (no request is sent)
            UnexpectedContentTypeError: If the remote did not answer with XML
            ProviderError: If the transport fails
        """
        params = build_params(from_date, to_date, now=self._clock(), series_code=self.series.code)

        if self._override_url:
            # Caller supplied the full URL, send it untouched
            target, params = self._override_url, {}
        else:
            target = self.endpoint

        logger.info("Fetching %s from %s", self.series.name, target)
        doc = self.transport(target, params)
        self._url = doc.url or target

        # The remote returns text/html with status 200 on error
        if not is_xml_content_type(doc.content_type):
            raise UnexpectedContentTypeError(doc.content_type, self._url)

        return doc

    def fetch_observations(
        self,
        from_date: Optional[DateLike] = None,
        to_date: Optional[DateLike] = None,
    ) -> List[Observation]:
        """Fetch and parse the rate changes for the requested range."""
        doc = self.fetch(from_date, to_date)
        observations = parse(doc.body)
        logger.info("Retrieved %d rate changes for %s", len(observations), self.series.name)
        return observations
