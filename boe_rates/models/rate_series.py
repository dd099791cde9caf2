"""Point-in-time view over the Bank of England base rate.

A base rate stays in force until the Bank changes it, so the series only needs
the dates on which a new rate took effect. ``rate_at`` answers "which rate was
in effect on this day" by finding the latest change on or before that day.
"""

import bisect
import json
import logging
from datetime import date
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from ..data.dates import DateLike, parse_date, to_calendar_date
from ..errors import EmptySeriesError, OutOfRangeError, ParseError
from .observation import Observation

logger = logging.getLogger(__name__)

ObservationLike = Union[Observation, Tuple[DateLike, float]]

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


class RateSeries:
    """Immutable, date-ordered collection of rate observations."""

    def __init__(self, observations: Iterable[ObservationLike] = ()) -> None:
        by_date: dict[date, float] = {}
        for item in observations:
            obs = item if isinstance(item, Observation) else Observation(
                effective_date=item[0], rate=item[1]
            )
            # Last write wins for a repeated date
            by_date[obs.effective_date] = obs.rate

        self._dates: List[date] = sorted(by_date)
        self._rates: List[float] = [by_date[d] for d in self._dates]

    def __len__(self) -> int:
        return len(self._dates)

    def __iter__(self) -> Iterator[Observation]:
        for d, rate in zip(self._dates, self._rates):
            yield Observation(effective_date=d, rate=rate)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, date):
            return False
        d = to_calendar_date(item)
        idx = bisect.bisect_left(self._dates, d)
        return idx < len(self._dates) and self._dates[idx] == d

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RateSeries):
            return NotImplemented
        return self._dates == other._dates and self._rates == other._rates

    def __repr__(self) -> str:
        if not self._dates:
            return "RateSeries(empty)"
        return (
            f"RateSeries({len(self)} observations, "
            f"{self._dates[0].isoformat()}..{self._dates[-1].isoformat()})"
        )

    def observations(self) -> List[Observation]:
        """All observations, oldest first."""
        return list(self)

    def _require_data(self) -> None:
        if not self._dates:
            raise EmptySeriesError()

    def first_date(self) -> date:
        """Date of the earliest rate available."""
        self._require_data()
        return self._dates[0]

    def last_date(self) -> date:
        """Date of the most recent rate change available."""
        self._require_data()
        return self._dates[-1]

    def rate_at(self, on: Optional[DateLike] = None) -> float:
        """Return the most recent rate, or the rate in effect on ``on``.

        Args:
            on: Date (or datetime, reduced to its UK calendar date) to look up.

        Raises:
            EmptySeriesError: If the series holds no observations
            OutOfRangeError: If ``on`` lies outside [first_date, last_date]
        """
        self._require_data()
        if on is None:
            return self._rates[-1]

        d = to_calendar_date(on)
        first, last = self._dates[0], self._dates[-1]
        if d < first or d > last:
            raise OutOfRangeError(d, first, last)

        # Rightmost change on or before d; an exact match is included
        idx = bisect.bisect_right(self._dates, d) - 1
        return self._rates[idx]

    def to_text(self, date_format: str = DEFAULT_DATE_FORMAT) -> str:
        """Serialize as a JSON list of {"date", "rate"} records, newest first.

        Zero rates are written but ``from_text`` skips them, so a series
        holding a 0.0 rate does not round-trip exactly.

        Args:
            date_format: strftime pattern applied to each date
        """
        records = [
            {"date": d.strftime(date_format), "rate": rate}
            for d, rate in zip(reversed(self._dates), reversed(self._rates))
        ]
        return json.dumps(records)

    @classmethod
    def from_text(cls, text: str, date_format: Optional[str] = None) -> "RateSeries":
        """Build a series from text produced by ``to_text``.

        Records with a missing, null, empty or zero rate, or a missing or
        unreadable date, are skipped.

        Args:
            text: JSON list of {"date", "rate"} records
            date_format: strptime pattern for the dates; the flexible dateutil
                parser is used when omitted

        Raises:
            ParseError: If ``text`` is not a JSON list
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Snapshot is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise ParseError("Snapshot must be a JSON list of records")

        observations: List[Observation] = []
        for record in data:
            obs = _record_to_observation(record, date_format)
            if obs is not None:
                observations.append(obs)

        if len(observations) < len(data):
            logger.warning(
                "Skipped %d of %d snapshot records without a usable date or rate",
                len(data) - len(observations),
                len(data),
            )
        return cls(observations)


def _record_to_observation(record: object, date_format: Optional[str]) -> Optional[Observation]:
    if not isinstance(record, dict):
        return None
    raw_rate = record.get("rate")
    raw_date = record.get("date")
    if raw_rate in (None, "") or raw_date in (None, ""):
        return None

    try:
        rate = float(raw_rate)
    except (TypeError, ValueError):
        logger.debug("Unreadable rate %r in snapshot record", raw_rate)
        return None
    if not rate:
        return None

    try:
        effective = parse_date(str(raw_date), date_format)
    except ValueError as e:
        logger.debug("Unreadable date in snapshot record: %s", e)
        return None

    try:
        return Observation(effective_date=effective, rate=rate)
    except ValidationError as e:
        logger.debug("Invalid snapshot record %r: %s", record, e)
        return None
