"""Parser for the XML documents served by the BoE Interactive Database.

Rates are delivered daily except bank holidays and weekends. First and last
observation markers sit at the same depth as the rate data:

    <Envelope>
      <Cube SCODE="IUDBEDR" ...>
        <Cube FIRST_OBS="1975-01-02" LAST_OBS="2016-08-04"/>
        <Cube TIME="1975-01-02" OBS_VALUE="11.5"/>
        ...
"""

import logging
from typing import List, Optional, Union

from lxml import etree
from pydantic import ValidationError

from ..errors import ParseError
from ..models.observation import Observation
from .dates import parse_date

logger = logging.getLogger(__name__)

OBS_ELEMENT = "Cube"
DATE_ATTR = "TIME"
VALUE_ATTR = "OBS_VALUE"


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


def parse(raw_document: Union[str, bytes]) -> List[Observation]:
    """Return the rate changes contained in an IADB XML document.

    Days where the rate did not change are skipped, so each returned
    observation marks the first day a new rate was published.

    Args:
        raw_document: XML text as returned by the remote

    Returns:
        Observations in document (chronological) order

    Raises:
        ParseError: If the document is not well-formed or an observation
            cannot be read
    """
    if isinstance(raw_document, str):
        # lxml refuses str input that carries an encoding declaration
        raw_document = raw_document.encode("utf-8")
    if not raw_document.strip():
        raise ParseError("Rate document is empty")

    try:
        root = etree.fromstring(raw_document, parser=_xml_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Rate document is not well-formed XML: {e}") from e

    observations: List[Observation] = []
    last_rate: Optional[float] = None
    seen = 0
    for element in root.iter(etree.Element):
        if etree.QName(element).localname != OBS_ELEMENT:
            continue
        when = element.get(DATE_ATTR)
        value = element.get(VALUE_ATTR)
        if not when or not value or not value.strip():
            continue

        seen += 1
        obs = _to_observation(when, value)
        if obs.rate == last_rate:
            continue
        last_rate = obs.rate
        observations.append(obs)

    logger.debug("Parsed %d observations, %d rate changes", seen, len(observations))
    return observations


def _to_observation(when: str, value: str) -> Observation:
    try:
        rate = float(value)
        effective = parse_date(when)
        return Observation(effective_date=effective, rate=rate)
    except (ValueError, ValidationError) as e:
        raise ParseError(f"Invalid observation TIME={when!r} OBS_VALUE={value!r}: {e}") from e
