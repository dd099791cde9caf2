"""Tests for the BoE IADB provider."""

from datetime import date, datetime
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from boe_rates.data.dates import SOURCE_TZ
from boe_rates.data.providers import (
    BoeRateProvider,
    ProviderError,
    RawDocument,
    RequestsTransport,
    build_params,
)
from boe_rates.errors import InvalidRangeError, UnexpectedContentTypeError

FIXTURE = Path(__file__).parent.parent / "data" / "boe_base_rates.xml"
ENDPOINT = "http://www.bankofengland.co.uk/boeapps/iadb/fromshowcolumns.asp"
NOW = datetime(2016, 8, 10, 9, 30, tzinfo=SOURCE_TZ)


class FakeTransport:
    def __init__(self, body="", content_type="text/xml", url=None):
        self.body = body
        self.content_type = content_type
        self.url = url
        self.calls = []

    def __call__(self, url, params):
        self.calls.append((url, dict(params)))
        return RawDocument(body=self.body, content_type=self.content_type, url=self.url or url)


class TestBuildParams:
    """Test IADB query parameter construction."""

    def test_full_history_without_from_date(self):
        """Test full history without from date."""
        params = build_params()
        assert params["DAT"] == "ALL"
        assert params["C"] == "13T"
        assert params["Travel"] == "NIxRPxSUx"
        assert "FD" not in params

    def test_explicit_range(self):
        """Test explicit range."""
        params = build_params(date(1998, 1, 1), date(2013, 9, 1))
        assert params["DAT"] == "RNG"
        assert (params["FD"], params["FM"], params["FY"]) == ("1", "Jan", "1998")
        assert (params["TD"], params["TM"], params["TY"]) == ("1", "Sep", "2013")

    def test_missing_to_date_defaults_to_now(self):
        """Test missing to date defaults to now."""
        params = build_params(date(2016, 1, 1), now=NOW)
        assert (params["TD"], params["TM"], params["TY"]) == ("10", "Aug", "2016")

    def test_missing_to_date_uses_current_moment(self):
        """Test missing to date uses current moment."""
        params = build_params(date(2016, 1, 1))
        assert int(params["TY"]) >= 2016

    def test_inverted_range_raises(self):
        """Test inverted range raises."""
        with pytest.raises(InvalidRangeError) as excinfo:
            build_params(date(2016, 1, 3), date(2016, 1, 1))
        assert excinfo.value.from_date == date(2016, 1, 3)
        assert excinfo.value.to_date == date(2016, 1, 1)

    def test_same_day_range_allowed(self):
        """Test same day range allowed."""
        params = build_params(date(2016, 1, 3), date(2016, 1, 3))
        assert params["FD"] == params["TD"] == "3"


class TestBoeRateProvider:
    """Test fetch policy and content-type checks."""

    def test_default_fetch_requests_all_history(self):
        """Test default fetch requests all history."""
        transport = FakeTransport(body=FIXTURE.read_text(encoding="utf-8"))
        provider = BoeRateProvider(transport, endpoint=ENDPOINT)
        assert provider.url is None

        doc = provider.fetch()

        url, params = transport.calls[0]
        assert url == ENDPOINT
        assert params["DAT"] == "ALL"
        assert provider.url == ENDPOINT
        assert "Cube" in doc.body

    def test_from_date_without_to_date_does_not_raise(self):
        """Test from date without to date does not raise."""
        transport = FakeTransport()
        provider = BoeRateProvider(transport, clock=lambda: NOW)
        provider.fetch(from_date=date(2016, 1, 1))
        _, params = transport.calls[0]
        assert params["TY"] == "2016"
        assert params["TM"] == "Aug"

    def test_inverted_range_raises_before_network(self):
        """Test inverted range raises before network."""
        transport = Mock()
        provider = BoeRateProvider(transport)
        with pytest.raises(InvalidRangeError):
            provider.fetch(datetime.now(), datetime(2000, 1, 1))
        transport.assert_not_called()

    def test_inverted_range_raises_with_url_override(self):
        """Test inverted range raises with URL override."""
        transport = Mock()
        provider = BoeRateProvider(transport, url="http://example.com")
        with pytest.raises(InvalidRangeError):
            provider.fetch(date(2016, 1, 3), date(2016, 1, 1))
        transport.assert_not_called()

    def test_non_xml_response_raises(self):
        """Test non XML response raises."""
        transport = FakeTransport(body="<html>Error</html>", content_type="text/html; charset=utf-8")
        provider = BoeRateProvider(transport)
        with pytest.raises(UnexpectedContentTypeError, match="did not return XML"):
            provider.fetch()

    def test_missing_content_type_raises(self):
        """Test missing content type raises."""
        provider = BoeRateProvider(FakeTransport(content_type=""))
        with pytest.raises(UnexpectedContentTypeError):
            provider.fetch()

    def test_content_type_check_is_case_insensitive(self):
        """Test content type check is case insensitive."""
        provider = BoeRateProvider(FakeTransport(body="<x/>", content_type="Application/XML"))
        assert provider.fetch().body == "<x/>"

    def test_url_override_sends_no_params(self):
        """Test URL override sends no params."""
        transport = FakeTransport()
        provider = BoeRateProvider(transport)
        provider.url = "http://example.com/rates.xml"
        assert provider.url == "http://example.com/rates.xml"

        provider.fetch(date(2016, 1, 1), date(2016, 2, 1))

        assert transport.calls == [("http://example.com/rates.xml", {})]

    def test_url_reports_transport_url(self):
        """Test URL reports transport URL."""
        transport = FakeTransport(url=f"{ENDPOINT}?DAT=ALL")
        provider = BoeRateProvider(transport, endpoint=ENDPOINT)
        provider.fetch()
        assert provider.url == f"{ENDPOINT}?DAT=ALL"

    def test_fetch_observations_parses_document(self):
        """Test fetch observations parses document."""
        transport = FakeTransport(body=FIXTURE.read_bytes().decode("utf-8"))
        provider = BoeRateProvider(transport)
        observations = provider.fetch_observations()
        assert observations[0].effective_date == date(1975, 1, 2)
        assert observations[-1].rate == 0.25


class TestRequestsTransport:
    """Test the requests-backed transport."""

    def _session(self, status_code=200, text="<x/>", content_type="text/xml"):
        response = Mock(status_code=status_code, text=text, url=f"{ENDPOINT}?DAT=ALL")
        response.headers = {"Content-Type": content_type}
        session = Mock()
        session.get.return_value = response
        return session

    def test_returns_raw_document(self):
        """Test returns raw document."""
        session = self._session()
        transport = RequestsTransport(session=session, timeout=5)

        doc = transport(ENDPOINT, {"DAT": "ALL"})

        session.get.assert_called_once_with(ENDPOINT, params={"DAT": "ALL"}, timeout=5)
        assert doc == RawDocument(body="<x/>", content_type="text/xml", url=f"{ENDPOINT}?DAT=ALL")

    def test_http_error_status_raises(self):
        """Test HTTP error status raises."""
        transport = RequestsTransport(session=self._session(status_code=503))
        with pytest.raises(ProviderError, match="HTTP 503"):
            transport(ENDPOINT, {})

    def test_connection_error_raises(self):
        """Test connection error raises."""
        session = Mock()
        session.get.side_effect = requests.exceptions.ConnectionError("refused")
        transport = RequestsTransport(session=session)
        with pytest.raises(ProviderError, match="refused"):
            transport(ENDPOINT, {})

    def test_timeout_raises(self):
        """Test timeout raises."""
        session = Mock()
        session.get.side_effect = requests.exceptions.Timeout("slow")
        transport = RequestsTransport(session=session)
        with pytest.raises(ProviderError, match="Timeout"):
            transport(ENDPOINT, {})
