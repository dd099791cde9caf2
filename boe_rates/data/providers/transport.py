"""requests-backed transport for provider GET calls."""

import logging
from typing import Mapping, Optional

import requests

from ...config.settings import settings
from ...errors import ProviderError
from .base import RawDocument

logger = logging.getLogger(__name__)


class RequestsTransport:
    """Single GET per call over a shared ``requests.Session``.

    No retries are attempted; failures surface as ``ProviderError``.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.timeout = settings.HTTP_TIMEOUT if timeout is None else timeout

    def __call__(self, url: str, params: Mapping[str, str]) -> RawDocument:
        logger.debug("GET %s params=%s", url, dict(params))
        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise ProviderError(f"Timeout fetching {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"Request error fetching {url}: {e}") from e

        if r.status_code != 200:
            raise ProviderError(f"HTTP {r.status_code} for {r.url}")

        return RawDocument(
            body=r.text,
            content_type=r.headers.get("Content-Type", ""),
            url=r.url,
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *args) -> None:
        self.close()
