"""HTTP transport wrapping a synchronous httpx client"""

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from settings import CONNECT_TIMEOUT, REQUEST_TIMEOUT
from .errors import TransportError

logger = logging.getLogger(__name__)


class HttpTransport:
    """Issues GET and form-encoded POST requests and returns raw responses

    Network-level failures are raised as TransportError. Any response that
    arrives, whatever its status code, is returned unchanged.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: Optional[httpx.Timeout] = None,
    ):
        """Initialize the transport

        Args:
            client: Pre-configured httpx client. The transport does not close
                a client it did not create.
            timeout: Timeout for a transport-owned client. Defaults to
                REQUEST_TIMEOUT with CONNECT_TIMEOUT for the connect phase.
        """
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                timeout=timeout or httpx.Timeout(REQUEST_TIMEOUT, connect=CONNECT_TIMEOUT)
            )
        self.client = client

    def get(
        self,
        url: httpx.URL,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Send a GET request with optional query parameters"""
        return self._send("GET", url, params=params, headers=headers)

    def post(
        self,
        url: httpx.URL,
        data: Optional[Mapping[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Send a POST request with an application/x-www-form-urlencoded body"""
        return self._send("POST", url, data=data, headers=headers)

    def _send(self, method: str, url: httpx.URL, **kwargs) -> httpx.Response:
        # Drop empty mappings so httpx does not append a bare '?'
        kwargs = {key: value for key, value in kwargs.items() if value}
        logger.debug(f"{method} {url}")
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"{method} {url} timed out: {e}")
            raise TransportError(f"{method} {url} timed out: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def close(self):
        """Close the underlying client if this transport created it"""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info):
        self.close()
