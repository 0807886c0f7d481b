"""Request construction and dispatch against the HMRC API"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

import httpx

from headers import USER_AGENT, accept_header, bearer_header
from .errors import ConfigurationError
from .response import ResponseEnvelope
from .transport import HttpTransport

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]

# Values for the ``auth`` argument of get() and post()
USER_AUTH = "user"
APPLICATION_AUTH = "application"


def _no_token() -> Optional[str]:
    return None


class RequestBase:
    """Builds endpoint URLs and sends requests with the standard headers

    Tokens are read through provider callables on every request, so the
    owner of the token state (normally an Authenticator) stays the single
    source of truth.
    """

    def __init__(
        self,
        base_url: str,
        transport: Optional[HttpTransport] = None,
        api_version: Optional[str] = None,
        access_token_provider: Optional[TokenProvider] = None,
        server_token_provider: Optional[TokenProvider] = None,
    ):
        """Initialize the request base

        Args:
            base_url: API host, e.g. https://test-api.service.hmrc.gov.uk
            transport: HTTP transport (a new one is created if None)
            api_version: Default HMRC API version for the Accept header
            access_token_provider: Returns the current user access token
            server_token_provider: Returns the application server token
        """
        if not base_url:
            raise ConfigurationError("base_url not defined")
        self.base_url = httpx.URL(base_url)
        self.transport = transport or HttpTransport()
        self.api_version = api_version
        self.access_token_provider = access_token_provider or _no_token
        self.server_token_provider = server_token_provider or _no_token

    def endpoint_url(self, path: str) -> httpx.URL:
        """Combine the base URL with a relative path

        Args:
            path: Endpoint path such as "/oauth/token"

        Returns:
            Fully-qualified endpoint URL
        """
        base_path = self.base_url.path.rstrip("/")
        return self.base_url.copy_with(path=f"{base_path}/{path.lstrip('/')}")

    def headers(self, auth: Optional[str] = USER_AUTH, api_version: Optional[str] = None) -> Dict[str, str]:
        """Standard request headers

        Args:
            auth: "user" for the access token, "application" for the server
                token, None for open endpoints
            api_version: Overrides the default API version

        Returns:
            Header dictionary
        """
        headers = {
            "Accept": accept_header(api_version or self.api_version),
            "User-Agent": USER_AGENT,
        }

        if auth == USER_AUTH:
            token = self.access_token_provider()
        elif auth == APPLICATION_AUTH:
            token = self.server_token_provider()
        elif auth is None:
            token = None
        else:
            raise ConfigurationError(f"Unknown auth type: {auth!r}")

        if token:
            headers.update(bearer_header(token))
        return headers

    def get(
        self,
        path: str,
        query_params: Optional[Mapping[str, Any]] = None,
        auth: Optional[str] = USER_AUTH,
        api_version: Optional[str] = None,
    ) -> ResponseEnvelope:
        """GET an endpoint and wrap the response"""
        http_response = self.transport.get(
            self.endpoint_url(path),
            params=query_params,
            headers=self.headers(auth, api_version),
        )
        return ResponseEnvelope(http_response)

    def post(
        self,
        path: str,
        form_params: Optional[Mapping[str, Any]] = None,
        auth: Optional[str] = USER_AUTH,
        api_version: Optional[str] = None,
    ) -> ResponseEnvelope:
        """POST form-encoded parameters to an endpoint and wrap the response"""
        http_response = self.transport.post(
            self.endpoint_url(path),
            data=form_params,
            headers=self.headers(auth, api_version),
        )
        return ResponseEnvelope(http_response)
