"""
Shared pytest fixtures for the HMRC client tests.

HTTP is served by httpx.MockTransport; every request is recorded so tests can
assert on what was (or was not) sent.
"""

import logging
import sys
from pathlib import Path
from typing import Callable, List
from urllib.parse import parse_qs

import httpx
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from api.transport import HttpTransport
from oauth import Authenticator

BASE_URL = "https://test-api.service.hmrc.gov.uk"

TOKEN_PAYLOAD = {
    "scope": "read:vat",
    "token_type": "bearer",
    "expires_in": 14400,
    "refresh_token": "806d848e5e78fee92c9a38e6b7a3",
    "access_token": "7d46efbcbff7892295894e21f940d118",
}


class RecordingHandler:
    """MockTransport handler returning queued responses and recording requests"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={})
        )

    def respond_with(self, status_code: int = 200, **kwargs):
        self.responder = lambda request: httpx.Response(status_code, **kwargs)

    def raise_error(self, exc_type=httpx.ConnectError, message="connection refused"):
        def responder(request):
            raise exc_type(message, request=request)
        self.responder = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_form(self) -> dict:
        """Decode the form body of the last request into a flat dict"""
        parsed = parse_qs(self.last_request.content.decode(), keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items()}


@pytest.fixture(autouse=True)
def configure_test_logging(caplog):
    """Capture library logs for all tests."""
    caplog.set_level(logging.DEBUG)
    return caplog


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def transport(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    yield HttpTransport(client=client)
    client.close()


@pytest.fixture
def auth(transport) -> Authenticator:
    return Authenticator(
        client_id="test-client-id",
        client_secret="test-client-secret",
        server_token="test-server-token",
        base_url=BASE_URL,
        transport=transport,
    )


@pytest.fixture
def token_payload() -> dict:
    return dict(TOKEN_PAYLOAD)
