"""Tests for the HelloWorld endpoint wrapper."""

import pytest

from api.errors import ConfigurationError
from endpoints import HelloWorld
from oauth import Authenticator

from conftest import BASE_URL


@pytest.fixture
def hello(auth):
    return HelloWorld(auth)


def test_hello_world_is_open(hello, handler):
    handler.respond_with(200, json={"message": "Hello World"})

    result = hello.hello_world()

    request = handler.last_request
    assert result.data == {"message": "Hello World"}
    assert request.url.path == "/hello/world"
    assert request.headers["accept"] == "application/vnd.hmrc.1.0+json"
    assert "authorization" not in request.headers


def test_hello_application_uses_server_token(hello, handler):
    handler.respond_with(200, json={"message": "Hello Application"})

    result = hello.hello_application()

    assert result.is_success
    assert handler.last_request.headers["authorization"] == "Bearer test-server-token"


def test_hello_application_requires_server_token(transport, handler):
    hello = HelloWorld(Authenticator(client_id="id", base_url=BASE_URL, transport=transport))

    with pytest.raises(ConfigurationError, match="server_token"):
        hello.hello_application()
    assert handler.requests == []


def test_hello_user_uses_access_token(hello, auth, handler):
    auth.set_tokens(access_token="user-access", expires_epoch=2**31)
    handler.respond_with(200, json={"message": "Hello User"})

    result = hello.hello_user()

    assert result.data["message"] == "Hello User"
    assert handler.last_request.headers["authorization"] == "Bearer user-access"


def test_hello_user_requires_access_token(hello, handler):
    with pytest.raises(ConfigurationError, match="access_token"):
        hello.hello_user()
    assert handler.requests == []


def test_hello_user_rejected_token(hello, auth, handler):
    auth.set_tokens(access_token="stale", expires_epoch=1)
    handler.respond_with(401, json={"code": "INVALID_CREDENTIALS", "message": "Invalid Authentication information provided"})

    result = hello.hello_user()

    assert not result.is_success
    assert result.error_code == "INVALID_CREDENTIALS"
