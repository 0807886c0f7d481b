"""HMRC HelloWorld API

Three endpoints, one per access level, for checking that credentials and
tokens work:

- /hello/world: open, no credentials
- /hello/application: application-restricted, needs the server token
- /hello/user: user-restricted, needs an access token (scope "hello")
"""

import logging

from api.errors import ConfigurationError
from api.request import APPLICATION_AUTH, USER_AUTH
from api.response import ResponseEnvelope
from oauth.authenticator import Authenticator

logger = logging.getLogger(__name__)

API_VERSION = "1.0"
HELLO_SCOPE = "hello"


class HelloWorld:
    """Client for the HelloWorld endpoints"""

    def __init__(self, auth: Authenticator):
        self.auth = auth

    def hello_world(self) -> ResponseEnvelope:
        return self.auth.request.get("/hello/world", auth=None, api_version=API_VERSION)

    def hello_application(self) -> ResponseEnvelope:
        """Raises ConfigurationError if no server token is configured"""
        if not self.auth.server_token:
            raise ConfigurationError("server_token property not defined for object")
        return self.auth.request.get("/hello/application", auth=APPLICATION_AUTH, api_version=API_VERSION)

    def hello_user(self) -> ResponseEnvelope:
        """Raises ConfigurationError if no access token is held"""
        if not self.auth.has_access_token():
            raise ConfigurationError("access_token property not defined for object")
        if self.auth.expires_epoch is not None and self.auth.is_token_expired():
            logger.warning("Access token appears to have expired, request may be rejected")
        return self.auth.request.get("/hello/user", auth=USER_AUTH, api_version=API_VERSION)
