"""OAuth2 token lifecycle for user-restricted HMRC endpoints

See https://developer.service.hmrc.gov.uk/api-documentation/docs/authorisation/user-restricted-endpoints

Typical use::

    auth = Authenticator(client_id=client_id, client_secret=client_secret)

    # Send the user here to grant access for the scope
    url = auth.authorisation_url(
        authorisation_scope="read:vat",
        redirect_uri="urn:ietf:wg:oauth:2.0:oob",
        state="session-cookie-hash-or-similar-opaque-value",
    )

    # The authorisation code is valid for 10 minutes
    result = auth.get_access_token(authorisation_code, "urn:ietf:wg:oauth:2.0:oob")
    if not result.is_success:
        print(result.error_message)

    # Access tokens last about four hours; refresh tokens up to 18 months
    if auth.is_token_expired():
        auth.refresh_tokens()
"""

import logging
import time
from typing import Any, Optional

import httpx

import settings
from api.errors import ConfigurationError
from api.request import RequestBase
from api.response import ResponseEnvelope
from api.transport import HttpTransport
from .authorization import AuthorizationURLBuilder
from .extraction import parse_token_payload
from .models import Credentials, TokenExtraction, TokenState

logger = logging.getLogger(__name__)

TOKEN_PATH = "/oauth/token"


class Authenticator:
    """Holds OAuth2 credentials and tokens and runs the token exchanges

    Token state is a single TokenState value; every change replaces it as a
    whole. Instances are not thread-safe: share one across threads only
    behind an external lock.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        server_token: Optional[str] = None,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
        scope: Optional[str] = None,
        expires_epoch: Optional[int] = None,
        base_url: Optional[str] = None,
        transport: Optional[HttpTransport] = None,
    ):
        self.credentials = Credentials(
            client_id=client_id,
            client_secret=client_secret,
            server_token=server_token,
        )
        self._tokens = TokenState(
            access_token=access_token,
            refresh_token=refresh_token,
            scope=scope,
            expires_epoch=expires_epoch,
        )
        self.request = RequestBase(
            base_url or settings.HMRC_BASE_URL,
            transport=transport,
            access_token_provider=lambda: self._tokens.access_token,
            server_token_provider=lambda: self.credentials.server_token,
        )
        self.auth_builder = AuthorizationURLBuilder(self.request)

    @classmethod
    def from_settings(cls, transport: Optional[HttpTransport] = None, **overrides) -> "Authenticator":
        """Create an Authenticator from the HMRC_* configuration values"""
        values = {
            "client_id": settings.HMRC_CLIENT_ID,
            "client_secret": settings.HMRC_CLIENT_SECRET,
            "server_token": settings.HMRC_SERVER_TOKEN,
            "base_url": settings.HMRC_BASE_URL,
        }
        values.update(overrides)
        return cls(transport=transport, **values)

    # Credentials
    @property
    def client_id(self) -> Optional[str]:
        return self.credentials.client_id

    @property
    def client_secret(self) -> Optional[str]:
        return self.credentials.client_secret

    @property
    def server_token(self) -> Optional[str]:
        return self.credentials.server_token

    # Token state
    @property
    def tokens(self) -> TokenState:
        """Current token state"""
        return self._tokens

    @property
    def access_token(self) -> Optional[str]:
        return self._tokens.access_token

    @property
    def refresh_token(self) -> Optional[str]:
        return self._tokens.refresh_token

    @property
    def scope(self) -> Optional[str]:
        return self._tokens.scope

    @property
    def expires_epoch(self) -> Optional[int]:
        return self._tokens.expires_epoch

    def has_access_token(self) -> bool:
        return bool(self._tokens.access_token)

    def has_refresh_token(self) -> bool:
        return bool(self._tokens.refresh_token)

    def set_tokens(
        self,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
        scope: Optional[str] = None,
        expires_epoch: Optional[int] = None,
    ):
        """Restore previously obtained tokens, replacing all current token state"""
        self._tokens = TokenState(
            access_token=access_token,
            refresh_token=refresh_token,
            scope=scope,
            expires_epoch=expires_epoch,
        )

    def clear_tokens(self):
        """Forget all token state"""
        self._tokens = TokenState.empty()

    def is_token_expired(self, now: Optional[float] = None) -> bool:
        """Check whether the access token has expired

        An unknown expiry counts as expired.
        """
        if self._tokens.expires_epoch is None:
            return True
        if now is None:
            now = time.time()
        return self._tokens.expires_epoch <= now

    def seconds_until_expiry(self, now: Optional[float] = None) -> Optional[int]:
        """Seconds until the access token expires, negative once expired"""
        if self._tokens.expires_epoch is None:
            return None
        if now is None:
            now = time.time()
        return self._tokens.expires_epoch - int(now)

    def endpoint_url(self, path: str) -> httpx.URL:
        return self.request.endpoint_url(path)

    def authorisation_url(
        self,
        authorisation_scope: str,
        redirect_uri: str,
        state: Optional[str] = None,
    ) -> httpx.URL:
        """URL to which a user is directed to authorise this application

        Args:
            authorisation_scope: Scope defined by the API, e.g. "read:vat"
            redirect_uri: Redirect registered for this application
            state: Optional value returned on the redirect

        Raises:
            ConfigurationError: If client_id, authorisation_scope or
                redirect_uri is missing
        """
        return self.auth_builder.get_authorize_url(
            self.client_id,
            authorisation_scope,
            redirect_uri,
            state=state,
        )

    def get_access_token(self, authorisation_code: str, redirect_uri: str) -> ResponseEnvelope:
        """Exchange an authorisation code for access and refresh tokens

        The redirect_uri must match the one used to obtain the code. Token
        state is updated from the response body whatever the HTTP status, so
        a failed exchange leaves no tokens.

        Returns:
            ResponseEnvelope; check is_success for the outcome

        Raises:
            ConfigurationError: Before any request, if an argument or
                client_id/client_secret is missing
        """
        if not authorisation_code:
            raise ConfigurationError("authorisation_code not defined")
        if not redirect_uri:
            raise ConfigurationError("redirect_uri not defined")
        self._require_client_credentials()

        logger.info("Exchanging authorisation code for tokens...")
        result = self.request.post(
            TOKEN_PATH,
            {
                "grant_type": "authorization_code",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code": authorisation_code,
                "redirect_uri": redirect_uri,
            },
            auth=None,
        )
        self._log_token_response("Token exchange", result)
        self.extract_tokens(result.data)
        return result

    def refresh_tokens(self) -> ResponseEnvelope:
        """Exchange the current refresh token for new tokens

        Returns:
            ResponseEnvelope; check is_success for the outcome

        Raises:
            ConfigurationError: Before any request, if refresh_token,
                client_id or client_secret is missing
        """
        if not self.has_refresh_token():
            raise ConfigurationError("refresh_token not defined for object")
        self._require_client_credentials()

        logger.info("Attempting to refresh OAuth tokens...")
        result = self.request.post(
            TOKEN_PATH,
            {
                "grant_type": "refresh_token",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "refresh_token": self.refresh_token,
            },
            auth=None,
        )
        self._log_token_response("Token refresh", result)
        self.extract_tokens(result.data)
        return result

    def extract_tokens(self, payload: Any) -> bool:
        """Update token state from a token response body

        Returns:
            True if the payload was accepted. On rejection a warning is
            logged, all token state is cleared and False is returned.
        """
        extraction = parse_token_payload(payload)
        self.apply_extraction(extraction)
        return extraction.ok

    def apply_extraction(self, extraction: TokenExtraction):
        """Replace token state with the outcome of a token extraction"""
        if not extraction.ok:
            logger.warning(f"Error parsing token: {extraction.error}")
            self._tokens = TokenState.empty()
            return
        self._tokens = extraction.tokens
        logger.debug(f"Token state updated, scope={extraction.tokens.scope!r}, expires_epoch={extraction.tokens.expires_epoch}")

    def _require_client_credentials(self):
        if not self.client_id:
            raise ConfigurationError("client_id property not defined for object")
        if not self.client_secret:
            raise ConfigurationError("client_secret property not defined for object")

    @staticmethod
    def _log_token_response(action: str, result: ResponseEnvelope):
        if result.is_success:
            logger.info(f"{action} succeeded")
        else:
            logger.error(f"{action} failed with status {result.status_code}: {result.error_message}")
