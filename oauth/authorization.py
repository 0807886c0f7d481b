"""OAuth authorization URL construction"""

import webbrowser
from typing import Optional

import httpx

from api.errors import ConfigurationError
from api.request import RequestBase

AUTHORIZE_PATH = "/oauth/authorize"


class AuthorizationURLBuilder:
    """Builds the URL a user visits to grant this application access"""

    def __init__(self, request: RequestBase):
        self.request = request

    def get_authorize_url(
        self,
        client_id: Optional[str],
        authorisation_scope: Optional[str],
        redirect_uri: Optional[str],
        state: Optional[str] = None,
    ) -> httpx.URL:
        """Construct the authorization URL

        Args:
            client_id: Application client ID
            authorisation_scope: Scope defined by the target API, e.g. "read:vat"
            redirect_uri: Where HMRC sends the user once access is granted or
                denied. Must be registered for the application.
            state: Optional opaque value echoed back on the redirect, checked
                by the caller to reject forged redirects

        Returns:
            URL object; str() gives the fully-qualified url

        Raises:
            ConfigurationError: If a required value is missing
        """
        if not authorisation_scope:
            raise ConfigurationError("authorisation_scope not defined")
        if not redirect_uri:
            raise ConfigurationError("redirect_uri not defined")
        if not client_id:
            raise ConfigurationError("client_id property not defined for object")

        params = {
            "response_type": "code",
            "client_id": client_id,
            "scope": authorisation_scope,
            "redirect_uri": redirect_uri,
        }

        # state is optional
        if state is not None:
            params["state"] = state

        return self.request.endpoint_url(AUTHORIZE_PATH).copy_merge_params(params)

    @staticmethod
    def open_in_browser(url: httpx.URL) -> bool:
        """Open the authorization URL in the default browser

        Returns:
            True if a browser was launched
        """
        return webbrowser.open(str(url))
