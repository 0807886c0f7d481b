"""OAuth2 authentication package for the HMRC MTD API"""

from .models import Credentials, TokenState, TokenExtraction
from .extraction import parse_token_payload, parse_expires_in
from .authorization import AuthorizationURLBuilder
from .authenticator import Authenticator

__all__ = [
    "Authenticator",
    "AuthorizationURLBuilder",
    "Credentials",
    "TokenState",
    "TokenExtraction",
    "parse_token_payload",
    "parse_expires_in",
]
