"""Data models for HMRC OAuth2 authentication"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    """Application credentials issued by the HMRC Developer Hub

    Attributes:
        client_id: OAuth2 client identifier
        client_secret: OAuth2 client secret
        server_token: Secret used for application-restricted endpoints
    """
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    server_token: Optional[str] = None


@dataclass(frozen=True)
class TokenState:
    """Tokens from one successful exchange or refresh

    The four fields are only ever replaced together, by swapping the whole
    value on the owning Authenticator.

    Attributes:
        access_token: Bearer token for user-restricted endpoints
        refresh_token: Token for obtaining a new access token
        scope: Granted scope, e.g. "read:vat"
        expires_epoch: Access token expiry in Unix seconds
    """
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    expires_epoch: Optional[int] = None

    @classmethod
    def empty(cls) -> "TokenState":
        return cls()

    @property
    def is_empty(self) -> bool:
        return (
            self.access_token is None
            and self.refresh_token is None
            and self.scope is None
            and self.expires_epoch is None
        )


@dataclass(frozen=True)
class TokenExtraction:
    """Result of validating a token response payload

    Attributes:
        ok: True when the payload was accepted
        tokens: Extracted tokens (empty on failure)
        error: Diagnostic message on failure
    """
    ok: bool
    tokens: TokenState
    error: Optional[str] = None

    @classmethod
    def success(cls, tokens: TokenState) -> "TokenExtraction":
        return cls(ok=True, tokens=tokens)

    @classmethod
    def failure(cls, error: str) -> "TokenExtraction":
        return cls(ok=False, tokens=TokenState.empty(), error=error)

    def __bool__(self) -> bool:
        return self.ok
