"""Validation of OAuth token response payloads

A typical payload from the HMRC token endpoint::

    {
        "scope": "read:vat",
        "token_type": "bearer",
        "expires_in": 14400,
        "refresh_token": "806d848e5e78fee92c9a38e6b7a3",
        "access_token": "7d46efbcbff7892295894e21f940d118"
    }

Nothing here logs or mutates state; callers decide what to do with the result.
"""

import re
import time
from typing import Any, Optional

from .models import TokenExtraction, TokenState

BEARER_TOKEN_TYPE = "bearer"

_DIGITS = re.compile(r"[0-9]+")


def parse_expires_in(value: Any) -> Optional[int]:
    """Parse an expires_in value as a non-negative whole number of seconds

    Accepts an int, a whole-number float such as 14400.0, or a string of
    ASCII digits. Booleans, fractional or non-finite floats, negative numbers,
    digit strings too long to convert and anything else give None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float):
        if value.is_integer() and value >= 0:
            return int(value)
        return None
    if isinstance(value, str) and _DIGITS.fullmatch(value):
        try:
            return int(value)
        except ValueError:
            # int() refuses strings beyond sys.get_int_max_str_digits()
            return None
    return None


def parse_token_payload(payload: Any, now: Optional[float] = None) -> TokenExtraction:
    """Validate a token response body and build the resulting token state

    Args:
        payload: Parsed JSON body of a token response
        now: Current Unix time, defaults to time.time()

    Returns:
        TokenExtraction with the new tokens, or a failure with a diagnostic
    """
    if not isinstance(payload, dict):
        return TokenExtraction.failure(f"token payload is not a mapping: {type(payload).__name__}")

    token_type = payload.get("token_type")
    if token_type != BEARER_TOKEN_TYPE:
        return TokenExtraction.failure(f"token type value is not `bearer`: {token_type!r}")

    expires_in = parse_expires_in(payload.get("expires_in"))
    if expires_in is None:
        return TokenExtraction.failure(
            f"expires_in value is not a non-negative integer: {payload.get('expires_in')!r}"
        )

    if now is None:
        now = time.time()

    # Token values are opaque and copied verbatim
    tokens = TokenState(
        access_token=payload.get("access_token"),
        refresh_token=payload.get("refresh_token"),
        scope=payload.get("scope"),
        expires_epoch=int(now) + expires_in,
    )
    return TokenExtraction.success(tokens)
