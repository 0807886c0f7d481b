"""HTTP headers and constants package for the HMRC MTD client"""

from .constants import (
    USER_AGENT,
    JSON_CONTENT_TYPE,
    FORM_CONTENT_TYPE,
    accept_header,
    bearer_header,
)

__all__ = [
    "USER_AGENT",
    "JSON_CONTENT_TYPE",
    "FORM_CONTENT_TYPE",
    "accept_header",
    "bearer_header",
]
