"""HTTP Request Headers and Content Types

HMRC selects the API version from the Accept header, so versioned calls use a
vendor media type instead of plain JSON.
"""

from typing import Dict, Optional

# User-Agent string for API requests
USER_AGENT = "hmrc-mtd-client/0.1.0 (python-httpx)"

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Vendor media type, e.g. application/vnd.hmrc.1.0+json
HMRC_VENDOR_ACCEPT = "application/vnd.hmrc.{version}+json"


def accept_header(api_version: Optional[str] = None) -> str:
    """Build the Accept header value for an API version

    Args:
        api_version: HMRC API version such as "1.0", or None for plain JSON

    Returns:
        Accept header value
    """
    if api_version:
        return HMRC_VENDOR_ACCEPT.format(version=api_version)
    return JSON_CONTENT_TYPE


def bearer_header(token: str) -> Dict[str, str]:
    """Authorization header for a bearer token"""
    return {"Authorization": f"Bearer {token}"}
