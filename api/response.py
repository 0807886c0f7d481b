"""Response envelope for HMRC API calls"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class ResponseEnvelope:
    """Wraps one HTTP exchange with a success flag and the parsed JSON body

    ``data`` is always a dict. It is empty when the body is missing, is not
    valid JSON, or is JSON but not an object, so callers can index into it
    without checking first.

    HMRC error bodies look like::

        {"code": "INVALID_CREDENTIALS", "message": "Invalid Authentication information provided"}

    and are exposed through ``error_code`` and ``error_message``.
    """

    __slots__ = ("_http", "_data")

    def __init__(self, http: httpx.Response):
        self._http = http
        self._data = self._parse_body(http)

    @staticmethod
    def _parse_body(http: httpx.Response) -> Dict[str, Any]:
        if not http.content:
            return {}
        try:
            payload = json.loads(http.content)
        # ValueError covers JSONDecodeError, UnicodeDecodeError and
        # oversized integer literals; RecursionError covers deep nesting
        except (ValueError, RecursionError) as e:
            logger.debug(f"Response body ({http.status_code}) is not JSON: {e}")
            return {}
        if not isinstance(payload, dict):
            logger.debug(f"Response body ({http.status_code}) is not a JSON object")
            return {}
        return payload

    @property
    def http(self) -> httpx.Response:
        """The raw httpx response"""
        return self._http

    @property
    def data(self) -> Dict[str, Any]:
        return self._data

    @property
    def status_code(self) -> int:
        return self._http.status_code

    @property
    def is_success(self) -> bool:
        """True for any 2xx status"""
        return 200 <= self._http.status_code < 300

    @property
    def error_code(self) -> Optional[str]:
        if self.is_success:
            return None
        return self._data.get("code") or self._data.get("error")

    @property
    def error_message(self) -> Optional[str]:
        if self.is_success:
            return None
        return (
            self._data.get("message")
            or self._data.get("error_description")
            or self._http.reason_phrase
            or None
        )

    def __repr__(self) -> str:
        return f"<ResponseEnvelope status={self.status_code} success={self.is_success}>"
