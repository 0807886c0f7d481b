"""Generic request/response layer for the HMRC REST API"""

from .errors import HMRCError, ConfigurationError, TransportError
from .transport import HttpTransport
from .response import ResponseEnvelope
from .request import RequestBase

__all__ = [
    "HMRCError",
    "ConfigurationError",
    "TransportError",
    "HttpTransport",
    "ResponseEnvelope",
    "RequestBase",
]
