"""Exception types raised by the HMRC client

API-level failures (non-2xx responses) and malformed token payloads are not
exceptions: they are returned as data through ResponseEnvelope and
Authenticator.extract_tokens.
"""


class HMRCError(Exception):
    """Base class for errors raised by this library"""


class ConfigurationError(HMRCError, ValueError):
    """A required credential or call parameter is missing

    Always raised before any network request is made.
    """


class TransportError(HMRCError):
    """The HTTP exchange did not complete (DNS, connection or timeout failure)"""
