"""
REST Client Exceptions

Two error families are raised by the client:

- ConfigurationError: invalid credentials, endpoint or timeouts, detected at
  construction or while loading configuration.
- RestRequestError: anything that goes wrong while performing a request.
  HTTP error statuses (4xx/5xx) are NOT errors at this layer; they are
  returned as ordinary RestResponse values.
"""

from typing import Optional


class RestClientError(Exception):
    """Base exception for all REST client errors."""
    pass


class ConfigurationError(RestClientError):
    """Configuration-specific exception for setup errors."""

    def __init__(self, message: str, setting_name: Optional[str] = None):
        self.setting_name = setting_name
        super().__init__(message)


class RestRequestError(RestClientError):
    """REST request failed. The underlying cause is chained as __cause__."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(message)


class UnknownMethodError(RestRequestError):
    """HTTP method is not one of GET, POST, PUT, DELETE."""
    pass


class ParameterEncodingError(RestRequestError):
    """Request parameter could not be encoded as UTF-8."""
    pass


class ResponseReadError(RestRequestError):
    """Response body could not be read from the server."""
    pass


class RestTimeoutError(RestRequestError):
    """Connect or read timeout exceeded."""
    pass
