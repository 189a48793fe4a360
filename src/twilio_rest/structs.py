"""
REST Client Data Structures

Method enumeration, immutable client configuration and the response snapshot
returned by RestClient.request.
"""

from enum import Enum
from typing import Union

import msgspec

from .exceptions import ConfigurationError, UnknownMethodError

DEFAULT_ENDPOINT = "https://api.twilio.com"
DEFAULT_CONNECT_TIMEOUT = 10.0  # seconds
DEFAULT_READ_TIMEOUT = 300.0  # seconds


class HTTPMethod(Enum):
    """HTTP methods supported by the REST client."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: Union["HTTPMethod", str]) -> "HTTPMethod":
        """
        Resolve a method given as enum member or exact upper-case name.

        Raises:
            UnknownMethodError: If value is not a supported method
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value]
            except KeyError:
                pass
        raise UnknownMethodError(f"Unknown method {value}")


class ClientConfig(msgspec.Struct, frozen=True):
    """
    Connection configuration for RestClient.

    Attributes:
        account_sid: Account identifier used as the Basic auth user name
        auth_token: Secret token used as the Basic auth password
        endpoint: Base URL every request path is appended to
        connect_timeout: Connection timeout in seconds, 0 disables it
        read_timeout: Socket read timeout in seconds, 0 disables it
    """
    account_sid: str
    auth_token: str
    endpoint: str = DEFAULT_ENDPOINT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT

    def validate(self) -> None:
        """Validate client configuration."""
        if not self.account_sid:
            raise ConfigurationError("AccountSid cannot be empty", "account_sid")
        if not self.auth_token:
            raise ConfigurationError("AuthToken cannot be empty", "auth_token")
        if not self.endpoint:
            raise ConfigurationError("Endpoint cannot be empty", "endpoint")
        if self.connect_timeout is None or self.connect_timeout < 0:
            raise ConfigurationError("connect_timeout cannot be negative", "connect_timeout")
        if self.read_timeout is None or self.read_timeout < 0:
            raise ConfigurationError("read_timeout cannot be negative", "read_timeout")


class RestResponse(msgspec.Struct, frozen=True):
    """Snapshot of a completed request: URL sent, raw body text, HTTP status."""
    url: str
    body: str
    status_code: int
