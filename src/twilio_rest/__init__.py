"""
Twilio REST Client

Minimal async client for the Twilio REST API: HTTP Basic authentication,
form-encoded parameters and raw response snapshots.

Usage:
    from twilio_rest import RestClient, HTTPMethod

    client = RestClient(account_sid, auth_token)
    response = await client.request("/2010-04-01/Accounts/AC123/Calls.json",
                                     HTTPMethod.POST, {"To": "+15551234567"})
"""

from .structs import (
    HTTPMethod,
    ClientConfig,
    RestResponse,
    DEFAULT_ENDPOINT,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT
)
from .exceptions import (
    RestClientError,
    ConfigurationError,
    RestRequestError,
    UnknownMethodError,
    ParameterEncodingError,
    ResponseReadError,
    RestTimeoutError
)
from .encoding import encode_vars, build_url, join_lines
from .auth import AuthenticationData, BasicAuthStrategy, basic_auth_header
from .client import RestClient
from .config import load_client_config, client_config_from_env

__version__ = "1.0.0"

__all__ = [
    # Client
    "RestClient",

    # Data structures
    "HTTPMethod",
    "ClientConfig",
    "RestResponse",
    "DEFAULT_ENDPOINT",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_READ_TIMEOUT",

    # Exceptions
    "RestClientError",
    "ConfigurationError",
    "RestRequestError",
    "UnknownMethodError",
    "ParameterEncodingError",
    "ResponseReadError",
    "RestTimeoutError",

    # Encoding and authentication
    "encode_vars",
    "build_url",
    "join_lines",
    "AuthenticationData",
    "BasicAuthStrategy",
    "basic_auth_header",

    # Configuration
    "load_client_config",
    "client_config_from_env",
]
