"""
Authentication Strategy

HTTP Basic authentication for every request sent by RestClient.
"""

import base64
from dataclasses import dataclass
from typing import Dict

from .structs import HTTPMethod


@dataclass(frozen=True)
class AuthenticationData:
    """Authentication headers to attach to a request."""
    headers: Dict[str, str]


def basic_auth_header(account_sid: str, auth_token: str) -> str:
    """Return "Basic " + base64("<account_sid>:<auth_token>")."""
    credentials = f"{account_sid}:{auth_token}".encode("utf-8")
    return "Basic " + base64.b64encode(credentials).decode("ascii")


class BasicAuthStrategy:
    """Signs requests with a precomputed HTTP Basic Authorization header."""

    def __init__(self, account_sid: str, auth_token: str):
        self._authorization = basic_auth_header(account_sid, auth_token)

    async def sign_request(self, method: HTTPMethod, path: str) -> AuthenticationData:
        """
        Generate authentication data for request.

        Basic auth does not depend on method or path; every request gets the
        same Authorization header.
        """
        return AuthenticationData(headers={"Authorization": self._authorization})
