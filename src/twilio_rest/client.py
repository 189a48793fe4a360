"""
REST Client

Sends single authenticated requests to a REST API and wraps the reply in a
RestResponse. Each call opens its own HTTP session, performs exactly one round
trip and releases the session on every exit path.

There is no retry and no rate limiting: a failed call fails once. HTTP error
statuses are returned to the caller unchanged; only transport-level problems
raise RestRequestError.

Usage:
    client = RestClient("ACxxxxxxxx", "token")
    response = await client.request("/2010-04-01/Accounts.json", "GET")
    print(response.status_code, response.body)
"""

import asyncio
import logging
import time
from typing import Any, Dict, Mapping, Optional, Union

import aiohttp
from yarl import URL

from .auth import BasicAuthStrategy
from .encoding import build_url, encode_vars, join_lines
from .exceptions import RestRequestError, ResponseReadError, RestTimeoutError
from .structs import (
    DEFAULT_CONNECT_TIMEOUT, DEFAULT_ENDPOINT, DEFAULT_READ_TIMEOUT,
    ClientConfig, HTTPMethod, RestResponse
)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class RestClient:
    """
    Minimal authenticated REST client.

    The configuration is immutable after construction, so one client can be
    shared by concurrent coroutines; every request is independent.
    """

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        endpoint: str = DEFAULT_ENDPOINT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT
    ):
        config = ClientConfig(
            account_sid=account_sid,
            auth_token=auth_token,
            endpoint=endpoint,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
        )
        config.validate()

        self._config = config
        self._auth = BasicAuthStrategy(config.account_sid, config.auth_token)
        connect_timeout = config.connect_timeout or None  # 0 means no timeout
        self._timeout = aiohttp.ClientTimeout(
            total=None,
            connect=connect_timeout,
            sock_connect=connect_timeout,
            sock_read=config.read_timeout or None,
        )

        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "RestClient":
        """Create client from a ClientConfig."""
        return cls(
            config.account_sid,
            config.auth_token,
            endpoint=config.endpoint,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def account_sid(self) -> str:
        return self._config.account_sid

    @property
    def auth_token(self) -> str:
        return self._config.auth_token

    async def request(
        self,
        path: str,
        method: Union[HTTPMethod, str] = HTTPMethod.GET,
        params: Optional[Mapping[str, Any]] = None
    ) -> RestResponse:
        """
        Send a single request to the REST API.

        Args:
            path: URL path appended to the endpoint (may carry a query string)
            method: GET, POST, PUT or DELETE
            params: For GET appended to the URL as query params, for POST or
                PUT sent form-encoded as the request body, ignored for DELETE

        Returns:
            RestResponse with the URL sent, body text and status code

        Raises:
            RestRequestError: Unknown method, malformed URL, transport failure,
                timeout or unreadable response
        """
        method = HTTPMethod.parse(method)
        encoded = encode_vars(params)
        url = build_url(self._config.endpoint, path, method, encoded)
        target = self._parse_url(url)

        auth_data = await self._auth.sign_request(method, path)
        headers: Dict[str, str] = dict(auth_data.headers)

        data: Optional[bytes] = None
        if method in (HTTPMethod.POST, HTTPMethod.PUT):
            headers["Content-Type"] = FORM_CONTENT_TYPE
            data = encoded.encode("utf-8")

        start_time = time.perf_counter()
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.request(method.value, target, headers=headers, data=data) as response:
                    body = await self._read_body(response, url)
                    status = response.status
        except RestRequestError:
            raise
        except asyncio.TimeoutError as e:
            self.logger.warning(f"REST request timed out: {method.value} {url}")
            raise RestTimeoutError(f"REST request timed out: {method.value} {url}", url) from e
        except (aiohttp.ClientError, OSError, ValueError) as e:
            self.logger.warning(f"REST request failed: {method.value} {url}: {e}")
            raise RestRequestError(f"REST request failed: {e}", url) from e

        execution_time_ms = (time.perf_counter() - start_time) * 1000
        self.logger.debug(f"{method.value} {url} -> {status} ({execution_time_ms:.2f}ms)")
        return RestResponse(url=url, body=body, status_code=status)

    async def _read_body(self, response: aiohttp.ClientResponse, url: str) -> str:
        """Read the whole body as text, whatever the status code, with line breaks removed."""
        try:
            text = await response.text(errors="replace")
        except aiohttp.ClientPayloadError as e:
            raise ResponseReadError("Unable to read response from server", url) from e
        return join_lines(text)

    @staticmethod
    def _parse_url(url: str) -> URL:
        """Parse the full URL without re-encoding it, rejecting malformed ones."""
        try:
            target = URL(url, encoded=True)
            if target.scheme not in ("http", "https") or not target.host or target.port is None:
                raise ValueError(f"expected absolute http(s) URL, got '{url}'")
        except ValueError as e:
            raise RestRequestError(f"REST request failed: malformed URL {url}", url) from e
        return target

    # Convenience HTTP method wrappers

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> RestResponse:
        """Execute GET request."""
        return await self.request(path, HTTPMethod.GET, params)

    async def post(self, path: str, params: Optional[Mapping[str, Any]] = None) -> RestResponse:
        """Execute POST request."""
        return await self.request(path, HTTPMethod.POST, params)

    async def put(self, path: str, params: Optional[Mapping[str, Any]] = None) -> RestResponse:
        """Execute PUT request."""
        return await self.request(path, HTTPMethod.PUT, params)

    async def delete(self, path: str) -> RestResponse:
        """Execute DELETE request."""
        return await self.request(path, HTTPMethod.DELETE)
