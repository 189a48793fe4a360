"""
Pytest configuration and shared fixtures for REST client tests.

Provides an in-process aiohttp server standing in for the remote REST API.
Every request it receives is recorded so tests can assert on exactly what
was sent over the wire.
"""

import asyncio
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from twilio_rest import RestClient

ACCOUNT_SID = "AC0123456789abcdef"
AUTH_TOKEN = "secret-token"


class RecordedRequest:
    """What the fake API received for one request."""

    def __init__(self, method: str, raw_path: str, headers: dict, body: bytes):
        self.method = method
        self.raw_path = raw_path
        self.headers = headers
        self.body = body


def create_api_app(recorded: list) -> web.Application:
    """Fake REST API with a handful of behaviours selected by path."""

    async def record(request: web.Request) -> RecordedRequest:
        body = await request.read()
        entry = RecordedRequest(request.method, request.raw_path, dict(request.headers), body)
        recorded.append(entry)
        return entry

    async def echo(request: web.Request) -> web.Response:
        entry = await record(request)
        return web.Response(text=f"{entry.method} ok")

    async def multiline(request: web.Request) -> web.Response:
        await record(request)
        return web.Response(text="<Response>\r\n  <Sid>CA1</Sid>\n</Response>\n")

    async def server_error(request: web.Request) -> web.Response:
        await record(request)
        return web.Response(status=500, text="Internal error:\nplease retry later")

    async def not_found(request: web.Request) -> web.Response:
        await record(request)
        return web.Response(status=404, text='{"code": 20404, "message": "not found"}')

    async def empty(request: web.Request) -> web.Response:
        await record(request)
        return web.Response(status=204)

    async def slow(request: web.Request) -> web.Response:
        await record(request)
        await asyncio.sleep(1.0)
        return web.Response(text="too late")

    app = web.Application()
    app.router.add_route("*", "/multiline", multiline)
    app.router.add_route("*", "/error", server_error)
    app.router.add_route("*", "/missing", not_found)
    app.router.add_route("*", "/empty", empty)
    app.router.add_route("*", "/slow", slow)
    app.router.add_route("*", "/{tail:.*}", echo)
    return app


@pytest.fixture
def recorded():
    """Requests received by the fake API, in arrival order."""
    return []


@pytest_asyncio.fixture
async def api_server(recorded):
    """Running fake REST API server."""
    server = TestServer(create_api_app(recorded))
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
def endpoint(api_server):
    """Base URL of the fake API."""
    return f"http://{api_server.host}:{api_server.port}"


@pytest.fixture
def client(endpoint):
    """RestClient pointed at the fake API."""
    return RestClient(ACCOUNT_SID, AUTH_TOKEN, endpoint=endpoint)
