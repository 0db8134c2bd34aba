"""
Pytest configuration and shared fixtures for scmkit tests.

Requests never reach the network: clients are built on an
httpx.MockTransport backed by MockServer, which serves canned responses
and records every request it receives.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

# Make the tests/fixtures package importable
_TESTS_ROOT = Path(__file__).resolve().parent
if str(_TESTS_ROOT) not in sys.path:
    sys.path.insert(0, str(_TESTS_ROOT))

from scmkit.config import ClientConfig
from scmkit.driver import gitea

from fixtures.streams import TrackedStream

BASE_URL = "https://gitea.example.com"


class MockServer:
    """Canned HTTP responses keyed by (method, path)"""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], httpx.Response] = {}
        self.streams: Dict[Tuple[str, str], TrackedStream] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
        stream: Optional[TrackedStream] = None,
    ) -> None:
        """Register a response; path is the URL path without query"""
        if stream is not None:
            self.streams[(method, path)] = stream
            response = httpx.Response(status, headers=headers, stream=stream)
        elif json is not None:
            response = httpx.Response(status, json=json, headers=headers)
        else:
            response = httpx.Response(status, content=content or b"", headers=headers)
        self.routes[(method, path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        response = self.routes.get(key)
        if response is None:
            return httpx.Response(404, json={"message": "not found"})
        if key in self.streams:
            return response
        # Hand out a fresh copy so a route can be hit more than once
        return httpx.Response(
            response.status_code,
            content=response.content,
            headers=response.headers,
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
def config(server) -> ClientConfig:
    return ClientConfig(base_url=BASE_URL, token="secret-token", transport=server.transport())


@pytest_asyncio.fixture
async def client(config):
    client = gitea.new_client(config)
    yield client
    await client.aclose()
