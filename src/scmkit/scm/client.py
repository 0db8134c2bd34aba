"""
Provider-neutral client and transport.

The Client owns the HTTP transport and the base URL. Drivers subclass it
to add a request wrapper and attach their sub-services.
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import AsyncIterator, Dict, Optional, TYPE_CHECKING

import httpx

from .errors import InvalidURLError, TransportError

if TYPE_CHECKING:
    from ..config import ClientConfig
    from .services import (
        ContentService,
        GitService,
        IssueService,
        OrganizationService,
        PullRequestService,
        RepositoryService,
        ReviewService,
        UserService,
        WebhookService,
    )

logger = logging.getLogger(__name__)


class Driver(Enum):
    """Supported source control providers"""
    UNKNOWN = "unknown"
    GITHUB = "github"
    GITLAB = "gitlab"
    GITEA = "gitea"
    GOGS = "gogs"
    BITBUCKET = "bitbucket"
    STASH = "stash"


@dataclass
class Request:
    """A single HTTP request, relative to the client base URL"""
    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


class Response:
    """
    HTTP response with a readable body.

    The body is only readable while the scope that opened it (Client.open)
    is active. Status and headers stay available afterwards.
    """

    def __init__(self, raw: httpx.Response):
        self._raw = raw
        self.status: int = raw.status_code
        self.header: httpx.Headers = raw.headers
        self.url: str = str(raw.request.url)

    @property
    def closed(self) -> bool:
        """Whether the body stream has been released"""
        return self._raw.is_closed

    async def read(self) -> bytes:
        """Read the whole body"""
        return await self._raw.aread()

    async def iter_bytes(self) -> AsyncIterator[bytes]:
        """Iterate over the body bytes, without any JSON or text decoding"""
        async for chunk in self._raw.aiter_bytes():
            yield chunk

    def __repr__(self) -> str:
        return f"<Response [{self.status}] {self.url}>"


def parse_base_url(uri: str) -> httpx.URL:
    """
    Parse a base endpoint and make sure its path ends with a separator.

    Args:
        uri: Base endpoint (e.g. "https://gitea.example.com/api")

    Returns:
        Normalized URL (e.g. "https://gitea.example.com/api/")

    Raises:
        InvalidURLError: If uri is not an absolute http(s) URL
    """
    try:
        url = httpx.URL(uri)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidURLError(f"Invalid base URL {uri!r}: {e}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURLError(f"Invalid base URL {uri!r}: expected an absolute http(s) URL")

    if not url.path.endswith("/"):
        url = url.copy_with(path=url.path + "/")

    return url


class Client:
    """
    Source control client.

    Holds the base URL and the shared HTTP transport. Sub-service handles
    are attached by the driver that builds the client; a handle is None
    when its capability is disabled in the configuration.
    """

    contents: Optional["ContentService"] = None
    git: Optional["GitService"] = None
    issues: Optional["IssueService"] = None
    organizations: Optional["OrganizationService"] = None
    pull_requests: Optional["PullRequestService"] = None
    repositories: Optional["RepositoryService"] = None
    reviews: Optional["ReviewService"] = None
    users: Optional["UserService"] = None
    webhooks: Optional["WebhookService"] = None

    def __init__(self, config: "ClientConfig", driver: Driver = Driver.UNKNOWN):
        """
        Initialize the client. No network I/O happens here.

        Args:
            config: Client configuration

        Raises:
            InvalidURLError: If the configured base URL is malformed
        """
        self.config = config
        self.driver = driver
        self.base_url = parse_base_url(config.base_url)

        headers = {
            "Accept": "application/json",
            "User-Agent": config.user_agent,
        }
        if config.token:
            headers["Authorization"] = f"token {config.token}"

        self._http = httpx.AsyncClient(
            headers=headers,
            timeout=config.timeout,
            transport=config.transport,
        )

    async def __aenter__(self):
        """Context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP transport"""
        await self._http.aclose()

    @asynccontextmanager
    async def open(self, request: Request) -> AsyncIterator[Response]:
        """
        Send a request and hold its response body open for the scope.

        The body is closed when the scope exits, whatever the exit path.

        Args:
            request: Request to send, path relative to the base URL

        Yields:
            Response with a readable body

        Raises:
            TransportError: If the exchange could not complete
        """
        url = self.base_url.join(request.path)
        http_request = self._http.build_request(
            request.method,
            url,
            headers=request.headers,
            content=request.body,
        )

        logger.debug(f"{request.method} {url}")

        try:
            raw = await self._http.send(http_request, stream=True)
        except httpx.TransportError as e:
            logger.warning(f"{request.method} {url} failed: {e}")
            raise TransportError(f"Request failed: {e}") from e

        try:
            logger.debug(f"{request.method} {url} -> {raw.status_code}")
            yield Response(raw)
        except httpx.TransportError as e:
            # The body is streamed, so reading it can still fail
            logger.warning(f"{request.method} {url} failed while reading the body: {e}")
            raise TransportError(f"Reading response failed: {e}") from e
        finally:
            await raw.aclose()
