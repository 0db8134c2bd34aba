"""
Tests for the Gitea client constructor and its request wrapper.
"""

import io
import json
from typing import Any, Dict, List

import httpx
import pytest

from scmkit import create_client
from scmkit.config import Capability, ClientConfig
from scmkit.driver import gitea
from scmkit.driver.gitea import models
from scmkit.driver.gitea.gitea import encode_json, escape_path, trim_ref, with_query
from scmkit.scm.client import Driver, parse_base_url
from scmkit.scm.errors import (
    DecodeError,
    InvalidURLError,
    NotSupportedError,
    ScmError,
    StatusError,
    TransportError,
)
from scmkit.scm.output import CopyRawInto, DecodeInto
from scmkit.scm.types import ListOptions

from fixtures.gitea import make_user
from fixtures.streams import TrackedStream


# ============================================================================
# Construction
# ============================================================================

class TestNewClient:
    """Building a client from a base endpoint"""

    def test_appends_trailing_slash(self):
        client = gitea.new_client("https://gitea.example.com/api")
        assert str(client.base_url) == "https://gitea.example.com/api/"

    def test_keeps_existing_trailing_slash(self):
        client = gitea.new_client("https://gitea.example.com/api/")
        assert str(client.base_url) == "https://gitea.example.com/api/"

    def test_root_url(self):
        client = gitea.new_client("https://gitea.example.com")
        assert str(client.base_url) == "https://gitea.example.com/"

    def test_normalization_is_idempotent(self):
        once = parse_base_url("http://localhost:3000/gitea")
        twice = parse_base_url(str(once))
        assert once == twice
        assert str(twice) == "http://localhost:3000/gitea/"

    @pytest.mark.parametrize("uri", ["not a url", "", "http://", "example.com/api", "ftp://gitea.example.com"])
    def test_malformed_url(self, uri):
        with pytest.raises(InvalidURLError):
            gitea.new_client(uri)

    def test_invalid_url_is_scm_error(self):
        with pytest.raises(ScmError):
            gitea.new_client("")

    def test_all_services_wired(self):
        client = gitea.new_client("https://gitea.example.com")
        assert client.driver == Driver.GITEA
        assert isinstance(client.contents, gitea.ContentService)
        assert isinstance(client.git, gitea.GitService)
        assert isinstance(client.issues, gitea.IssueService)
        assert isinstance(client.organizations, gitea.OrganizationService)
        assert isinstance(client.pull_requests, gitea.PullRequestService)
        assert isinstance(client.repositories, gitea.RepositoryService)
        assert isinstance(client.reviews, gitea.ReviewService)
        assert isinstance(client.users, gitea.UserService)
        assert isinstance(client.webhooks, gitea.WebhookService)

    def test_services_share_the_client(self):
        client = gitea.new_client("https://gitea.example.com")
        assert client.issues.client is client
        assert client.pull_requests.client is client
        assert client.webhooks.client is client

    def test_disabled_capability(self):
        config = ClientConfig(
            base_url="https://gitea.example.com",
            capabilities=frozenset({Capability.ISSUES, Capability.USERS}),
        )
        client = gitea.new_client(config)
        assert client.issues is not None
        assert client.users is not None
        assert client.pull_requests is None
        assert client.webhooks is None

    def test_no_request_on_construction(self, server, config):
        gitea.new_client(config)
        assert server.requests == []


class TestCreateClient:
    """Driver selection"""

    def test_gitea_by_name(self):
        client = create_client("Gitea", "https://gitea.example.com")
        assert isinstance(client, gitea.Wrapper)

    def test_gitea_by_enum(self):
        client = create_client(Driver.GITEA, "https://gitea.example.com")
        assert client.driver == Driver.GITEA

    def test_unknown_driver(self):
        with pytest.raises(NotSupportedError):
            create_client("sourcehut", "https://git.example.com")

    def test_driver_without_implementation(self):
        with pytest.raises(NotSupportedError):
            create_client("github", "https://api.github.com")


# ============================================================================
# Request wrapper
# ============================================================================

class TestDo:
    """The do() request wrapper"""

    @pytest.mark.asyncio
    async def test_decodes_json_body(self, server, client):
        server.add("GET", "/api/v1/user", json=make_user())

        out = DecodeInto(Dict[str, Any])
        response = await client.do("GET", "api/v1/user", out=out)

        assert response.status == 200
        assert out.value["login"] == "octocat"
        assert response.closed

    @pytest.mark.asyncio
    async def test_decodes_typed_model(self, server, client):
        server.add("GET", "/api/v1/user", json=make_user(id=42))

        out = DecodeInto(models.User)
        await client.do("GET", "api/v1/user", out=out)

        assert isinstance(out.value, models.User)
        assert out.value.id == 42
        assert out.value.full_name == "Octo Cat"

    @pytest.mark.asyncio
    async def test_decodes_list(self, server, client):
        server.add("GET", "/api/v1/user/orgs", json=[{"id": 1, "username": "acme"}, {"id": 2, "username": "umbrella"}])

        out = DecodeInto(List[models.Organization])
        await client.do("GET", "api/v1/user/orgs", out=out)

        assert [org.username for org in out.value] == ["acme", "umbrella"]

    @pytest.mark.asyncio
    async def test_path_joined_to_base(self, server):
        config = ClientConfig(base_url="https://gitea.example.com/git", transport=server.transport())
        server.add("GET", "/git/api/v1/version", json={"version": "1.21.0"})

        async with gitea.new_client(config) as client:
            await client.do("GET", "api/v1/version")

        assert str(server.last.url) == "https://gitea.example.com/git/api/v1/version"

    @pytest.mark.asyncio
    async def test_status_error(self, client):
        out = DecodeInto(Dict[str, Any])

        with pytest.raises(StatusError) as exc_info:
            await client.do("GET", "api/v1/repos/octocat/missing", out=out)

        error = exc_info.value
        assert str(error) == "Not Found"
        assert error.status == 404
        assert error.response.status == 404
        assert error.response.closed
        assert out.value is None

    @pytest.mark.asyncio
    async def test_status_error_headers_available(self, server, client):
        server.add("GET", "/api/v1/user", status=403, json={"message": "token expired"}, headers={"X-Gitea-Reason": "expired"})

        with pytest.raises(StatusError) as exc_info:
            await client.do("GET", "api/v1/user")

        assert str(exc_info.value) == "Forbidden"
        assert exc_info.value.response.header["x-gitea-reason"] == "expired"

    @pytest.mark.asyncio
    async def test_redirect_is_an_error(self, server, client):
        server.add("GET", "/api/v1/user", status=301, headers={"Location": "https://elsewhere.example.com/"})

        with pytest.raises(StatusError) as exc_info:
            await client.do("GET", "api/v1/user", out=DecodeInto())

        assert exc_info.value.status == 301
        assert str(exc_info.value) == "Moved Permanently"

    @pytest.mark.asyncio
    async def test_status_300_is_success(self, server, client):
        server.add("GET", "/api/v1/user", status=300, json={"choices": 2})

        out = DecodeInto(Dict[str, Any])
        response = await client.do("GET", "api/v1/user", out=out)

        assert response.status == 300
        assert out.value == {"choices": 2}

    @pytest.mark.asyncio
    async def test_unknown_status_text(self, server, client):
        server.add("GET", "/api/v1/user", status=599)

        with pytest.raises(StatusError) as exc_info:
            await client.do("GET", "api/v1/user")

        assert str(exc_info.value) == "Unknown Status Code 599"

    @pytest.mark.asyncio
    async def test_copies_raw_body(self, server, client):
        body = b"# Title\n\x00\xff binary tail"
        server.add("GET", "/api/v1/repos/octocat/hello-world/raw/main/README.md", content=body)

        sink = io.BytesIO()
        response = await client.do("GET", "api/v1/repos/octocat/hello-world/raw/main/README.md", out=CopyRawInto(sink))

        assert sink.getvalue() == body
        assert response.closed

    @pytest.mark.asyncio
    async def test_no_output_discards_body(self, server, client):
        server.add("DELETE", "/api/v1/repos/octocat/hello-world", status=204)

        response = await client.do("DELETE", "api/v1/repos/octocat/hello-world")

        assert response.status == 204
        assert response.closed

    @pytest.mark.asyncio
    async def test_payload_sent_as_json(self, server, client):
        server.add("POST", "/api/v1/repos/octocat/hello-world/issues", status=201, json={"number": 1})

        await client.do("POST", "api/v1/repos/octocat/hello-world/issues", {"title": "Bug", "body": "Broken"})

        request = server.last
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {"title": "Bug", "body": "Broken"}

    @pytest.mark.asyncio
    async def test_no_payload_no_body(self, server, client):
        server.add("GET", "/api/v1/user", json=make_user())

        await client.do("GET", "api/v1/user")

        request = server.last
        assert "content-type" not in request.headers
        assert request.content == b""

    @pytest.mark.asyncio
    async def test_token_header(self, server, client):
        server.add("GET", "/api/v1/user", json=make_user())

        await client.do("GET", "api/v1/user")

        assert server.last.headers["authorization"] == "token secret-token"
        assert server.last.headers["accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_invalid_json(self, server, client):
        server.add("GET", "/api/v1/user", content=b"{not json")

        with pytest.raises(DecodeError):
            await client.do("GET", "api/v1/user", out=DecodeInto(models.User))

    @pytest.mark.asyncio
    async def test_shape_mismatch(self, server, client):
        server.add("GET", "/api/v1/user", json=[1, 2, 3])

        with pytest.raises(DecodeError):
            await client.do("GET", "api/v1/user", out=DecodeInto(models.User))

    @pytest.mark.asyncio
    async def test_body_closed_once_on_decode_error(self, server, client):
        stream = TrackedStream([b'{"login": ', b"not json"])
        server.add("GET", "/api/v1/user", stream=stream)

        with pytest.raises(DecodeError):
            await client.do("GET", "api/v1/user", out=DecodeInto(models.User))

        assert stream.close_count == 1

    @pytest.mark.asyncio
    async def test_body_closed_once_on_status_error(self, server, client):
        stream = TrackedStream([b'{"message": "forbidden"}'])
        server.add("GET", "/api/v1/user", status=403, stream=stream)

        with pytest.raises(StatusError):
            await client.do("GET", "api/v1/user", out=DecodeInto())

        assert stream.close_count == 1

    @pytest.mark.asyncio
    async def test_read_timeout_during_body(self, server, client):
        stream = TrackedStream([b'{"lo'], error=httpx.ReadTimeout("timed out"))
        server.add("GET", "/api/v1/user", stream=stream)

        with pytest.raises(TransportError) as exc_info:
            await client.do("GET", "api/v1/user", out=DecodeInto())

        assert isinstance(exc_info.value, ScmError)
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
        assert stream.close_count == 1

    @pytest.mark.asyncio
    async def test_read_error_during_raw_copy(self, server, client):
        stream = TrackedStream([b"partial"], error=httpx.ReadError("connection reset"))
        server.add("GET", "/api/v1/repos/octocat/hello-world/raw/main/big.bin", stream=stream)

        sink = io.BytesIO()
        with pytest.raises(TransportError):
            await client.do("GET", "api/v1/repos/octocat/hello-world/raw/main/big.bin", out=CopyRawInto(sink))

        assert sink.getvalue() == b"partial"
        assert stream.close_count == 1

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        config = ClientConfig(base_url="https://gitea.example.com", transport=httpx.MockTransport(refuse))

        async with gitea.new_client(config) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.do("GET", "api/v1/user", out=DecodeInto())

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


# ============================================================================
# Encoding helpers
# ============================================================================

class TestEncoding:

    def test_encode_model_by_alias(self):
        payload = models.MergePullRequestOption(do="squash", merge_title="Squashed")
        assert json.loads(encode_json(payload)) == {
            "Do": "squash",
            "MergeTitleField": "Squashed",
            "delete_branch_after_merge": False,
        }

    def test_encode_model_skips_unset_optionals(self):
        payload = models.EditIssueOption(state="closed")
        assert json.loads(encode_json(payload)) == {"state": "closed"}

    def test_encode_dataclass(self):
        assert json.loads(encode_json(ListOptions(page=2, size=10))) == {"page": 2, "size": 10}

    @pytest.mark.parametrize("ref, expected", [
        ("refs/heads/main", "main"),
        ("refs/tags/v1.0.0", "v1.0.0"),
        ("refs/pull/1/head", "refs/pull/1/head"),
        ("feature/refs/heads/x", "feature/refs/heads/x"),
        ("c0ffee", "c0ffee"),
    ])
    def test_trim_ref(self, ref, expected):
        assert trim_ref(ref) == expected

    def test_escape_path_keeps_separators(self):
        assert escape_path("docs/a#b.md") == "docs/a%23b.md"
        assert escape_path("my notes?.txt") == "my%20notes%3F.txt"
        assert escape_path("src/main.py") == "src/main.py"

    def test_with_query_skips_empty_values(self):
        assert with_query("api/v1/user/repos", page=0, limit=None, q="") == "api/v1/user/repos"
        assert with_query("api/v1/user/repos", page=2, limit=50) == "api/v1/user/repos?page=2&limit=50"
