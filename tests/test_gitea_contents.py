"""
Tests for the Gitea contents service.
"""

import base64
import json

import pytest

from scmkit.scm.errors import StatusError
from scmkit.scm.types import ContentKind, ContentParams, ListOptions, Signature

REPO = "octocat/hello-world"


@pytest.mark.asyncio
async def test_find_returns_raw_bytes(server, client):
    body = b"\x89PNG\r\n\x1a\n\x00\x00binary"
    server.add("GET", f"/api/v1/repos/{REPO}/raw/main/docs/logo.png", content=body, headers={"Content-Type": "image/png"})

    content = await client.contents.find(REPO, "docs/logo.png", "main")

    assert content.path == "docs/logo.png"
    assert content.data == body


@pytest.mark.asyncio
async def test_find_missing_file(client):
    with pytest.raises(StatusError) as exc_info:
        await client.contents.find(REPO, "missing.txt", "main")
    assert exc_info.value.status == 404


@pytest.mark.asyncio
async def test_list(server, client):
    server.add("GET", f"/api/v1/repos/{REPO}/contents/docs", json=[
        {"name": "index.md", "path": "docs/index.md", "sha": "b10b", "last_commit_sha": "c0ffee", "type": "file"},
        {"name": "images", "path": "docs/images", "sha": "d1r", "type": "dir"},
        {"name": "vendor", "path": "docs/vendor", "sha": "5ub", "type": "submodule"},
    ])

    entries = await client.contents.list(REPO, "docs", "dev", ListOptions())

    assert [entry.kind for entry in entries] == [ContentKind.FILE, ContentKind.DIRECTORY, ContentKind.GITLINK]
    assert entries[0].blob_id == "b10b"
    assert entries[0].sha == "c0ffee"
    assert server.last.url.params["ref"] == "dev"


@pytest.mark.asyncio
async def test_create(server, client):
    server.add("POST", f"/api/v1/repos/{REPO}/contents/notes.txt", status=201, json={})

    await client.contents.create(REPO, "notes.txt", ContentParams(
        message="Add notes",
        data=b"hello\n",
        branch="main",
        signature=Signature(name="Octo Cat", email="octocat@example.com"),
    ))

    sent = json.loads(server.last.content)
    assert base64.b64decode(sent["content"]) == b"hello\n"
    assert sent["message"] == "Add notes"
    assert sent["branch"] == "main"
    assert sent["author"] == {"name": "Octo Cat", "email": "octocat@example.com"}
    assert "sha" not in sent


@pytest.mark.asyncio
async def test_update_sends_blob_sha(server, client):
    server.add("PUT", f"/api/v1/repos/{REPO}/contents/notes.txt", json={})

    await client.contents.update(REPO, "notes.txt", ContentParams(message="Update notes", data=b"bye\n", blob_id="b10b"))

    sent = json.loads(server.last.content)
    assert sent["sha"] == "b10b"
    assert "branch" not in sent
    assert "author" not in sent


@pytest.mark.asyncio
async def test_delete(server, client):
    server.add("DELETE", f"/api/v1/repos/{REPO}/contents/notes.txt", json={})

    await client.contents.delete(REPO, "notes.txt", ContentParams(message="Remove notes", sha="b10b"))

    request = server.last
    assert request.method == "DELETE"
    assert json.loads(request.content) == {"sha": "b10b", "message": "Remove notes"}


@pytest.mark.asyncio
async def test_find_escapes_path(server, client):
    server.add("GET", f"/api/v1/repos/{REPO}/raw/main/docs/a#b.md", content=b"# anchors")

    content = await client.contents.find(REPO, "docs/a#b.md", "main")

    assert content.data == b"# anchors"
    assert server.last.url.raw_path == f"/api/v1/repos/{REPO}/raw/main/docs/a%23b.md".encode()


@pytest.mark.asyncio
async def test_find_escapes_spaces_and_query_characters(server, client):
    server.add("GET", f"/api/v1/repos/{REPO}/raw/main/my notes?.txt", content=b"draft")

    content = await client.contents.find(REPO, "my notes?.txt", "main")

    assert content.data == b"draft"
    assert server.last.url.query == b""


@pytest.mark.asyncio
@pytest.mark.parametrize("ref", ["refs/heads/main", "refs/tags/main"])
async def test_find_trims_qualified_ref(server, client, ref):
    server.add("GET", f"/api/v1/repos/{REPO}/raw/main/README.md", content=b"hello")

    content = await client.contents.find(REPO, "README.md", ref)

    assert content.data == b"hello"


@pytest.mark.asyncio
async def test_list_trims_qualified_ref(server, client):
    server.add("GET", f"/api/v1/repos/{REPO}/contents/docs", json=[])

    await client.contents.list(REPO, "docs", "refs/heads/dev", ListOptions())

    assert server.last.url.params["ref"] == "dev"
