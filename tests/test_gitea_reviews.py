"""
Tests for the Gitea review service.
"""

import json

import pytest

from scmkit.scm.types import ListOptions, ReviewCommentInput, ReviewInput, ReviewSubmitInput

from fixtures.gitea import make_user

REPO = "octocat/hello-world"


def make_review(**overrides):
    data = {
        "id": 8,
        "user": make_user(),
        "body": "Looks good",
        "commit_id": "c0ffee",
        "state": "APPROVED",
        "html_url": "https://gitea.example.com/octocat/hello-world/pulls/2#issuecomment-8",
        "submitted_at": "2024-03-06T12:00:00Z",
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_find(server, client):
    server.add("GET", f"/api/v1/repos/{REPO}/pulls/2/reviews/8", json=make_review())

    review = await client.reviews.find(REPO, 2, 8)

    assert review.id == 8
    assert review.state == "APPROVED"
    assert review.sha == "c0ffee"
    assert review.author.login == "octocat"


@pytest.mark.asyncio
async def test_list(server, client):
    server.add("GET", f"/api/v1/repos/{REPO}/pulls/2/reviews", json=[make_review(), make_review(id=9, state="COMMENT")])

    reviews = await client.reviews.list(REPO, 2, ListOptions())

    assert [review.state for review in reviews] == ["APPROVED", "COMMENT"]


@pytest.mark.asyncio
async def test_list_comments(server, client):
    server.add("GET", f"/api/v1/repos/{REPO}/pulls/2/reviews/8/comments", json=[
        {"id": 1, "body": "Typo", "path": "README.md", "position": 0, "original_position": 12, "user": make_user()},
    ])

    comments = await client.reviews.list_comments(REPO, 2, 8, ListOptions())

    assert comments[0].path == "README.md"
    assert comments[0].line == 12


@pytest.mark.asyncio
async def test_create(server, client):
    server.add("POST", f"/api/v1/repos/{REPO}/pulls/2/reviews", json=make_review(state="PENDING"))

    review = await client.reviews.create(REPO, 2, ReviewInput(
        body="A few notes",
        comments=[ReviewCommentInput(body="Typo", path="README.md", line=12)],
    ))

    assert review.state == "PENDING"
    assert json.loads(server.last.content) == {
        "body": "A few notes",
        "comments": [{"body": "Typo", "path": "README.md", "new_position": 12}],
    }


@pytest.mark.asyncio
async def test_submit(server, client):
    server.add("POST", f"/api/v1/repos/{REPO}/pulls/2/reviews/8", json=make_review())

    await client.reviews.submit(REPO, 2, 8, ReviewSubmitInput(event="APPROVED", body="Ship it"))

    assert json.loads(server.last.content) == {"body": "Ship it", "event": "APPROVED"}


@pytest.mark.asyncio
async def test_dismiss(server, client):
    server.add("POST", f"/api/v1/repos/{REPO}/pulls/2/reviews/8/dismissals", json=make_review(state="REQUEST_CHANGES"))

    await client.reviews.dismiss(REPO, 2, 8, "Outdated")

    assert json.loads(server.last.content) == {"message": "Outdated"}


@pytest.mark.asyncio
async def test_delete(server, client):
    server.add("DELETE", f"/api/v1/repos/{REPO}/pulls/2/reviews/8", status=204)

    await client.reviews.delete(REPO, 2, 8)

    assert server.last.method == "DELETE"
