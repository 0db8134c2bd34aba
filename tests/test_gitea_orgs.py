"""
Tests for the Gitea organization service.
"""

import pytest

from scmkit.scm.errors import StatusError
from scmkit.scm.types import ListOptions

from fixtures.gitea import make_user


@pytest.mark.asyncio
async def test_find(server, client):
    server.add("GET", "/api/v1/orgs/acme", json={
        "id": 9,
        "username": "acme",
        "full_name": "Acme Corp",
        "avatar_url": "https://gitea.example.com/avatars/9",
        "website": "https://acme.example.com",
    })

    org = await client.organizations.find("acme")

    assert org.id == 9
    assert org.name == "acme"
    assert org.full_name == "Acme Corp"
    assert org.link == "https://acme.example.com"


@pytest.mark.asyncio
async def test_list(server, client):
    server.add("GET", "/api/v1/user/orgs", json=[{"id": 9, "username": "acme"}])

    orgs = await client.organizations.list(ListOptions(page=3))

    assert [org.name for org in orgs] == ["acme"]
    assert server.last.url.params["page"] == "3"


@pytest.mark.asyncio
async def test_list_teams(server, client):
    server.add("GET", "/api/v1/orgs/acme/teams", json=[{"id": 4, "name": "Owners", "description": "Org owners"}])

    teams = await client.organizations.list_teams("acme", ListOptions())

    assert teams[0].id == 4
    assert teams[0].slug == "owners"


@pytest.mark.asyncio
async def test_list_members(server, client):
    server.add("GET", "/api/v1/teams/4/members", json=[make_user(), make_user(id=2, login="hubot")])
    server.add("GET", "/api/v1/orgs/acme/members", json=[make_user()])

    team_members = await client.organizations.list_team_members(4, "member", ListOptions())
    org_members = await client.organizations.list_org_members("acme", ListOptions())

    assert [m.login for m in team_members] == ["octocat", "hubot"]
    assert [m.login for m in org_members] == ["octocat"]


@pytest.mark.asyncio
async def test_is_member(server, client):
    server.add("GET", "/api/v1/orgs/acme/members/octocat", status=204)

    assert await client.organizations.is_member("acme", "octocat")
    assert not await client.organizations.is_member("acme", "stranger")


@pytest.mark.asyncio
async def test_is_member_unauthorized(server, client):
    server.add("GET", "/api/v1/orgs/acme/members/octocat", status=401, json={"message": "token required"})

    with pytest.raises(StatusError):
        await client.organizations.is_member("acme", "octocat")


@pytest.mark.asyncio
@pytest.mark.parametrize("permissions, role, admin", [
    ({"is_owner": True, "is_admin": True, "can_read": True, "can_write": True}, "admin", True),
    ({"can_read": True, "can_write": True}, "member", False),
    ({}, "", False),
])
async def test_membership(server, client, permissions, role, admin):
    server.add("GET", "/api/v1/users/octocat/orgs/acme/permissions", json=permissions)

    membership = await client.organizations.find_membership("acme", "octocat")

    assert membership.role == role
    assert membership.active == bool(permissions)
    assert await client.organizations.is_admin("acme", "octocat") == admin
