"""
Gitea organization service.
"""

from typing import List

from ...config import ClientConfig
from ...scm import services
from ...scm.errors import StatusError
from ...scm.output import DecodeInto
from ...scm.types import ListOptions, Membership, Organization, Team, TeamMember
from . import models
from .gitea import Wrapper, encode_list_options, with_query


class OrganizationService(services.OrganizationService):
    """Gitea implementation of OrganizationService"""

    def __init__(self, client: Wrapper, config: ClientConfig):
        self.client = client
        self.config = config

    async def find(self, name: str) -> Organization:
        out = DecodeInto(models.Organization)
        await self.client.do("GET", f"api/v1/orgs/{name}", out=out)
        return convert_organization(out.value)

    async def list(self, opts: ListOptions) -> List[Organization]:
        out = DecodeInto(List[models.Organization])
        path = with_query("api/v1/user/orgs", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_organization(org) for org in out.value]

    async def list_teams(self, org: str, opts: ListOptions) -> List[Team]:
        out = DecodeInto(List[models.Team])
        path = with_query(f"api/v1/orgs/{org}/teams", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_team(team) for team in out.value]

    async def list_team_members(self, team_id: int, role: str, opts: ListOptions) -> List[TeamMember]:
        # Gitea teams have no member roles, role is ignored
        out = DecodeInto(List[models.User])
        path = with_query(f"api/v1/teams/{team_id}/members", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [TeamMember(login=user.login or user.username) for user in out.value]

    async def list_org_members(self, org: str, opts: ListOptions) -> List[TeamMember]:
        out = DecodeInto(List[models.User])
        path = with_query(f"api/v1/orgs/{org}/members", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [TeamMember(login=user.login or user.username) for user in out.value]

    async def is_member(self, org: str, user: str) -> bool:
        # Gitea answers 204 for members and 404 otherwise
        try:
            await self.client.do("GET", f"api/v1/orgs/{org}/members/{user}")
        except StatusError as e:
            if e.status == 404:
                return False
            raise
        return True

    async def is_admin(self, org: str, user: str) -> bool:
        membership = await self.find_membership(org, user)
        return membership.role == "admin"

    async def find_membership(self, org: str, user: str) -> Membership:
        out = DecodeInto(models.OrgPermissions)
        await self.client.do("GET", f"api/v1/users/{user}/orgs/{org}/permissions", out=out)
        return convert_membership(out.value)


# ============================================================================
# Converters
# ============================================================================

def convert_organization(src: models.Organization) -> Organization:
    return Organization(
        id=src.id,
        name=src.username or src.name,
        full_name=src.full_name,
        avatar=src.avatar_url,
        link=src.website,
    )


def convert_team(src: models.Team) -> Team:
    return Team(
        id=src.id,
        name=src.name,
        slug=src.name.lower(),
        description=src.description,
    )


def convert_membership(src: models.OrgPermissions) -> Membership:
    active = src.can_read or src.can_write or src.is_admin or src.is_owner
    if src.is_owner or src.is_admin:
        role = "admin"
    elif active:
        role = "member"
    else:
        role = ""
    return Membership(active=active, role=role)
