"""
Gitea user service.
"""

from typing import List, Optional

from ...config import ClientConfig
from ...scm import services
from ...scm.errors import NotSupportedError
from ...scm.output import DecodeInto
from ...scm.types import User
from . import models
from .gitea import Wrapper


class UserService(services.UserService):
    """Gitea implementation of UserService"""

    def __init__(self, client: Wrapper, config: ClientConfig):
        self.client = client
        self.config = config

    async def find(self) -> User:
        out = DecodeInto(models.User)
        await self.client.do("GET", "api/v1/user", out=out)
        return convert_user(out.value)

    async def find_login(self, login: str) -> User:
        out = DecodeInto(models.User)
        await self.client.do("GET", f"api/v1/users/{login}", out=out)
        return convert_user(out.value)

    async def find_email(self) -> str:
        user = await self.find()
        return user.email

    async def list_invitations(self) -> List[dict]:
        raise NotSupportedError("Gitea has no repository invitations")

    async def accept_invitation(self, invitation_id: int) -> None:
        raise NotSupportedError("Gitea has no repository invitations")


def convert_user(src: Optional[models.User]) -> User:
    """Convert a Gitea user; a missing user becomes an empty User"""
    if src is None:
        return User()
    return User(
        id=src.id,
        login=src.login or src.username,
        name=src.full_name,
        email=src.email,
        avatar=src.avatar_url,
        link=src.html_url,
        created=src.created,
    )
