"""
Gitea repository service.

Covers repositories, webhooks, commit statuses, labels and collaborators.
"""

from typing import List, Optional

from ...config import ClientConfig
from ...scm import services
from ...scm.errors import StatusError
from ...scm.output import DecodeInto
from ...scm.types import (
    Hook,
    HookEvents,
    HookInput,
    Label,
    ListOptions,
    Perm,
    Repository,
    RepositoryInput,
    State,
    Status,
    StatusInput,
    User,
)
from . import models
from .gitea import Wrapper, encode_list_options, escape_path, with_query
from .user import convert_user


class RepositoryService(services.RepositoryService):
    """Gitea implementation of RepositoryService"""

    def __init__(self, client: Wrapper, config: ClientConfig):
        self.client = client
        self.config = config

    async def find(self, repo: str) -> Repository:
        out = DecodeInto(models.Repository)
        await self.client.do("GET", f"api/v1/repos/{repo}", out=out)
        return convert_repository(out.value)

    async def find_perms(self, repo: str) -> Perm:
        found = await self.find(repo)
        return found.perm or Perm()

    async def find_hook(self, repo: str, hook_id: str) -> Hook:
        out = DecodeInto(models.Hook)
        await self.client.do("GET", f"api/v1/repos/{repo}/hooks/{hook_id}", out=out)
        return convert_hook(out.value)

    async def list(self, opts: ListOptions) -> List[Repository]:
        path = with_query("api/v1/user/repos", **encode_list_options(opts))
        return await self._list_repositories(path)

    async def list_organisation(self, org: str, opts: ListOptions) -> List[Repository]:
        path = with_query(f"api/v1/orgs/{org}/repos", **encode_list_options(opts))
        return await self._list_repositories(path)

    async def list_user(self, user: str, opts: ListOptions) -> List[Repository]:
        path = with_query(f"api/v1/users/{user}/repos", **encode_list_options(opts))
        return await self._list_repositories(path)

    async def list_hooks(self, repo: str, opts: ListOptions) -> List[Hook]:
        out = DecodeInto(List[models.Hook])
        path = with_query(f"api/v1/repos/{repo}/hooks", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_hook(hook) for hook in out.value]

    async def list_status(self, repo: str, ref: str, opts: ListOptions) -> List[Status]:
        out = DecodeInto(List[models.Status])
        path = with_query(f"api/v1/repos/{repo}/statuses/{escape_path(ref)}", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_status(status) for status in out.value]

    async def list_labels(self, repo: str, opts: ListOptions) -> List[Label]:
        out = DecodeInto(List[models.Label])
        path = with_query(f"api/v1/repos/{repo}/labels", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_label(label) for label in out.value]

    async def list_collaborators(self, repo: str, opts: ListOptions) -> List[User]:
        out = DecodeInto(List[models.User])
        path = with_query(f"api/v1/repos/{repo}/collaborators", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_user(user) for user in out.value]

    async def is_collaborator(self, repo: str, user: str) -> bool:
        # Gitea answers 204 for collaborators and 404 otherwise
        try:
            await self.client.do("GET", f"api/v1/repos/{repo}/collaborators/{user}")
        except StatusError as e:
            if e.status == 404:
                return False
            raise
        return True

    async def add_collaborator(self, repo: str, user: str, permission: str) -> None:
        payload = models.AddCollaboratorOption(permission=permission)
        await self.client.do("PUT", f"api/v1/repos/{repo}/collaborators/{user}", payload)

    async def create(self, data: RepositoryInput) -> Repository:
        payload = models.CreateRepoOption(
            name=data.name,
            description=data.description,
            private=data.private,
        )
        # An empty namespace means the authenticated user
        path = "api/v1/user/repos"
        if data.namespace and data.namespace != await self._authenticated_login():
            path = f"api/v1/orgs/{data.namespace}/repos"

        out = DecodeInto(models.Repository)
        await self.client.do("POST", path, payload, out)
        return convert_repository(out.value)

    async def delete(self, repo: str) -> None:
        await self.client.do("DELETE", f"api/v1/repos/{repo}")

    async def create_hook(self, repo: str, data: HookInput) -> Hook:
        payload = models.CreateHookOption(
            config=models.CreateHookOptionConfig(
                url=data.target,
                secret=data.secret or None,
            ),
            events=convert_hook_events(data.events) + list(data.native_events),
        )
        out = DecodeInto(models.Hook)
        await self.client.do("POST", f"api/v1/repos/{repo}/hooks", payload, out)
        return convert_hook(out.value)

    async def delete_hook(self, repo: str, hook_id: str) -> None:
        await self.client.do("DELETE", f"api/v1/repos/{repo}/hooks/{hook_id}")

    async def create_status(self, repo: str, ref: str, data: StatusInput) -> Status:
        payload = models.CreateStatusOption(
            state=convert_from_state(data.state),
            target_url=data.target,
            description=data.desc,
            context=data.label,
        )
        out = DecodeInto(models.Status)
        await self.client.do("POST", f"api/v1/repos/{repo}/statuses/{escape_path(ref)}", payload, out)
        return convert_status(out.value)

    async def _list_repositories(self, path: str) -> List[Repository]:
        out = DecodeInto(List[models.Repository])
        await self.client.do("GET", path, out=out)
        return [convert_repository(repo) for repo in out.value]

    async def _authenticated_login(self) -> str:
        out = DecodeInto(models.User)
        await self.client.do("GET", "api/v1/user", out=out)
        return out.value.login or out.value.username


# ============================================================================
# Converters
# ============================================================================

def convert_repository(src: Optional[models.Repository]) -> Repository:
    if src is None:
        return Repository()
    owner = convert_user(src.owner)
    return Repository(
        id=str(src.id),
        namespace=owner.login,
        name=src.name,
        full_name=src.full_name,
        perm=convert_perm(src.permissions),
        branch=src.default_branch,
        private=src.private,
        archived=src.archived,
        clone=src.clone_url,
        clone_ssh=src.ssh_url,
        link=src.html_url,
        created=src.created_at,
        updated=src.updated_at,
    )


def convert_perm(src: Optional[models.Permission]) -> Optional[Perm]:
    if src is None:
        return None
    return Perm(pull=src.pull, push=src.push, admin=src.admin)


def convert_label(src: models.Label) -> Label:
    return Label(
        id=src.id,
        name=src.name,
        color=src.color,
        description=src.description,
        url=src.url,
    )


def convert_hook(src: models.Hook) -> Hook:
    return Hook(
        id=str(src.id),
        target=src.config.url,
        events=list(src.events),
        active=src.active,
    )


def convert_hook_events(events: HookEvents) -> List[str]:
    """Map neutral hook events to Gitea event names"""
    names = []
    if events.push:
        names.append("push")
    if events.branch or events.tag:
        names.extend(["create", "delete"])
    if events.issue:
        names.append("issues")
    if events.issue_comment or events.pull_request_comment:
        names.append("issue_comment")
    if events.pull_request:
        names.append("pull_request")
    if events.release:
        names.append("release")
    if events.review:
        names.extend(["pull_request_review_approved", "pull_request_review_rejected"])
    if events.review_comment:
        names.append("pull_request_review_comment")
    return names


# Gitea has no "running" or "canceled" state
_STATE_TO_GITEA = {
    State.PENDING: "pending",
    State.RUNNING: "pending",
    State.SUCCESS: "success",
    State.FAILURE: "failure",
    State.CANCELED: "error",
    State.ERROR: "error",
}

_STATE_FROM_GITEA = {
    "pending": State.PENDING,
    "success": State.SUCCESS,
    "failure": State.FAILURE,
    "error": State.ERROR,
    "warning": State.FAILURE,
}


def convert_from_state(state: State) -> str:
    return _STATE_TO_GITEA.get(state, "warning")


def convert_state(state: str) -> State:
    return _STATE_FROM_GITEA.get(state, State.UNKNOWN)


def convert_status(src: models.Status) -> Status:
    return Status(
        state=convert_state(src.status),
        label=src.context,
        desc=src.description,
        target=src.target_url,
        link=src.url,
    )
