"""
Gitea issue service.
"""

import logging
from typing import List, Optional

from ...config import ClientConfig
from ...scm import services
from ...scm.errors import NotSupportedError
from ...scm.output import DecodeInto
from ...scm.types import (
    Comment,
    CommentInput,
    Issue,
    IssueInput,
    IssueListOptions,
    Label,
    ListOptions,
)
from . import models
from .gitea import Wrapper, encode_issue_list_options, encode_list_options, with_query
from .repo import convert_label
from .user import convert_user

logger = logging.getLogger(__name__)

# Color given to labels created on the fly by add_label
DEFAULT_LABEL_COLOR = "#00aabb"


class IssueService(services.IssueService):
    """Gitea implementation of IssueService"""

    def __init__(self, client: Wrapper, config: ClientConfig):
        self.client = client
        self.config = config

    async def find(self, repo: str, number: int) -> Issue:
        out = DecodeInto(models.Issue)
        await self.client.do("GET", f"api/v1/repos/{repo}/issues/{number}", out=out)
        return convert_issue(out.value)

    async def find_comment(self, repo: str, number: int, comment_id: int) -> Comment:
        out = DecodeInto(models.Comment)
        await self.client.do("GET", f"api/v1/repos/{repo}/issues/comments/{comment_id}", out=out)
        return convert_comment(out.value)

    async def list(self, repo: str, opts: IssueListOptions) -> List[Issue]:
        out = DecodeInto(List[models.Issue])
        path = with_query(f"api/v1/repos/{repo}/issues", **encode_issue_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_issue(issue) for issue in out.value]

    async def list_comments(self, repo: str, number: int, opts: ListOptions) -> List[Comment]:
        # Gitea paginates issue comments by "since"/"before", not by page
        out = DecodeInto(List[models.Comment])
        await self.client.do("GET", f"api/v1/repos/{repo}/issues/{number}/comments", out=out)
        return [convert_comment(comment) for comment in out.value]

    async def list_labels(self, repo: str, number: int, opts: ListOptions) -> List[Label]:
        out = DecodeInto(List[models.Label])
        path = with_query(f"api/v1/repos/{repo}/issues/{number}/labels", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_label(label) for label in out.value]

    async def list_events(self, repo: str, number: int, opts: ListOptions) -> List[dict]:
        raise NotSupportedError("Gitea does not expose issue events")

    async def create(self, repo: str, data: IssueInput) -> Issue:
        payload = models.CreateIssueOption(title=data.title, body=data.body)
        out = DecodeInto(models.Issue)
        await self.client.do("POST", f"api/v1/repos/{repo}/issues", payload, out)
        return convert_issue(out.value)

    async def create_comment(self, repo: str, number: int, data: CommentInput) -> Comment:
        payload = models.CreateIssueCommentOption(body=data.body)
        out = DecodeInto(models.Comment)
        await self.client.do("POST", f"api/v1/repos/{repo}/issues/{number}/comments", payload, out)
        return convert_comment(out.value)

    async def edit_comment(self, repo: str, number: int, comment_id: int, data: CommentInput) -> Comment:
        payload = models.CreateIssueCommentOption(body=data.body)
        out = DecodeInto(models.Comment)
        await self.client.do("PATCH", f"api/v1/repos/{repo}/issues/comments/{comment_id}", payload, out)
        return convert_comment(out.value)

    async def delete_comment(self, repo: str, number: int, comment_id: int) -> None:
        await self.client.do("DELETE", f"api/v1/repos/{repo}/issues/comments/{comment_id}")

    async def add_label(self, repo: str, number: int, label: str) -> None:
        label_id = await self._find_label_id(repo, label)
        if label_id is None:
            logger.debug(f"Label '{label}' not found in {repo}, creating it")
            label_id = await self._create_label(repo, label)

        payload = models.IssueLabelsOption(labels=[label_id])
        await self.client.do("POST", f"api/v1/repos/{repo}/issues/{number}/labels", payload)

    async def delete_label(self, repo: str, number: int, label: str) -> None:
        label_id = await self._find_label_id(repo, label)
        if label_id is None:
            return
        await self.client.do("DELETE", f"api/v1/repos/{repo}/issues/{number}/labels/{label_id}")

    async def close(self, repo: str, number: int) -> None:
        await self._edit(repo, number, models.EditIssueOption(state="closed"))

    async def reopen(self, repo: str, number: int) -> None:
        await self._edit(repo, number, models.EditIssueOption(state="open"))

    async def lock(self, repo: str, number: int) -> None:
        raise NotSupportedError("Gitea does not support locking issues through the API")

    async def unlock(self, repo: str, number: int) -> None:
        raise NotSupportedError("Gitea does not support locking issues through the API")

    async def assign(self, repo: str, number: int, logins: List[str]) -> None:
        issue = await self.find(repo, number)
        assignees = [user.login for user in issue.assignees]
        for login in logins:
            if login not in assignees:
                assignees.append(login)
        await self._edit(repo, number, models.EditIssueOption(assignees=assignees))

    async def unassign(self, repo: str, number: int, logins: List[str]) -> None:
        issue = await self.find(repo, number)
        assignees = [user.login for user in issue.assignees if user.login not in logins]
        await self._edit(repo, number, models.EditIssueOption(assignees=assignees))

    async def _edit(self, repo: str, number: int, payload: models.EditIssueOption) -> None:
        await self.client.do("PATCH", f"api/v1/repos/{repo}/issues/{number}", payload)

    async def _find_label_id(self, repo: str, name: str) -> Optional[int]:
        """Look up a repository label by name"""
        out = DecodeInto(List[models.Label])
        await self.client.do("GET", f"api/v1/repos/{repo}/labels", out=out)
        for label in out.value:
            if label.name == name:
                return label.id
        return None

    async def _create_label(self, repo: str, name: str) -> int:
        payload = models.CreateLabelOption(name=name, color=DEFAULT_LABEL_COLOR)
        out = DecodeInto(models.Label)
        await self.client.do("POST", f"api/v1/repos/{repo}/labels", payload, out)
        return out.value.id


# ============================================================================
# Converters
# ============================================================================

def convert_issue(src: models.Issue) -> Issue:
    return Issue(
        number=src.number,
        title=src.title,
        body=src.body,
        link=src.html_url,
        labels=[label.name for label in src.labels or []],
        closed=src.state == "closed",
        locked=src.is_locked,
        author=convert_user(src.user),
        assignees=[convert_user(user) for user in src.assignees or []],
        pull_request=src.pull_request is not None,
        created=src.created_at,
        updated=src.updated_at,
    )


def convert_comment(src: models.Comment) -> Comment:
    return Comment(
        id=src.id,
        body=src.body,
        author=convert_user(src.user),
        link=src.html_url,
        created=src.created_at,
        updated=src.updated_at,
    )
