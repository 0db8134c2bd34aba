"""
Gitea pull request service.

Pull requests share their comments and labels with the issue of the same
number, so those operations are delegated to the issue service.
"""

from typing import List, Optional

from ...config import ClientConfig
from ...scm import services
from ...scm.output import DecodeInto
from ...scm.types import (
    Change,
    Comment,
    CommentInput,
    Commit,
    Label,
    ListOptions,
    PullRequest,
    PullRequestBranch,
    PullRequestInput,
    PullRequestListOptions,
    PullRequestMergeOptions,
)
from . import models
from .git import convert_commit
from .gitea import Wrapper, encode_list_options, encode_pull_request_list_options, with_query
from .issue import IssueService
from .repo import convert_label, convert_repository
from .user import convert_user


class PullRequestService(services.PullRequestService):
    """Gitea implementation of PullRequestService"""

    def __init__(self, client: Wrapper, config: ClientConfig, issues: Optional[IssueService] = None):
        self.client = client
        self.config = config
        self.issues = issues or IssueService(client, config)

    async def find(self, repo: str, number: int) -> PullRequest:
        out = DecodeInto(models.PullRequest)
        await self.client.do("GET", f"api/v1/repos/{repo}/pulls/{number}", out=out)
        return convert_pull_request(out.value)

    async def list(self, repo: str, opts: PullRequestListOptions) -> List[PullRequest]:
        out = DecodeInto(List[models.PullRequest])
        path = with_query(f"api/v1/repos/{repo}/pulls", **encode_pull_request_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_pull_request(pr) for pr in out.value]

    async def list_changes(self, repo: str, number: int, opts: ListOptions) -> List[Change]:
        out = DecodeInto(List[models.ChangedFile])
        path = with_query(f"api/v1/repos/{repo}/pulls/{number}/files", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_changed_file(file) for file in out.value]

    async def list_commits(self, repo: str, number: int, opts: ListOptions) -> List[Commit]:
        out = DecodeInto(List[models.Commit])
        path = with_query(f"api/v1/repos/{repo}/pulls/{number}/commits", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_commit(commit) for commit in out.value]

    async def list_comments(self, repo: str, number: int, opts: ListOptions) -> List[Comment]:
        return await self.issues.list_comments(repo, number, opts)

    async def list_labels(self, repo: str, number: int, opts: ListOptions) -> List[Label]:
        return await self.issues.list_labels(repo, number, opts)

    async def create(self, repo: str, data: PullRequestInput) -> PullRequest:
        payload = models.CreatePullRequestOption(
            title=data.title,
            body=data.body,
            head=data.source,
            base=data.target,
        )
        out = DecodeInto(models.PullRequest)
        await self.client.do("POST", f"api/v1/repos/{repo}/pulls", payload, out)
        return convert_pull_request(out.value)

    async def update(self, repo: str, number: int, data: PullRequestInput) -> PullRequest:
        payload = models.EditPullRequestOption(
            title=data.title or None,
            body=data.body or None,
            base=data.target or None,
        )
        out = DecodeInto(models.PullRequest)
        await self.client.do("PATCH", f"api/v1/repos/{repo}/pulls/{number}", payload, out)
        return convert_pull_request(out.value)

    async def create_comment(self, repo: str, number: int, data: CommentInput) -> Comment:
        return await self.issues.create_comment(repo, number, data)

    async def edit_comment(self, repo: str, number: int, comment_id: int, data: CommentInput) -> Comment:
        return await self.issues.edit_comment(repo, number, comment_id, data)

    async def delete_comment(self, repo: str, number: int, comment_id: int) -> None:
        await self.issues.delete_comment(repo, number, comment_id)

    async def add_label(self, repo: str, number: int, label: str) -> None:
        await self.issues.add_label(repo, number, label)

    async def delete_label(self, repo: str, number: int, label: str) -> None:
        await self.issues.delete_label(repo, number, label)

    async def merge(self, repo: str, number: int, options: PullRequestMergeOptions) -> None:
        payload = models.MergePullRequestOption(
            do=options.method.value,
            merge_title=options.commit_title or None,
            delete_branch_after_merge=options.delete_source_branch,
        )
        await self.client.do("POST", f"api/v1/repos/{repo}/pulls/{number}/merge", payload)

    async def close(self, repo: str, number: int) -> None:
        payload = models.EditPullRequestOption(state="closed")
        await self.client.do("PATCH", f"api/v1/repos/{repo}/pulls/{number}", payload)

    async def reopen(self, repo: str, number: int) -> None:
        payload = models.EditPullRequestOption(state="open")
        await self.client.do("PATCH", f"api/v1/repos/{repo}/pulls/{number}", payload)

    async def request_review(self, repo: str, number: int, logins: List[str]) -> None:
        payload = models.PullReviewRequestOptions(reviewers=logins)
        await self.client.do("POST", f"api/v1/repos/{repo}/pulls/{number}/requested_reviewers", payload)

    async def unrequest_review(self, repo: str, number: int, logins: List[str]) -> None:
        payload = models.PullReviewRequestOptions(reviewers=logins)
        await self.client.do("DELETE", f"api/v1/repos/{repo}/pulls/{number}/requested_reviewers", payload)


# ============================================================================
# Converters
# ============================================================================

def convert_pull_request(src: models.PullRequest) -> PullRequest:
    base = convert_branch_info(src.base)
    head = convert_branch_info(src.head)
    fork = ""
    if src.head is not None and src.head.repo is not None:
        fork = src.head.repo.full_name

    return PullRequest(
        number=src.number,
        title=src.title,
        body=src.body,
        sha=head.sha,
        ref=f"refs/pull/{src.number}/head",
        source=head.ref,
        target=base.ref,
        base=base,
        head=head,
        fork=fork,
        link=src.html_url,
        diff=src.diff_url,
        draft=src.draft,
        closed=src.state == "closed",
        merged=src.merged,
        mergeable=src.mergeable,
        merge_sha=src.merge_commit_sha or "",
        author=convert_user(src.user),
        assignees=[convert_user(user) for user in src.assignees or []],
        labels=[convert_label(label) for label in src.labels or []],
        created=src.created_at,
        updated=src.updated_at,
    )


def convert_branch_info(src: Optional[models.PRBranchInfo]) -> PullRequestBranch:
    if src is None:
        return PullRequestBranch()
    return PullRequestBranch(
        ref=src.ref,
        sha=src.sha,
        repo=convert_repository(src.repo),
    )


def convert_changed_file(src: models.ChangedFile) -> Change:
    return Change(
        path=src.filename,
        previous_path=src.previous_filename,
        added=src.status == "added",
        renamed=src.status == "renamed",
        deleted=src.status == "deleted",
        additions=src.additions,
        deletions=src.deletions,
        changes=src.changes,
    )
