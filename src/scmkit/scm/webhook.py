"""
Provider-neutral webhook events.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from .types import Comment, Commit, Issue, PullRequest, Reference, Repository, User


class Action(Enum):
    """What happened to the resource a webhook describes"""
    UNKNOWN = "unknown"
    CREATE = "created"
    UPDATE = "updated"
    DELETE = "deleted"
    OPEN = "opened"
    REOPEN = "reopened"
    CLOSE = "closed"
    LABEL = "labeled"
    UNLABEL = "unlabeled"
    SYNC = "synchronized"
    MERGE = "merged"
    EDITED = "edited"
    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"
    REVIEW_REQUESTED = "review_requested"
    REVIEW_REQUEST_REMOVED = "review_request_removed"
    PUBLISHED = "published"
    SUBMITTED = "submitted"


@dataclass
class Release:
    """A release attached to a tag"""
    id: int = 0
    title: str = ""
    description: str = ""
    link: str = ""
    tag: str = ""
    commitish: str = ""
    draft: bool = False
    prerelease: bool = False
    created: Optional[datetime] = None
    published: Optional[datetime] = None


@dataclass
class Webhook:
    """Base class for parsed webhook deliveries"""
    repo: Repository = field(default_factory=Repository)
    sender: User = field(default_factory=User)

    @property
    def kind(self) -> str:
        """Event kind, e.g. "push" or "pull_request\""""
        return "unknown"


@dataclass
class PushHook(Webhook):
    """Commits pushed to a branch or tag"""
    ref: str = ""
    base_ref: str = ""
    before: str = ""
    after: str = ""
    compare: str = ""
    commit: Commit = field(default_factory=Commit)
    commits: List[Commit] = field(default_factory=list)

    @property
    def kind(self) -> str:
        return "push"


@dataclass
class BranchHook(Webhook):
    """A branch was created or deleted"""
    ref: Reference = field(default_factory=Reference)
    action: Action = Action.UNKNOWN

    @property
    def kind(self) -> str:
        return "branch"


@dataclass
class TagHook(Webhook):
    """A tag was created or deleted"""
    ref: Reference = field(default_factory=Reference)
    action: Action = Action.UNKNOWN

    @property
    def kind(self) -> str:
        return "tag"


@dataclass
class IssueHook(Webhook):
    """An issue changed"""
    action: Action = Action.UNKNOWN
    issue: Issue = field(default_factory=Issue)

    @property
    def kind(self) -> str:
        return "issue"


@dataclass
class IssueCommentHook(Webhook):
    """A comment on an issue changed"""
    action: Action = Action.UNKNOWN
    issue: Issue = field(default_factory=Issue)
    comment: Comment = field(default_factory=Comment)

    @property
    def kind(self) -> str:
        return "issue_comment"


@dataclass
class PullRequestHook(Webhook):
    """A pull request changed"""
    action: Action = Action.UNKNOWN
    pull_request: PullRequest = field(default_factory=PullRequest)
    label: str = ""

    @property
    def kind(self) -> str:
        return "pull_request"


@dataclass
class PullRequestCommentHook(Webhook):
    """A comment on a pull request changed"""
    action: Action = Action.UNKNOWN
    pull_request: PullRequest = field(default_factory=PullRequest)
    comment: Comment = field(default_factory=Comment)

    @property
    def kind(self) -> str:
        return "pull_request_comment"


@dataclass
class ReleaseHook(Webhook):
    """A release changed"""
    action: Action = Action.UNKNOWN
    release: Release = field(default_factory=Release)

    @property
    def kind(self) -> str:
        return "release"
