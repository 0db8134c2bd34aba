"""
Provider-neutral resource types.

Drivers convert provider JSON into these dataclasses so callers see the
same shapes whatever the hosting provider.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class State(Enum):
    """Commit status state"""
    UNKNOWN = "unknown"
    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILURE = "failure"
    CANCELED = "canceled"
    ERROR = "error"


class MergeMethod(Enum):
    """How a pull request is merged"""
    MERGE = "merge"
    REBASE = "rebase"
    REBASE_MERGE = "rebase-merge"
    SQUASH = "squash"


class ContentKind(Enum):
    """Kind of entry in a directory listing"""
    UNSUPPORTED = "unsupported"
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    GITLINK = "gitlink"


# ============================================================================
# Users and organizations
# ============================================================================

@dataclass
class User:
    """A user account"""
    id: int = 0
    login: str = ""
    name: str = ""
    email: str = ""
    avatar: str = ""
    link: str = ""
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


@dataclass
class Perm:
    """Repository permissions of the authenticated user"""
    pull: bool = False
    push: bool = False
    admin: bool = False


@dataclass
class Organization:
    """An organization"""
    id: int = 0
    name: str = ""
    full_name: str = ""
    avatar: str = ""
    link: str = ""
    perm: Optional[Perm] = None


@dataclass
class Team:
    """A team inside an organization"""
    id: int = 0
    name: str = ""
    slug: str = ""
    description: str = ""
    privacy: str = ""


@dataclass
class TeamMember:
    """A member of a team or organization"""
    login: str = ""
    is_admin: bool = False


@dataclass
class Membership:
    """A user's membership in an organization"""
    active: bool = False
    role: str = ""


# ============================================================================
# Repositories
# ============================================================================

@dataclass
class Repository:
    """A repository"""
    id: str = ""
    namespace: str = ""
    name: str = ""
    full_name: str = ""
    perm: Optional[Perm] = None
    branch: str = ""
    private: bool = False
    archived: bool = False
    clone: str = ""
    clone_ssh: str = ""
    link: str = ""
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


@dataclass
class RepositoryInput:
    """Parameters for creating a repository"""
    namespace: str
    name: str
    description: str = ""
    homepage: str = ""
    private: bool = False


@dataclass
class HookEvents:
    """Events a webhook subscribes to"""
    branch: bool = False
    deployment: bool = False
    issue: bool = False
    issue_comment: bool = False
    pull_request: bool = False
    pull_request_comment: bool = False
    push: bool = False
    release: bool = False
    review: bool = False
    review_comment: bool = False
    tag: bool = False


@dataclass
class Hook:
    """A repository webhook"""
    id: str = ""
    name: str = ""
    target: str = ""
    events: List[str] = field(default_factory=list)
    active: bool = False
    skip_verify: bool = False


@dataclass
class HookInput:
    """Parameters for creating a webhook"""
    target: str
    name: str = ""
    secret: str = ""
    events: HookEvents = field(default_factory=HookEvents)
    native_events: List[str] = field(default_factory=list)
    skip_verify: bool = False


@dataclass
class Status:
    """A commit status"""
    state: State = State.UNKNOWN
    label: str = ""
    desc: str = ""
    target: str = ""
    link: str = ""


@dataclass
class StatusInput:
    """Parameters for creating a commit status"""
    state: State
    label: str = ""
    desc: str = ""
    target: str = ""


@dataclass
class Label:
    """An issue or pull request label"""
    id: int = 0
    name: str = ""
    color: str = ""
    description: str = ""
    url: str = ""


# ============================================================================
# Git objects
# ============================================================================

@dataclass
class Reference:
    """A git reference (branch or tag)"""
    name: str = ""
    path: str = ""
    sha: str = ""


@dataclass
class Signature:
    """Author or committer of a commit"""
    name: str = ""
    email: str = ""
    date: Optional[datetime] = None
    login: str = ""
    avatar: str = ""


@dataclass
class Commit:
    """A git commit"""
    sha: str = ""
    message: str = ""
    tree: Optional[Reference] = None
    author: Signature = field(default_factory=Signature)
    committer: Signature = field(default_factory=Signature)
    link: str = ""


@dataclass
class Change:
    """A file changed by a commit or pull request"""
    path: str = ""
    previous_path: str = ""
    added: bool = False
    renamed: bool = False
    deleted: bool = False
    additions: int = 0
    deletions: int = 0
    changes: int = 0
    sha: str = ""
    blob_id: str = ""


# ============================================================================
# Contents
# ============================================================================

@dataclass
class Content:
    """A file and its raw contents"""
    path: str = ""
    data: bytes = b""
    sha: str = ""
    blob_id: str = ""


@dataclass
class ContentInfo:
    """An entry of a directory listing"""
    path: str = ""
    sha: str = ""
    blob_id: str = ""
    kind: ContentKind = ContentKind.UNSUPPORTED


@dataclass
class ContentParams:
    """Parameters for creating, updating or deleting a file"""
    message: str
    data: bytes = b""
    branch: str = ""
    ref: str = ""
    sha: str = ""
    blob_id: str = ""
    signature: Optional[Signature] = None


# ============================================================================
# Issues and pull requests
# ============================================================================

@dataclass
class Issue:
    """An issue"""
    number: int = 0
    title: str = ""
    body: str = ""
    link: str = ""
    labels: List[str] = field(default_factory=list)
    closed: bool = False
    locked: bool = False
    author: User = field(default_factory=User)
    assignees: List[User] = field(default_factory=list)
    pull_request: bool = False
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


@dataclass
class IssueInput:
    """Parameters for creating an issue"""
    title: str
    body: str = ""


@dataclass
class Comment:
    """A comment on an issue or pull request"""
    id: int = 0
    body: str = ""
    author: User = field(default_factory=User)
    link: str = ""
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


@dataclass
class CommentInput:
    """Parameters for creating or editing a comment"""
    body: str


@dataclass
class PullRequestBranch:
    """One side (base or head) of a pull request"""
    ref: str = ""
    sha: str = ""
    repo: Repository = field(default_factory=Repository)


@dataclass
class PullRequest:
    """A pull request"""
    number: int = 0
    title: str = ""
    body: str = ""
    sha: str = ""
    ref: str = ""
    source: str = ""
    target: str = ""
    base: PullRequestBranch = field(default_factory=PullRequestBranch)
    head: PullRequestBranch = field(default_factory=PullRequestBranch)
    fork: str = ""
    link: str = ""
    diff: str = ""
    draft: bool = False
    closed: bool = False
    merged: bool = False
    mergeable: bool = False
    merge_sha: str = ""
    author: User = field(default_factory=User)
    assignees: List[User] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


@dataclass
class PullRequestInput:
    """Parameters for creating or updating a pull request"""
    title: str = ""
    body: str = ""
    source: str = ""
    target: str = ""


@dataclass
class PullRequestMergeOptions:
    """Parameters for merging a pull request"""
    method: MergeMethod = MergeMethod.MERGE
    commit_title: str = ""
    delete_source_branch: bool = False


# ============================================================================
# Reviews
# ============================================================================

@dataclass
class Review:
    """A pull request review"""
    id: int = 0
    body: str = ""
    sha: str = ""
    state: str = ""
    link: str = ""
    author: User = field(default_factory=User)
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


@dataclass
class ReviewComment:
    """A line comment belonging to a review"""
    id: int = 0
    body: str = ""
    path: str = ""
    sha: str = ""
    line: int = 0
    link: str = ""
    author: User = field(default_factory=User)
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


@dataclass
class ReviewCommentInput:
    """A line comment submitted with a new review"""
    body: str
    path: str
    line: int


@dataclass
class ReviewInput:
    """Parameters for creating a review"""
    body: str = ""
    sha: str = ""
    event: str = ""
    comments: List[ReviewCommentInput] = field(default_factory=list)


@dataclass
class ReviewSubmitInput:
    """Parameters for submitting a pending review"""
    event: str
    body: str = ""


# ============================================================================
# List options
# ============================================================================

@dataclass
class ListOptions:
    """Pagination options"""
    page: int = 0
    size: int = 0


@dataclass
class IssueListOptions:
    """Options for listing issues"""
    page: int = 0
    size: int = 0
    open: bool = False
    closed: bool = False


@dataclass
class PullRequestListOptions:
    """Options for listing pull requests"""
    page: int = 0
    size: int = 0
    open: bool = False
    closed: bool = False
    labels: List[str] = field(default_factory=list)


@dataclass
class CommitListOptions:
    """Options for listing commits"""
    ref: str = ""
    path: str = ""
    page: int = 0
    size: int = 0
