"""
Gitea API wire models.

Describe the JSON Gitea sends and accepts (API v1). Unknown fields are
ignored so newer server versions keep decoding. Gitea reports unset
timestamps as "0001-01-01T00:00:00Z", which still parses as a datetime.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GiteaModel(BaseModel):
    """Base class for Gitea payloads"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ============================================================================
# Responses
# ============================================================================

class User(GiteaModel):
    id: int = 0
    login: str = ""
    username: str = ""
    full_name: str = ""
    email: str = ""
    avatar_url: str = ""
    html_url: str = ""
    is_admin: bool = False
    created: Optional[datetime] = None


class Permission(GiteaModel):
    admin: bool = False
    push: bool = False
    pull: bool = False


class Repository(GiteaModel):
    id: int = 0
    owner: Optional[User] = None
    name: str = ""
    full_name: str = ""
    description: str = ""
    private: bool = False
    fork: bool = False
    archived: bool = False
    html_url: str = ""
    ssh_url: str = ""
    clone_url: str = ""
    default_branch: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    permissions: Optional[Permission] = None


class Organization(GiteaModel):
    id: int = 0
    username: str = ""
    name: str = ""
    full_name: str = ""
    avatar_url: str = ""
    website: str = ""
    visibility: str = ""


class Team(GiteaModel):
    id: int = 0
    name: str = ""
    description: str = ""
    permission: str = ""
    includes_all_repositories: bool = False


class OrgPermissions(GiteaModel):
    can_create_repository: bool = False
    can_read: bool = False
    can_write: bool = False
    is_admin: bool = False
    is_owner: bool = False


class Label(GiteaModel):
    id: int = 0
    name: str = ""
    color: str = ""
    description: str = ""
    url: str = ""


class PullRequestMeta(GiteaModel):
    merged: bool = False
    merged_at: Optional[datetime] = None


class Issue(GiteaModel):
    id: int = 0
    number: int = 0
    user: Optional[User] = None
    title: str = ""
    body: str = ""
    html_url: str = ""
    labels: Optional[List[Label]] = None
    assignees: Optional[List[User]] = None
    state: str = ""
    is_locked: bool = False
    comments: int = 0
    pull_request: Optional[PullRequestMeta] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None


class Comment(GiteaModel):
    id: int = 0
    html_url: str = ""
    pull_request_url: str = ""
    issue_url: str = ""
    user: Optional[User] = None
    body: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PRBranchInfo(GiteaModel):
    label: str = ""
    ref: str = ""
    sha: str = ""
    repo_id: int = 0
    repo: Optional[Repository] = None


class PullRequest(GiteaModel):
    id: int = 0
    number: int = 0
    user: Optional[User] = None
    title: str = ""
    body: str = ""
    labels: Optional[List[Label]] = None
    assignees: Optional[List[User]] = None
    state: str = ""
    draft: bool = False
    html_url: str = ""
    diff_url: str = ""
    mergeable: bool = False
    merged: bool = False
    merged_at: Optional[datetime] = None
    merge_commit_sha: Optional[str] = None
    base: Optional[PRBranchInfo] = None
    head: Optional[PRBranchInfo] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None


class ChangedFile(GiteaModel):
    filename: str = ""
    previous_filename: str = ""
    status: str = ""
    additions: int = 0
    deletions: int = 0
    changes: int = 0


class CommitUser(GiteaModel):
    name: str = ""
    email: str = ""
    username: str = ""
    date: Optional[datetime] = None


class CommitMeta(GiteaModel):
    url: str = ""
    sha: str = ""


class RepoCommit(GiteaModel):
    url: str = ""
    author: Optional[CommitUser] = None
    committer: Optional[CommitUser] = None
    message: str = ""
    tree: Optional[CommitMeta] = None


class CommitAffectedFile(GiteaModel):
    filename: str = ""
    status: str = ""


class Commit(GiteaModel):
    url: str = ""
    sha: str = ""
    html_url: str = ""
    commit: Optional[RepoCommit] = None
    author: Optional[User] = None
    committer: Optional[User] = None
    parents: List[CommitMeta] = Field(default_factory=list)
    files: Optional[List[CommitAffectedFile]] = None


class PayloadUser(GiteaModel):
    name: str = ""
    email: str = ""
    username: str = ""


class PayloadCommit(GiteaModel):
    """Commit as embedded in branches and push payloads"""
    id: str = ""
    message: str = ""
    url: str = ""
    author: Optional[PayloadUser] = None
    committer: Optional[PayloadUser] = None
    timestamp: Optional[datetime] = None
    added: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)
    modified: List[str] = Field(default_factory=list)


class Branch(GiteaModel):
    name: str = ""
    commit: Optional[PayloadCommit] = None
    protected: bool = False


class Tag(GiteaModel):
    name: str = ""
    message: str = ""
    id: str = ""
    commit: Optional[CommitMeta] = None


class GitObject(GiteaModel):
    type: str = ""
    sha: str = ""
    url: str = ""


class Reference(GiteaModel):
    ref: str = ""
    url: str = ""
    object: Optional[GitObject] = None


class Compare(GiteaModel):
    total_commits: int = 0
    commits: List[Commit] = Field(default_factory=list)


class ContentsResponse(GiteaModel):
    name: str = ""
    path: str = ""
    sha: str = ""
    last_commit_sha: str = ""
    type: str = ""
    size: int = 0
    encoding: Optional[str] = None
    content: Optional[str] = None


class HookConfig(GiteaModel):
    url: str = ""
    content_type: str = ""


class Hook(GiteaModel):
    id: int = 0
    type: str = ""
    config: HookConfig = Field(default_factory=HookConfig)
    events: List[str] = Field(default_factory=list)
    active: bool = False


class Status(GiteaModel):
    id: int = 0
    status: str = ""
    target_url: str = ""
    description: str = ""
    context: str = ""
    url: str = ""
    creator: Optional[User] = None


class Review(GiteaModel):
    id: int = 0
    user: Optional[User] = None
    body: str = ""
    commit_id: str = ""
    state: str = ""
    html_url: str = ""
    submitted_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ReviewComment(GiteaModel):
    id: int = 0
    body: str = ""
    user: Optional[User] = None
    path: str = ""
    commit_id: str = ""
    position: int = 0
    original_position: int = 0
    html_url: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Release(GiteaModel):
    id: int = 0
    tag_name: str = ""
    target_commitish: str = ""
    name: str = ""
    body: str = ""
    html_url: str = ""
    draft: bool = False
    prerelease: bool = False
    created_at: Optional[datetime] = None
    published_at: Optional[datetime] = None


# ============================================================================
# Requests
# ============================================================================

class Identity(GiteaModel):
    name: str = ""
    email: str = ""


class CreateFileOptions(GiteaModel):
    content: str
    message: str
    branch: Optional[str] = None
    new_branch: Optional[str] = None
    sha: Optional[str] = None
    author: Optional[Identity] = None
    committer: Optional[Identity] = None


class DeleteFileOptions(GiteaModel):
    sha: str
    message: str
    branch: Optional[str] = None
    author: Optional[Identity] = None
    committer: Optional[Identity] = None


class CreateBranchOption(GiteaModel):
    new_branch_name: str
    old_ref_name: Optional[str] = None


class CreateIssueOption(GiteaModel):
    title: str
    body: str = ""


class EditIssueOption(GiteaModel):
    state: Optional[str] = None
    assignees: Optional[List[str]] = None


class CreateIssueCommentOption(GiteaModel):
    body: str


class IssueLabelsOption(GiteaModel):
    labels: List[int]


class CreateLabelOption(GiteaModel):
    name: str
    color: str
    description: str = ""


class CreatePullRequestOption(GiteaModel):
    title: str
    body: str = ""
    head: str
    base: str


class EditPullRequestOption(GiteaModel):
    title: Optional[str] = None
    body: Optional[str] = None
    base: Optional[str] = None
    state: Optional[str] = None


class MergePullRequestOption(GiteaModel):
    do: str = Field(serialization_alias="Do")
    merge_title: Optional[str] = Field(default=None, serialization_alias="MergeTitleField")
    delete_branch_after_merge: bool = False


class PullReviewRequestOptions(GiteaModel):
    reviewers: List[str]


class CreateRepoOption(GiteaModel):
    name: str
    description: str = ""
    private: bool = False


class AddCollaboratorOption(GiteaModel):
    permission: str


class CreateHookOptionConfig(GiteaModel):
    url: str
    content_type: str = "json"
    secret: Optional[str] = None


class CreateHookOption(GiteaModel):
    type: str = "gitea"
    config: CreateHookOptionConfig
    events: List[str] = Field(default_factory=list)
    active: bool = True


class CreateStatusOption(GiteaModel):
    state: str
    target_url: str = ""
    description: str = ""
    context: str = ""


class CreatePullReviewComment(GiteaModel):
    body: str
    path: str
    new_position: int


class CreatePullReviewOptions(GiteaModel):
    body: str = ""
    commit_id: Optional[str] = None
    event: Optional[str] = None
    comments: List[CreatePullReviewComment] = Field(default_factory=list)


class SubmitPullReviewOptions(GiteaModel):
    body: str = ""
    event: str


class DismissPullReviewOptions(GiteaModel):
    message: str


# ============================================================================
# Webhook payloads
# ============================================================================

class PushPayload(GiteaModel):
    ref: str = ""
    before: str = ""
    after: str = ""
    compare_url: str = ""
    commits: List[PayloadCommit] = Field(default_factory=list)
    head_commit: Optional[PayloadCommit] = None
    repository: Repository = Field(default_factory=Repository)
    pusher: Optional[User] = None
    sender: User = Field(default_factory=User)


class CreatePayload(GiteaModel):
    """Payload of both "create" and "delete" events"""
    sha: str = ""
    ref: str = ""
    ref_type: str = ""
    repository: Repository = Field(default_factory=Repository)
    sender: User = Field(default_factory=User)


class IssuePayload(GiteaModel):
    action: str = ""
    number: int = 0
    issue: Issue = Field(default_factory=Issue)
    repository: Repository = Field(default_factory=Repository)
    sender: User = Field(default_factory=User)


class IssueCommentPayload(GiteaModel):
    action: str = ""
    issue: Issue = Field(default_factory=Issue)
    comment: Comment = Field(default_factory=Comment)
    repository: Repository = Field(default_factory=Repository)
    sender: User = Field(default_factory=User)
    is_pull: bool = False


class PayloadLabel(GiteaModel):
    name: str = ""


class PullRequestPayload(GiteaModel):
    action: str = ""
    number: int = 0
    pull_request: PullRequest = Field(default_factory=PullRequest)
    repository: Repository = Field(default_factory=Repository)
    sender: User = Field(default_factory=User)
    label: Optional[PayloadLabel] = None


class ReleasePayload(GiteaModel):
    action: str = ""
    release: Release = Field(default_factory=Release)
    repository: Repository = Field(default_factory=Repository)
    sender: User = Field(default_factory=User)
