"""
Provider-neutral source control client contract.

Defines the client, request/response types, errors, resource types and
sub-service interfaces shared by every driver.
"""

from .client import Client, Driver, Request, Response, parse_base_url
from .errors import (
    ScmError,
    InvalidURLError,
    TransportError,
    StatusError,
    DecodeError,
    NotSupportedError,
    UnknownWebhookError,
)
from .output import OutputDestination, DecodeInto, CopyRawInto
from .services import (
    ContentService,
    GitService,
    IssueService,
    OrganizationService,
    PullRequestService,
    RepositoryService,
    ReviewService,
    UserService,
    WebhookService,
)
from .types import (
    State,
    MergeMethod,
    ContentKind,
    User,
    Perm,
    Organization,
    Team,
    TeamMember,
    Membership,
    Repository,
    RepositoryInput,
    HookEvents,
    Hook,
    HookInput,
    Status,
    StatusInput,
    Label,
    Reference,
    Signature,
    Commit,
    Change,
    Content,
    ContentInfo,
    ContentParams,
    Issue,
    IssueInput,
    Comment,
    CommentInput,
    PullRequestBranch,
    PullRequest,
    PullRequestInput,
    PullRequestMergeOptions,
    Review,
    ReviewComment,
    ReviewCommentInput,
    ReviewInput,
    ReviewSubmitInput,
    ListOptions,
    IssueListOptions,
    PullRequestListOptions,
    CommitListOptions,
)
from .webhook import (
    Action,
    Release,
    Webhook,
    PushHook,
    BranchHook,
    TagHook,
    IssueHook,
    IssueCommentHook,
    PullRequestHook,
    PullRequestCommentHook,
    ReleaseHook,
)

__all__ = [
    # Client
    "Client",
    "Driver",
    "Request",
    "Response",
    "parse_base_url",
    # Errors
    "ScmError",
    "InvalidURLError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "NotSupportedError",
    "UnknownWebhookError",
    # Output destinations
    "OutputDestination",
    "DecodeInto",
    "CopyRawInto",
    # Services
    "ContentService",
    "GitService",
    "IssueService",
    "OrganizationService",
    "PullRequestService",
    "RepositoryService",
    "ReviewService",
    "UserService",
    "WebhookService",
    # Types
    "State",
    "MergeMethod",
    "ContentKind",
    "User",
    "Perm",
    "Organization",
    "Team",
    "TeamMember",
    "Membership",
    "Repository",
    "RepositoryInput",
    "HookEvents",
    "Hook",
    "HookInput",
    "Status",
    "StatusInput",
    "Label",
    "Reference",
    "Signature",
    "Commit",
    "Change",
    "Content",
    "ContentInfo",
    "ContentParams",
    "Issue",
    "IssueInput",
    "Comment",
    "CommentInput",
    "PullRequestBranch",
    "PullRequest",
    "PullRequestInput",
    "PullRequestMergeOptions",
    "Review",
    "ReviewComment",
    "ReviewCommentInput",
    "ReviewInput",
    "ReviewSubmitInput",
    "ListOptions",
    "IssueListOptions",
    "PullRequestListOptions",
    "CommitListOptions",
    # Webhooks
    "Action",
    "Release",
    "Webhook",
    "PushHook",
    "BranchHook",
    "TagHook",
    "IssueHook",
    "IssueCommentHook",
    "PullRequestHook",
    "PullRequestCommentHook",
    "ReleaseHook",
]
