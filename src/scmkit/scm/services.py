"""
Sub-service interfaces.

Every driver implements these interfaces so callers can use the same code
against any provider. Operations a provider does not offer raise
NotSupportedError.
"""

from abc import ABC, abstractmethod
from typing import List, Mapping

from .types import (
    Change,
    Comment,
    CommentInput,
    Commit,
    CommitListOptions,
    Content,
    ContentInfo,
    ContentParams,
    Hook,
    HookInput,
    Issue,
    IssueInput,
    IssueListOptions,
    Label,
    ListOptions,
    Membership,
    Organization,
    Perm,
    PullRequest,
    PullRequestInput,
    PullRequestListOptions,
    PullRequestMergeOptions,
    Reference,
    Repository,
    RepositoryInput,
    Review,
    ReviewComment,
    ReviewInput,
    ReviewSubmitInput,
    Status,
    StatusInput,
    Team,
    TeamMember,
    User,
)
from .webhook import Webhook


class ContentService(ABC):
    """Access to repository file contents"""

    @abstractmethod
    async def find(self, repo: str, path: str, ref: str) -> Content:
        """
        Get a file and its raw contents.

        Args:
            repo: Repository full name (owner/name)
            path: File path in the repository
            ref: Branch, tag or commit SHA

        Returns:
            Content with the file bytes
        """
        pass

    @abstractmethod
    async def list(self, repo: str, path: str, ref: str, opts: ListOptions) -> List[ContentInfo]:
        """List the entries of a directory"""
        pass

    @abstractmethod
    async def create(self, repo: str, path: str, params: ContentParams) -> None:
        """Create a file"""
        pass

    @abstractmethod
    async def update(self, repo: str, path: str, params: ContentParams) -> None:
        """Update a file; params.sha must name the blob being replaced"""
        pass

    @abstractmethod
    async def delete(self, repo: str, path: str, params: ContentParams) -> None:
        """Delete a file"""
        pass


class GitService(ABC):
    """Access to git references and objects"""

    @abstractmethod
    async def find_branch(self, repo: str, name: str) -> Reference:
        pass

    @abstractmethod
    async def find_commit(self, repo: str, ref: str) -> Commit:
        pass

    @abstractmethod
    async def find_tag(self, repo: str, name: str) -> Reference:
        pass

    @abstractmethod
    async def find_ref(self, repo: str, ref: str) -> str:
        """Resolve a reference to a commit SHA"""
        pass

    @abstractmethod
    async def list_branches(self, repo: str, opts: ListOptions) -> List[Reference]:
        pass

    @abstractmethod
    async def list_commits(self, repo: str, opts: CommitListOptions) -> List[Commit]:
        pass

    @abstractmethod
    async def list_tags(self, repo: str, opts: ListOptions) -> List[Reference]:
        pass

    @abstractmethod
    async def list_changes(self, repo: str, ref: str, opts: ListOptions) -> List[Change]:
        """List the files changed by a commit"""
        pass

    @abstractmethod
    async def compare_changes(self, repo: str, source: str, target: str, opts: ListOptions) -> List[Change]:
        """List the files changed between two references"""
        pass

    @abstractmethod
    async def create_ref(self, repo: str, ref: str, sha: str) -> Reference:
        """Create a branch named ref pointing at sha"""
        pass

    @abstractmethod
    async def delete_ref(self, repo: str, ref: str) -> None:
        pass


class IssueService(ABC):
    """Access to issues and their comments and labels"""

    @abstractmethod
    async def find(self, repo: str, number: int) -> Issue:
        pass

    @abstractmethod
    async def find_comment(self, repo: str, number: int, comment_id: int) -> Comment:
        pass

    @abstractmethod
    async def list(self, repo: str, opts: IssueListOptions) -> List[Issue]:
        pass

    @abstractmethod
    async def list_comments(self, repo: str, number: int, opts: ListOptions) -> List[Comment]:
        pass

    @abstractmethod
    async def list_labels(self, repo: str, number: int, opts: ListOptions) -> List[Label]:
        pass

    @abstractmethod
    async def list_events(self, repo: str, number: int, opts: ListOptions) -> List[dict]:
        pass

    @abstractmethod
    async def create(self, repo: str, data: IssueInput) -> Issue:
        pass

    @abstractmethod
    async def create_comment(self, repo: str, number: int, data: CommentInput) -> Comment:
        pass

    @abstractmethod
    async def edit_comment(self, repo: str, number: int, comment_id: int, data: CommentInput) -> Comment:
        pass

    @abstractmethod
    async def delete_comment(self, repo: str, number: int, comment_id: int) -> None:
        pass

    @abstractmethod
    async def add_label(self, repo: str, number: int, label: str) -> None:
        pass

    @abstractmethod
    async def delete_label(self, repo: str, number: int, label: str) -> None:
        pass

    @abstractmethod
    async def close(self, repo: str, number: int) -> None:
        pass

    @abstractmethod
    async def reopen(self, repo: str, number: int) -> None:
        pass

    @abstractmethod
    async def lock(self, repo: str, number: int) -> None:
        pass

    @abstractmethod
    async def unlock(self, repo: str, number: int) -> None:
        pass

    @abstractmethod
    async def assign(self, repo: str, number: int, logins: List[str]) -> None:
        """Add assignees to an issue"""
        pass

    @abstractmethod
    async def unassign(self, repo: str, number: int, logins: List[str]) -> None:
        """Remove assignees from an issue"""
        pass


class OrganizationService(ABC):
    """Access to organizations, teams and memberships"""

    @abstractmethod
    async def find(self, name: str) -> Organization:
        pass

    @abstractmethod
    async def list(self, opts: ListOptions) -> List[Organization]:
        """List the organizations of the authenticated user"""
        pass

    @abstractmethod
    async def list_teams(self, org: str, opts: ListOptions) -> List[Team]:
        pass

    @abstractmethod
    async def list_team_members(self, team_id: int, role: str, opts: ListOptions) -> List[TeamMember]:
        pass

    @abstractmethod
    async def list_org_members(self, org: str, opts: ListOptions) -> List[TeamMember]:
        pass

    @abstractmethod
    async def is_member(self, org: str, user: str) -> bool:
        pass

    @abstractmethod
    async def is_admin(self, org: str, user: str) -> bool:
        pass

    @abstractmethod
    async def find_membership(self, org: str, user: str) -> Membership:
        pass


class PullRequestService(ABC):
    """Access to pull requests"""

    @abstractmethod
    async def find(self, repo: str, number: int) -> PullRequest:
        pass

    @abstractmethod
    async def list(self, repo: str, opts: PullRequestListOptions) -> List[PullRequest]:
        pass

    @abstractmethod
    async def list_changes(self, repo: str, number: int, opts: ListOptions) -> List[Change]:
        pass

    @abstractmethod
    async def list_commits(self, repo: str, number: int, opts: ListOptions) -> List[Commit]:
        pass

    @abstractmethod
    async def list_comments(self, repo: str, number: int, opts: ListOptions) -> List[Comment]:
        pass

    @abstractmethod
    async def list_labels(self, repo: str, number: int, opts: ListOptions) -> List[Label]:
        pass

    @abstractmethod
    async def create(self, repo: str, data: PullRequestInput) -> PullRequest:
        pass

    @abstractmethod
    async def update(self, repo: str, number: int, data: PullRequestInput) -> PullRequest:
        pass

    @abstractmethod
    async def create_comment(self, repo: str, number: int, data: CommentInput) -> Comment:
        pass

    @abstractmethod
    async def edit_comment(self, repo: str, number: int, comment_id: int, data: CommentInput) -> Comment:
        pass

    @abstractmethod
    async def delete_comment(self, repo: str, number: int, comment_id: int) -> None:
        pass

    @abstractmethod
    async def add_label(self, repo: str, number: int, label: str) -> None:
        pass

    @abstractmethod
    async def delete_label(self, repo: str, number: int, label: str) -> None:
        pass

    @abstractmethod
    async def merge(self, repo: str, number: int, options: PullRequestMergeOptions) -> None:
        pass

    @abstractmethod
    async def close(self, repo: str, number: int) -> None:
        pass

    @abstractmethod
    async def reopen(self, repo: str, number: int) -> None:
        pass

    @abstractmethod
    async def request_review(self, repo: str, number: int, logins: List[str]) -> None:
        pass

    @abstractmethod
    async def unrequest_review(self, repo: str, number: int, logins: List[str]) -> None:
        pass


class RepositoryService(ABC):
    """Access to repositories, hooks, statuses and collaborators"""

    @abstractmethod
    async def find(self, repo: str) -> Repository:
        pass

    @abstractmethod
    async def find_perms(self, repo: str) -> Perm:
        pass

    @abstractmethod
    async def find_hook(self, repo: str, hook_id: str) -> Hook:
        pass

    @abstractmethod
    async def list(self, opts: ListOptions) -> List[Repository]:
        """List the repositories of the authenticated user"""
        pass

    @abstractmethod
    async def list_organisation(self, org: str, opts: ListOptions) -> List[Repository]:
        pass

    @abstractmethod
    async def list_user(self, user: str, opts: ListOptions) -> List[Repository]:
        pass

    @abstractmethod
    async def list_hooks(self, repo: str, opts: ListOptions) -> List[Hook]:
        pass

    @abstractmethod
    async def list_status(self, repo: str, ref: str, opts: ListOptions) -> List[Status]:
        pass

    @abstractmethod
    async def list_labels(self, repo: str, opts: ListOptions) -> List[Label]:
        pass

    @abstractmethod
    async def list_collaborators(self, repo: str, opts: ListOptions) -> List[User]:
        pass

    @abstractmethod
    async def is_collaborator(self, repo: str, user: str) -> bool:
        pass

    @abstractmethod
    async def add_collaborator(self, repo: str, user: str, permission: str) -> None:
        pass

    @abstractmethod
    async def create(self, data: RepositoryInput) -> Repository:
        pass

    @abstractmethod
    async def delete(self, repo: str) -> None:
        pass

    @abstractmethod
    async def create_hook(self, repo: str, data: HookInput) -> Hook:
        pass

    @abstractmethod
    async def delete_hook(self, repo: str, hook_id: str) -> None:
        pass

    @abstractmethod
    async def create_status(self, repo: str, ref: str, data: StatusInput) -> Status:
        pass


class ReviewService(ABC):
    """Access to pull request reviews"""

    @abstractmethod
    async def find(self, repo: str, number: int, review_id: int) -> Review:
        pass

    @abstractmethod
    async def list(self, repo: str, number: int, opts: ListOptions) -> List[Review]:
        pass

    @abstractmethod
    async def list_comments(self, repo: str, number: int, review_id: int, opts: ListOptions) -> List[ReviewComment]:
        pass

    @abstractmethod
    async def create(self, repo: str, number: int, data: ReviewInput) -> Review:
        pass

    @abstractmethod
    async def delete(self, repo: str, number: int, review_id: int) -> None:
        pass

    @abstractmethod
    async def submit(self, repo: str, number: int, review_id: int, data: ReviewSubmitInput) -> Review:
        pass

    @abstractmethod
    async def dismiss(self, repo: str, number: int, review_id: int, message: str) -> Review:
        pass


class UserService(ABC):
    """Access to user accounts"""

    @abstractmethod
    async def find(self) -> User:
        """Get the authenticated user"""
        pass

    @abstractmethod
    async def find_login(self, login: str) -> User:
        pass

    @abstractmethod
    async def find_email(self) -> str:
        """Get the email address of the authenticated user"""
        pass

    @abstractmethod
    async def list_invitations(self) -> List[dict]:
        pass

    @abstractmethod
    async def accept_invitation(self, invitation_id: int) -> None:
        pass


class WebhookService(ABC):
    """Parsing of webhook deliveries"""

    @abstractmethod
    def parse(self, headers: Mapping[str, str], body: bytes) -> Webhook:
        """
        Parse a webhook delivery.

        Args:
            headers: Request headers (case-insensitive mapping preferred)
            body: Raw request body

        Returns:
            Parsed webhook event

        Raises:
            UnknownWebhookError: If the event is not recognized
            DecodeError: If the body does not match the event payload
        """
        pass
