"""
Gitea webhook service.

Parses webhook deliveries into provider-neutral events. The event name is
read from the X-Gitea-Event header, falling back to X-Gogs-Event for
older servers.
"""

import logging
from typing import Callable, Dict, Mapping, Optional, Type

from pydantic import ValidationError

from ...config import ClientConfig
from ...scm import services
from ...scm.errors import DecodeError, UnknownWebhookError
from ...scm.types import Commit, Reference, Signature
from ...scm.webhook import (
    Action,
    BranchHook,
    IssueCommentHook,
    IssueHook,
    PullRequestCommentHook,
    PullRequestHook,
    PushHook,
    Release,
    ReleaseHook,
    TagHook,
    Webhook,
)
from . import models
from .gitea import Wrapper
from .issue import convert_comment, convert_issue
from .pr import convert_pull_request
from .repo import convert_repository
from .user import convert_user

logger = logging.getLogger(__name__)

EVENT_HEADERS = ("x-gitea-event", "x-gogs-event")

_ACTIONS = {
    "created": Action.CREATE,
    "updated": Action.UPDATE,
    "deleted": Action.DELETE,
    "opened": Action.OPEN,
    "reopened": Action.REOPEN,
    "closed": Action.CLOSE,
    "edited": Action.EDITED,
    "synchronized": Action.SYNC,
    "label_updated": Action.LABEL,
    "label_cleared": Action.UNLABEL,
    "assigned": Action.ASSIGNED,
    "unassigned": Action.UNASSIGNED,
    "review_requested": Action.REVIEW_REQUESTED,
    "review_request_removed": Action.REVIEW_REQUEST_REMOVED,
    "published": Action.PUBLISHED,
    "reviewed": Action.SUBMITTED,
}


class WebhookService(services.WebhookService):
    """
    Gitea implementation of WebhookService.

    Parsing needs no API access, so the service also works without a
    client (see new_webhook_service).
    """

    def __init__(self, client: Optional[Wrapper] = None, config: Optional[ClientConfig] = None):
        self.client = client
        self.config = config
        self._parsers: Dict[str, Callable[[bytes], Webhook]] = {
            "push": self._parse_push,
            "create": lambda body: self._parse_create(body, Action.CREATE),
            "delete": lambda body: self._parse_create(body, Action.DELETE),
            "issues": self._parse_issue,
            "issue_comment": self._parse_issue_comment,
            "pull_request": self._parse_pull_request,
            "release": self._parse_release,
        }

    def parse(self, headers: Mapping[str, str], body: bytes) -> Webhook:
        event = _event_name(headers)

        parser = self._parsers.get(event)
        # pull_request_approved, pull_request_rejected, ... carry a pull request
        if parser is None and event.startswith("pull_request"):
            parser = self._parse_pull_request
        if parser is None:
            raise UnknownWebhookError(f"Unknown webhook event '{event}'")

        logger.debug(f"Parsing '{event}' webhook")
        return parser(body)

    def _parse_push(self, body: bytes) -> PushHook:
        src = _decode(models.PushPayload, body)

        commits = [convert_payload_commit(commit) for commit in src.commits]
        if src.head_commit is not None:
            head = convert_payload_commit(src.head_commit)
        elif commits:
            head = commits[-1]
        else:
            head = Commit(sha=src.after)

        return PushHook(
            ref=src.ref,
            before=src.before,
            after=src.after,
            compare=src.compare_url,
            commit=head,
            commits=commits,
            repo=convert_repository(src.repository),
            sender=convert_user(src.sender),
        )

    def _parse_create(self, body: bytes, action: Action) -> Webhook:
        src = _decode(models.CreatePayload, body)
        repo = convert_repository(src.repository)
        sender = convert_user(src.sender)

        if src.ref_type == "tag":
            ref = Reference(name=src.ref, path=f"refs/tags/{src.ref}", sha=src.sha)
            return TagHook(ref=ref, action=action, repo=repo, sender=sender)

        ref = Reference(name=src.ref, path=f"refs/heads/{src.ref}", sha=src.sha)
        return BranchHook(ref=ref, action=action, repo=repo, sender=sender)

    def _parse_issue(self, body: bytes) -> IssueHook:
        src = _decode(models.IssuePayload, body)
        return IssueHook(
            action=convert_action(src.action),
            issue=convert_issue(src.issue),
            repo=convert_repository(src.repository),
            sender=convert_user(src.sender),
        )

    def _parse_issue_comment(self, body: bytes) -> Webhook:
        src = _decode(models.IssueCommentPayload, body)
        repo = convert_repository(src.repository)
        sender = convert_user(src.sender)
        action = convert_action(src.action)
        comment = convert_comment(src.comment)

        if src.is_pull:
            # The payload only carries the issue side of the pull request
            pull_request = models.PullRequest(
                number=src.issue.number,
                title=src.issue.title,
                body=src.issue.body,
                user=src.issue.user,
                labels=src.issue.labels,
                assignees=src.issue.assignees,
                html_url=src.issue.html_url,
                state=src.issue.state,
            )
            return PullRequestCommentHook(
                action=action,
                pull_request=convert_pull_request(pull_request),
                comment=comment,
                repo=repo,
                sender=sender,
            )

        return IssueCommentHook(
            action=action,
            issue=convert_issue(src.issue),
            comment=comment,
            repo=repo,
            sender=sender,
        )

    def _parse_pull_request(self, body: bytes) -> PullRequestHook:
        src = _decode(models.PullRequestPayload, body)
        action = convert_action(src.action)
        if action == Action.CLOSE and src.pull_request.merged:
            action = Action.MERGE

        return PullRequestHook(
            action=action,
            pull_request=convert_pull_request(src.pull_request),
            label=src.label.name if src.label is not None else "",
            repo=convert_repository(src.repository),
            sender=convert_user(src.sender),
        )

    def _parse_release(self, body: bytes) -> ReleaseHook:
        src = _decode(models.ReleasePayload, body)
        release = src.release
        return ReleaseHook(
            action=convert_action(src.action),
            release=Release(
                id=release.id,
                title=release.name,
                description=release.body,
                link=release.html_url,
                tag=release.tag_name,
                commitish=release.target_commitish,
                draft=release.draft,
                prerelease=release.prerelease,
                created=release.created_at,
                published=release.published_at,
            ),
            repo=convert_repository(src.repository),
            sender=convert_user(src.sender),
        )


def _event_name(headers: Mapping[str, str]) -> str:
    lowered = {key.lower(): value for key, value in headers.items()}
    for header in EVENT_HEADERS:
        if lowered.get(header):
            return lowered[header].strip().lower()
    raise UnknownWebhookError("Missing X-Gitea-Event header")


def _decode(model: Type[models.GiteaModel], body: bytes):
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Invalid {model.__name__} webhook payload: {e}") from e


def convert_action(action: str) -> Action:
    return _ACTIONS.get(action, Action.UNKNOWN)


def convert_payload_commit(src: models.PayloadCommit) -> Commit:
    return Commit(
        sha=src.id,
        message=src.message,
        author=convert_payload_user(src.author, src),
        committer=convert_payload_user(src.committer, src),
        link=src.url,
    )


def convert_payload_user(src: Optional[models.PayloadUser], commit: models.PayloadCommit) -> Signature:
    if src is None:
        return Signature(date=commit.timestamp)
    return Signature(
        name=src.name,
        email=src.email,
        login=src.username,
        date=commit.timestamp,
    )
