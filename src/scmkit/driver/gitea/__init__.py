"""
Gitea driver.

Builds a client for the Gitea REST API (v1) and wires its sub-services.
"""

import logging
from typing import Union

from ...config import Capability, ClientConfig
from .content import ContentService
from .git import GitService
from .gitea import Wrapper
from .issue import IssueService
from .org import OrganizationService
from .pr import PullRequestService
from .repo import RepositoryService
from .review import ReviewService
from .user import UserService
from .webhook import WebhookService

logger = logging.getLogger(__name__)

# Client attribute and factory for each capability.
# Every factory is called as factory(client, config).
SERVICE_FACTORIES = {
    Capability.CONTENTS: ("contents", ContentService),
    Capability.GIT: ("git", GitService),
    Capability.ISSUES: ("issues", IssueService),
    Capability.ORGANIZATIONS: ("organizations", OrganizationService),
    Capability.PULL_REQUESTS: ("pull_requests", PullRequestService),
    Capability.REPOSITORIES: ("repositories", RepositoryService),
    Capability.REVIEWS: ("reviews", ReviewService),
    Capability.USERS: ("users", UserService),
    Capability.WEBHOOKS: ("webhooks", WebhookService),
}


def new_client(config: Union[str, ClientConfig]) -> Wrapper:
    """
    Create a Gitea API client.

    Args:
        config: Base endpoint (e.g. "https://gitea.example.com") or a
                full ClientConfig

    Returns:
        Client with one sub-service per enabled capability

    Raises:
        InvalidURLError: If the base endpoint is malformed
    """
    if isinstance(config, str):
        config = ClientConfig(base_url=config)

    client = Wrapper(config)

    for capability, (attribute, factory) in SERVICE_FACTORIES.items():
        if config.enabled(capability):
            setattr(client, attribute, factory(client, config))

    logger.debug(
        f"Gitea client for {client.base_url} with "
        f"{sorted(c.value for c in config.capabilities)}"
    )
    return client


def new_webhook_service() -> WebhookService:
    """Create a webhook parser that needs no API client"""
    return WebhookService()


__all__ = [
    "new_client",
    "new_webhook_service",
    "Wrapper",
    "ContentService",
    "GitService",
    "IssueService",
    "OrganizationService",
    "PullRequestService",
    "RepositoryService",
    "ReviewService",
    "UserService",
    "WebhookService",
    "SERVICE_FACTORIES",
]
