"""
scmkit - provider-neutral source control client.

Example:
    from scmkit import create_client

    async with create_client("gitea", "https://gitea.example.com") as client:
        repo = await client.repositories.find("owner/name")
"""

from .config import Capability, ClientConfig
from .driver import create_client, create_webhook_service
from .scm import (
    Client,
    Driver,
    ScmError,
    InvalidURLError,
    TransportError,
    StatusError,
    DecodeError,
    NotSupportedError,
    UnknownWebhookError,
)

__version__ = "0.1.0"

__all__ = [
    "Capability",
    "ClientConfig",
    "create_client",
    "create_webhook_service",
    "Client",
    "Driver",
    "ScmError",
    "InvalidURLError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "NotSupportedError",
    "UnknownWebhookError",
]
