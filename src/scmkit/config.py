"""
Client configuration for scmkit.

A ClientConfig is built once and handed to the driver, which passes it to
every sub-service it creates. Values can come from the environment:
- SCM_URL: base endpoint of the provider
- SCM_TOKEN: API token
- SCM_TIMEOUT: request timeout in seconds (default: 30)
- SCM_CAPABILITIES: comma separated capabilities to enable (default: all)
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional

import httpx


class Capability(Enum):
    """Sub-services a client can expose"""
    CONTENTS = "contents"
    GIT = "git"
    ISSUES = "issues"
    ORGANIZATIONS = "organizations"
    PULL_REQUESTS = "pull_requests"
    REPOSITORIES = "repositories"
    REVIEWS = "reviews"
    USERS = "users"
    WEBHOOKS = "webhooks"


ALL_CAPABILITIES: FrozenSet[Capability] = frozenset(Capability)


@dataclass(frozen=True)
class ClientConfig:
    """Source control client configuration"""
    base_url: str
    token: Optional[str] = None
    timeout: float = 30.0
    capabilities: FrozenSet[Capability] = ALL_CAPABILITIES
    user_agent: str = "scmkit"
    # Replaces the network transport, e.g. httpx.MockTransport in tests
    transport: Optional[httpx.AsyncBaseTransport] = field(default=None, compare=False, repr=False)

    def enabled(self, capability: Capability) -> bool:
        """Whether a sub-service is enabled"""
        return capability in self.capabilities

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Args:
            **overrides: Values that take precedence over the environment

        Returns:
            ClientConfig

        Raises:
            ValueError: If SCM_URL is missing or a value cannot be parsed
        """
        base_url = overrides.pop("base_url", None) or os.getenv("SCM_URL")
        if not base_url:
            raise ValueError("SCM_URL is required")

        values = {
            "base_url": base_url,
            "token": os.getenv("SCM_TOKEN") or None,
            "timeout": float(os.getenv("SCM_TIMEOUT", "30")),
        }

        raw_capabilities = os.getenv("SCM_CAPABILITIES")
        if raw_capabilities:
            values["capabilities"] = parse_capabilities(raw_capabilities)

        values.update(overrides)
        return cls(**values)


def parse_capabilities(value: str) -> FrozenSet[Capability]:
    """
    Parse a comma separated capability list.

    Args:
        value: e.g. "issues, pull_requests,users" or "all"

    Returns:
        Set of capabilities

    Raises:
        ValueError: If a name is not a known capability
    """
    names = [name.strip().lower() for name in value.split(",") if name.strip()]
    if "all" in names:
        return ALL_CAPABILITIES

    try:
        return frozenset(Capability(name) for name in names)
    except ValueError as e:
        valid = ", ".join(c.value for c in Capability)
        raise ValueError(f"Unknown capability in '{value}' (valid: {valid})") from e
