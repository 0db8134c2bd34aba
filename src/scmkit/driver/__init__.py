"""
Provider drivers.
"""

from typing import Union

from ..config import ClientConfig
from ..scm.client import Client, Driver
from ..scm.errors import NotSupportedError
from ..scm.services import WebhookService
from . import gitea


def _resolve_driver(driver: Union[str, Driver]) -> Driver:
    if isinstance(driver, Driver):
        return driver
    try:
        return Driver(driver.lower())
    except ValueError as e:
        raise NotSupportedError(f"Unknown driver: {driver}") from e


def create_client(
    driver: Union[str, Driver],
    config: Union[str, ClientConfig]
) -> Client:
    """
    Factory function to create a source control client.

    Args:
        driver: Provider driver ("gitea", ...)
        config: Base endpoint or full client configuration

    Returns:
        Client instance

    Raises:
        NotSupportedError: If no driver is available for the provider
        InvalidURLError: If the base endpoint is malformed
    """
    driver = _resolve_driver(driver)

    if driver == Driver.GITEA:
        return gitea.new_client(config)

    raise NotSupportedError(f"No driver available for {driver.value}")


def create_webhook_service(driver: Union[str, Driver]) -> WebhookService:
    """
    Factory function to create a standalone webhook parser.

    Raises:
        NotSupportedError: If no driver is available for the provider
    """
    driver = _resolve_driver(driver)

    if driver == Driver.GITEA:
        return gitea.new_webhook_service()

    raise NotSupportedError(f"No driver available for {driver.value}")


__all__ = ["create_client", "create_webhook_service", "gitea"]
