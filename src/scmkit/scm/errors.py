"""
Error types shared by every scmkit driver.

All exceptions raised by a client derive from ScmError so callers can
catch one base class regardless of the provider in use.
"""

from typing import Optional, TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .client import Response


class ScmError(Exception):
    """Base exception for source control client errors"""
    pass


class InvalidURLError(ScmError):
    """The base endpoint is not a well-formed absolute URL"""
    pass


class TransportError(ScmError):
    """The HTTP exchange could not complete (connection, timeout, protocol)"""
    pass


class StatusError(ScmError):
    """
    The server answered with a status code above 300.

    The message is the standard reason phrase for the status. The response
    is attached so callers can still inspect its status and headers.
    """

    def __init__(self, response: "Response", message: Optional[str] = None):
        self.response = response
        self.status = response.status
        super().__init__(message or status_text(response.status))


class DecodeError(ScmError):
    """The response body could not be decoded into the requested shape"""
    pass


class NotSupportedError(ScmError):
    """The operation is not offered by this provider"""
    pass


class UnknownWebhookError(ScmError):
    """The webhook delivery names an event this driver does not parse"""
    pass


def status_text(status: int) -> str:
    """
    Get the standard text for an HTTP status code.

    Args:
        status: HTTP status code

    Returns:
        Reason phrase (e.g. "Not Found"), or a generic text for unknown codes
    """
    return httpx.codes.get_reason_phrase(status) or f"Unknown Status Code {status}"
