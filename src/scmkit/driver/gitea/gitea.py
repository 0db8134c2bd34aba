"""
Gitea request wrapper.

Wraps the shared Client with the helper every Gitea sub-service uses to
make a request and unmarshal the response.
"""

import json
import logging
from dataclasses import asdict, is_dataclass
from typing import Any, Optional
from urllib.parse import quote, urlencode

from pydantic import BaseModel

from ...scm.client import Client, Driver, Request, Response
from ...scm.errors import StatusError
from ...scm.output import OutputDestination
from ...scm.types import (
    CommitListOptions,
    IssueListOptions,
    ListOptions,
    PullRequestListOptions,
)

logger = logging.getLogger(__name__)


class Wrapper(Client):
    """
    Gitea client.

    Adds the `do` helper on top of the shared Client. Sub-services hold a
    reference to the wrapper and never talk to the transport directly.
    """

    def __init__(self, config):
        super().__init__(config, driver=Driver.GITEA)

    async def do(
        self,
        method: str,
        path: str,
        payload: Any = None,
        out: Optional[OutputDestination] = None
    ) -> Response:
        """
        Make a request and unmarshal the response.

        Args:
            method: HTTP method
            path: API path, relative to the base URL
            payload: Value to send as the JSON request body
            out: Where the body of a successful response goes

        Returns:
            The response; its body is already closed

        Raises:
            TransportError: The request could not be sent or its body could not be read
            StatusError: Status code above 300, response attached
            DecodeError: The body did not match the requested shape
        """
        request = Request(method=method, path=path)

        # if we are posting or putting data, we need to
        # write it to the body of the request.
        if payload is not None:
            request.headers["Content-Type"] = "application/json"
            request.body = encode_json(payload)

        async with self.open(request) as response:
            # NOTE: 3xx responses are reported as errors as well.
            if response.status > 300:
                raise StatusError(response)

            if out is not None:
                await out.consume(response)

        return response


def encode_json(payload: Any) -> bytes:
    """
    Encode a request payload as JSON.

    Pydantic models are dumped by alias without unset optional fields;
    dataclasses are converted to dicts; anything else goes to json.dumps.
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    if is_dataclass(payload) and not isinstance(payload, type):
        payload = asdict(payload)
    return json.dumps(payload).encode("utf-8")


def escape_path(value: str) -> str:
    """Percent-encode a file path or ref for use inside a URL path"""
    return quote(value, safe="/")


def trim_ref(ref: str) -> str:
    """Strip the refs/heads/ or refs/tags/ prefix from a git reference"""
    for prefix in ("refs/heads/", "refs/tags/"):
        if ref.startswith(prefix):
            return ref[len(prefix):]
    return ref


def with_query(path: str, /, **params: Any) -> str:
    """Append query parameters to a path, skipping empty values"""
    query = {key: value for key, value in params.items() if value not in (None, "", 0)}
    if not query:
        return path
    return f"{path}?{urlencode(query)}"


def encode_list_options(opts: Optional[ListOptions]) -> dict:
    """Query parameters for a paginated list"""
    if opts is None:
        return {}
    return {"page": opts.page, "limit": opts.size}


def encode_issue_list_options(opts: IssueListOptions) -> dict:
    params = {"page": opts.page, "limit": opts.size, "type": "issues"}
    params["state"] = _state_param(opts.open, opts.closed)
    return params


def encode_pull_request_list_options(opts: PullRequestListOptions) -> dict:
    params = {"page": opts.page, "limit": opts.size}
    params["state"] = _state_param(opts.open, opts.closed)
    if opts.labels:
        params["labels"] = ",".join(opts.labels)
    return params


def encode_commit_list_options(opts: CommitListOptions) -> dict:
    return {"sha": trim_ref(opts.ref), "path": opts.path, "page": opts.page, "limit": opts.size}


def _state_param(open_: bool, closed: bool) -> str:
    if open_ and closed:
        return "all"
    if closed:
        return "closed"
    return "open"
