"""
Gitea contents service.
"""

import base64
import io
from typing import List, Optional

from ...config import ClientConfig
from ...scm import services
from ...scm.output import CopyRawInto, DecodeInto
from ...scm.types import (
    Content,
    ContentInfo,
    ContentKind,
    ContentParams,
    ListOptions,
    Signature,
)
from . import models
from .gitea import Wrapper, encode_list_options, escape_path, trim_ref, with_query


class ContentService(services.ContentService):
    """Gitea implementation of ContentService"""

    def __init__(self, client: Wrapper, config: ClientConfig):
        self.client = client
        self.config = config

    async def find(self, repo: str, path: str, ref: str) -> Content:
        buffer = io.BytesIO()
        endpoint = f"api/v1/repos/{repo}/raw/{escape_path(trim_ref(ref))}/{escape_path(path)}"
        await self.client.do("GET", endpoint, out=CopyRawInto(buffer))
        return Content(path=path, data=buffer.getvalue())

    async def list(self, repo: str, path: str, ref: str, opts: ListOptions) -> List[ContentInfo]:
        out = DecodeInto(List[models.ContentsResponse])
        params = encode_list_options(opts)
        params["ref"] = trim_ref(ref)
        await self.client.do("GET", with_query(f"api/v1/repos/{repo}/contents/{escape_path(path)}", **params), out=out)
        return [convert_content_info(entry) for entry in out.value]

    async def create(self, repo: str, path: str, params: ContentParams) -> None:
        payload = models.CreateFileOptions(
            content=base64.b64encode(params.data).decode("ascii"),
            message=params.message,
            branch=params.branch or None,
            author=convert_identity(params.signature),
            committer=convert_identity(params.signature),
        )
        await self.client.do("POST", f"api/v1/repos/{repo}/contents/{escape_path(path)}", payload)

    async def update(self, repo: str, path: str, params: ContentParams) -> None:
        payload = models.CreateFileOptions(
            content=base64.b64encode(params.data).decode("ascii"),
            message=params.message,
            branch=params.branch or None,
            sha=params.blob_id or params.sha,
            author=convert_identity(params.signature),
            committer=convert_identity(params.signature),
        )
        await self.client.do("PUT", f"api/v1/repos/{repo}/contents/{escape_path(path)}", payload)

    async def delete(self, repo: str, path: str, params: ContentParams) -> None:
        payload = models.DeleteFileOptions(
            sha=params.blob_id or params.sha,
            message=params.message,
            branch=params.branch or None,
            author=convert_identity(params.signature),
            committer=convert_identity(params.signature),
        )
        await self.client.do("DELETE", f"api/v1/repos/{repo}/contents/{escape_path(path)}", payload)


# ============================================================================
# Converters
# ============================================================================

_KINDS = {
    "file": ContentKind.FILE,
    "dir": ContentKind.DIRECTORY,
    "symlink": ContentKind.SYMLINK,
    "submodule": ContentKind.GITLINK,
}


def convert_content_info(src: models.ContentsResponse) -> ContentInfo:
    return ContentInfo(
        path=src.path,
        sha=src.last_commit_sha,
        blob_id=src.sha,
        kind=_KINDS.get(src.type, ContentKind.UNSUPPORTED),
    )


def convert_identity(signature: Optional[Signature]) -> Optional[models.Identity]:
    if signature is None:
        return None
    return models.Identity(name=signature.name, email=signature.email)
