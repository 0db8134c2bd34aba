"""
Gitea git service: branches, tags, commits and references.
"""

from typing import List, Optional

from ...config import ClientConfig
from ...scm import services
from ...scm.output import DecodeInto
from ...scm.types import (
    Change,
    Commit,
    CommitListOptions,
    ListOptions,
    Reference,
    Signature,
)
from . import models
from .gitea import Wrapper, encode_commit_list_options, encode_list_options, escape_path, trim_ref, with_query


class GitService(services.GitService):
    """Gitea implementation of GitService"""

    def __init__(self, client: Wrapper, config: ClientConfig):
        self.client = client
        self.config = config

    async def find_branch(self, repo: str, name: str) -> Reference:
        out = DecodeInto(models.Branch)
        await self.client.do("GET", f"api/v1/repos/{repo}/branches/{escape_path(name)}", out=out)
        return convert_branch(out.value)

    async def find_commit(self, repo: str, ref: str) -> Commit:
        out = DecodeInto(models.Commit)
        await self.client.do("GET", f"api/v1/repos/{repo}/git/commits/{escape_path(trim_ref(ref))}", out=out)
        return convert_commit(out.value)

    async def find_tag(self, repo: str, name: str) -> Reference:
        out = DecodeInto(models.Tag)
        await self.client.do("GET", f"api/v1/repos/{repo}/tags/{escape_path(name)}", out=out)
        return convert_tag(out.value)

    async def find_ref(self, repo: str, ref: str) -> str:
        ref = ref.removeprefix("refs/")
        out = DecodeInto(List[models.Reference])
        await self.client.do("GET", f"api/v1/repos/{repo}/git/refs/{escape_path(ref)}", out=out)
        # Gitea matches refs by prefix, prefer the exact one
        for found in out.value:
            if found.ref == f"refs/{ref}" and found.object is not None:
                return found.object.sha
        for found in out.value:
            if found.object is not None:
                return found.object.sha
        return ""

    async def list_branches(self, repo: str, opts: ListOptions) -> List[Reference]:
        out = DecodeInto(List[models.Branch])
        path = with_query(f"api/v1/repos/{repo}/branches", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_branch(branch) for branch in out.value]

    async def list_commits(self, repo: str, opts: CommitListOptions) -> List[Commit]:
        out = DecodeInto(List[models.Commit])
        path = with_query(f"api/v1/repos/{repo}/commits", **encode_commit_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_commit(commit) for commit in out.value]

    async def list_tags(self, repo: str, opts: ListOptions) -> List[Reference]:
        out = DecodeInto(List[models.Tag])
        path = with_query(f"api/v1/repos/{repo}/tags", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_tag(tag) for tag in out.value]

    async def list_changes(self, repo: str, ref: str, opts: ListOptions) -> List[Change]:
        out = DecodeInto(models.Commit)
        await self.client.do("GET", f"api/v1/repos/{repo}/git/commits/{escape_path(trim_ref(ref))}", out=out)
        return [convert_affected_file(file) for file in out.value.files or []]

    async def compare_changes(self, repo: str, source: str, target: str, opts: ListOptions) -> List[Change]:
        out = DecodeInto(models.Compare)
        path = f"api/v1/repos/{repo}/compare/{escape_path(source)}...{escape_path(target)}"
        await self.client.do("GET", path, out=out)

        changes = {}
        for commit in out.value.commits:
            for file in commit.files or []:
                changes[file.filename] = convert_affected_file(file)
        return list(changes.values())

    async def create_ref(self, repo: str, ref: str, sha: str) -> Reference:
        payload = models.CreateBranchOption(new_branch_name=trim_ref(ref), old_ref_name=sha)
        out = DecodeInto(models.Branch)
        await self.client.do("POST", f"api/v1/repos/{repo}/branches", payload, out)
        return convert_branch(out.value)

    async def delete_ref(self, repo: str, ref: str) -> None:
        await self.client.do("DELETE", f"api/v1/repos/{repo}/branches/{escape_path(trim_ref(ref))}")


# ============================================================================
# Converters
# ============================================================================

def convert_branch(src: models.Branch) -> Reference:
    sha = src.commit.id if src.commit is not None else ""
    return Reference(name=src.name, path=f"refs/heads/{src.name}", sha=sha)


def convert_tag(src: models.Tag) -> Reference:
    sha = src.commit.sha if src.commit is not None else src.id
    return Reference(name=src.name, path=f"refs/tags/{src.name}", sha=sha)


def convert_commit(src: models.Commit) -> Commit:
    meta = src.commit or models.RepoCommit()
    tree = None
    if meta.tree is not None:
        tree = Reference(sha=meta.tree.sha)

    return Commit(
        sha=src.sha,
        message=meta.message,
        tree=tree,
        author=convert_signature(meta.author, src.author),
        committer=convert_signature(meta.committer, src.committer),
        link=src.html_url,
    )


def convert_signature(src: Optional[models.CommitUser], account: Optional[models.User]) -> Signature:
    """Merge the git identity of a commit with the matching Gitea account"""
    signature = Signature()
    if src is not None:
        signature.name = src.name
        signature.email = src.email
        signature.date = src.date
        signature.login = src.username
    if account is not None:
        signature.login = account.login or account.username or signature.login
        signature.avatar = account.avatar_url
    return signature


def convert_affected_file(src: models.CommitAffectedFile) -> Change:
    return Change(
        path=src.filename,
        added=src.status == "added",
        renamed=src.status == "renamed",
        deleted=src.status == "removed",
    )
