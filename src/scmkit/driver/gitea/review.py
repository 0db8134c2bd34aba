"""
Gitea pull request review service.
"""

from typing import List

from ...config import ClientConfig
from ...scm import services
from ...scm.output import DecodeInto
from ...scm.types import (
    ListOptions,
    Review,
    ReviewComment,
    ReviewInput,
    ReviewSubmitInput,
)
from . import models
from .gitea import Wrapper, encode_list_options, with_query
from .user import convert_user


class ReviewService(services.ReviewService):
    """Gitea implementation of ReviewService"""

    def __init__(self, client: Wrapper, config: ClientConfig):
        self.client = client
        self.config = config

    async def find(self, repo: str, number: int, review_id: int) -> Review:
        out = DecodeInto(models.Review)
        await self.client.do("GET", f"api/v1/repos/{repo}/pulls/{number}/reviews/{review_id}", out=out)
        return convert_review(out.value)

    async def list(self, repo: str, number: int, opts: ListOptions) -> List[Review]:
        out = DecodeInto(List[models.Review])
        path = with_query(f"api/v1/repos/{repo}/pulls/{number}/reviews", **encode_list_options(opts))
        await self.client.do("GET", path, out=out)
        return [convert_review(review) for review in out.value]

    async def list_comments(self, repo: str, number: int, review_id: int, opts: ListOptions) -> List[ReviewComment]:
        out = DecodeInto(List[models.ReviewComment])
        path = f"api/v1/repos/{repo}/pulls/{number}/reviews/{review_id}/comments"
        await self.client.do("GET", path, out=out)
        return [convert_review_comment(comment) for comment in out.value]

    async def create(self, repo: str, number: int, data: ReviewInput) -> Review:
        payload = models.CreatePullReviewOptions(
            body=data.body,
            commit_id=data.sha or None,
            event=data.event or None,
            comments=[
                models.CreatePullReviewComment(body=c.body, path=c.path, new_position=c.line)
                for c in data.comments
            ],
        )
        out = DecodeInto(models.Review)
        await self.client.do("POST", f"api/v1/repos/{repo}/pulls/{number}/reviews", payload, out)
        return convert_review(out.value)

    async def delete(self, repo: str, number: int, review_id: int) -> None:
        await self.client.do("DELETE", f"api/v1/repos/{repo}/pulls/{number}/reviews/{review_id}")

    async def submit(self, repo: str, number: int, review_id: int, data: ReviewSubmitInput) -> Review:
        payload = models.SubmitPullReviewOptions(body=data.body, event=data.event)
        out = DecodeInto(models.Review)
        await self.client.do("POST", f"api/v1/repos/{repo}/pulls/{number}/reviews/{review_id}", payload, out)
        return convert_review(out.value)

    async def dismiss(self, repo: str, number: int, review_id: int, message: str) -> Review:
        payload = models.DismissPullReviewOptions(message=message)
        out = DecodeInto(models.Review)
        path = f"api/v1/repos/{repo}/pulls/{number}/reviews/{review_id}/dismissals"
        await self.client.do("POST", path, payload, out)
        return convert_review(out.value)


def convert_review(src: models.Review) -> Review:
    return Review(
        id=src.id,
        body=src.body,
        sha=src.commit_id,
        state=src.state,
        link=src.html_url,
        author=convert_user(src.user),
        created=src.submitted_at,
        updated=src.updated_at,
    )


def convert_review_comment(src: models.ReviewComment) -> ReviewComment:
    return ReviewComment(
        id=src.id,
        body=src.body,
        path=src.path,
        sha=src.commit_id,
        line=src.position or src.original_position,
        link=src.html_url,
        author=convert_user(src.user),
        created=src.created_at,
        updated=src.updated_at,
    )
