"""Pull request review requests and review comments."""

from .. import ensure
from ..models import API_OPTIONS_NONE, ApiOptions
from ..paths import RepoTarget, repo_path
from ..requests import (
    PullRequestReviewCommentCreate,
    PullRequestReviewCommentEdit,
    PullRequestReviewCommentReplyCreate,
    PullRequestReviewCommentRequest,
    PullRequestReviewRequest,
)
from .base import ApiClient


class PullRequestReviewRequestsClient(ApiClient):
    async def get_all(self, target: RepoTarget, number: int) -> dict:
        """Requested reviewers, as ``{"users": [...], "teams": [...]}``."""
        ensure.not_none(target, "target")
        return await self.api_connection.get(repo_path(target, "pulls", number, "requested_reviewers"))

    async def create(self, target: RepoTarget, number: int, users: PullRequestReviewRequest) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(users, "users")
        return await self.api_connection.post(repo_path(target, "pulls", number, "requested_reviewers"), users)

    async def delete(self, target: RepoTarget, number: int, users: PullRequestReviewRequest) -> None:
        ensure.not_none(target, "target")
        ensure.not_none(users, "users")
        await self.api_connection.delete(repo_path(target, "pulls", number, "requested_reviewers"), users)


class PullRequestReviewCommentsClient(ApiClient):
    async def get_all(self, target: RepoTarget, number: int, options: ApiOptions = API_OPTIONS_NONE) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(repo_path(target, "pulls", number, "comments"), options=options)

    async def get_all_for_repository(
        self,
        target: RepoTarget,
        request: PullRequestReviewCommentRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        request = request or PullRequestReviewCommentRequest()
        return await self.api_connection.get_all(
            repo_path(target, "pulls", "comments"), params=request.to_parameters(), options=options
        )

    async def get_comment(self, target: RepoTarget, comment_id: int) -> dict:
        ensure.not_none(target, "target")
        return await self.api_connection.get(repo_path(target, "pulls", "comments", comment_id))

    async def create(self, target: RepoTarget, number: int, comment: PullRequestReviewCommentCreate) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(comment, "comment")
        return await self.api_connection.post(repo_path(target, "pulls", number, "comments"), comment)

    async def create_reply(
        self, target: RepoTarget, number: int, comment: PullRequestReviewCommentReplyCreate
    ) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(comment, "comment")
        return await self.api_connection.post(repo_path(target, "pulls", number, "comments"), comment)

    async def edit(self, target: RepoTarget, comment_id: int, comment: PullRequestReviewCommentEdit) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(comment, "comment")
        return await self.api_connection.patch(repo_path(target, "pulls", "comments", comment_id), comment)

    async def delete(self, target: RepoTarget, comment_id: int) -> None:
        ensure.not_none(target, "target")
        await self.api_connection.delete(repo_path(target, "pulls", "comments", comment_id))


class PullRequestsClient:
    """Groups the pull request sub-clients under one attribute."""

    def __init__(self, api_connection):
        self.review_request = PullRequestReviewRequestsClient(api_connection)
        self.review_comment = PullRequestReviewCommentsClient(api_connection)
