"""Reactions on issues, issue comments and commit comments."""

from .. import accept_headers, ensure
from ..models import API_OPTIONS_NONE, ApiOptions
from ..paths import RepoTarget, repo_path
from ..requests import NewReaction
from .base import ApiClient


class IssueReactionsClient(ApiClient):
    async def get_all(self, target: RepoTarget, number: int, options: ApiOptions = API_OPTIONS_NONE) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(
            repo_path(target, "issues", number, "reactions"),
            accept=accept_headers.accept_for("issues.reactions"),
            options=options,
        )

    async def create(self, target: RepoTarget, number: int, reaction: NewReaction) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(reaction, "reaction")
        return await self.api_connection.post(
            repo_path(target, "issues", number, "reactions"),
            reaction,
            accept=accept_headers.accept_for("issues.reactions"),
        )

    async def delete(self, target: RepoTarget, number: int, reaction_id: int) -> None:
        ensure.not_none(target, "target")
        await self.api_connection.delete(repo_path(target, "issues", number, "reactions", reaction_id))


class IssueCommentReactionsClient(ApiClient):
    async def get_all(self, target: RepoTarget, comment_id: int, options: ApiOptions = API_OPTIONS_NONE) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(
            repo_path(target, "issues", "comments", comment_id, "reactions"), options=options
        )

    async def create(self, target: RepoTarget, comment_id: int, reaction: NewReaction) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(reaction, "reaction")
        return await self.api_connection.post(
            repo_path(target, "issues", "comments", comment_id, "reactions"), reaction
        )

    async def delete(self, target: RepoTarget, comment_id: int, reaction_id: int) -> None:
        ensure.not_none(target, "target")
        await self.api_connection.delete(
            repo_path(target, "issues", "comments", comment_id, "reactions", reaction_id)
        )


class CommitCommentReactionsClient(ApiClient):
    async def get_all(self, target: RepoTarget, comment_id: int, options: ApiOptions = API_OPTIONS_NONE) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(repo_path(target, "comments", comment_id, "reactions"), options=options)

    async def create(self, target: RepoTarget, comment_id: int, reaction: NewReaction) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(reaction, "reaction")
        return await self.api_connection.post(repo_path(target, "comments", comment_id, "reactions"), reaction)

    async def delete(self, target: RepoTarget, comment_id: int, reaction_id: int) -> None:
        ensure.not_none(target, "target")
        await self.api_connection.delete(repo_path(target, "comments", comment_id, "reactions", reaction_id))


class ReactionsClient:
    """Groups the reaction sub-clients under one attribute."""

    def __init__(self, api_connection):
        self.issue = IssueReactionsClient(api_connection)
        self.issue_comment = IssueCommentReactionsClient(api_connection)
        self.commit_comment = CommitCommentReactionsClient(api_connection)
