"""Repository collaborators, branches, traffic and starring."""

from .. import accept_headers, ensure, probe
from ..models import API_OPTIONS_NONE, ApiOptions
from ..paths import OwnerRepo, RepoTarget, path, repo_path
from ..requests import (
    CollaboratorRequest,
    RepositoryCollaboratorListRequest,
    RepositoryTrafficRequest,
    StarredRequest,
)
from .base import ApiClient


class RepositoryCollaboratorsClient(ApiClient):
    async def get_all(
        self,
        target: RepoTarget,
        request: RepositoryCollaboratorListRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        request = request or RepositoryCollaboratorListRequest()
        return await self.api_connection.get_all(
            repo_path(target, "collaborators"), params=request.to_parameters(), options=options
        )

    async def is_collaborator(self, target: RepoTarget, user: str) -> bool:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(user, "user")
        return await probe.check(self.connection, repo_path(target, "collaborators", user))

    async def review_permission(self, target: RepoTarget, user: str) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(user, "user")
        return await self.api_connection.get(repo_path(target, "collaborators", user, "permission"))

    async def add(self, target: RepoTarget, user: str, permission: CollaboratorRequest | None = None):
        """Invite ``user``; returns the invitation, or None when they already have access."""
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(user, "user")
        uri = repo_path(target, "collaborators", user)
        if permission is None:
            return await self.api_connection.put(uri)
        return await self.api_connection.put(uri, permission)

    async def delete(self, target: RepoTarget, user: str) -> None:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(user, "user")
        await self.api_connection.delete(repo_path(target, "collaborators", user))


class RepositoryBranchesClient(ApiClient):
    async def get_all(self, target: RepoTarget, options: ApiOptions = API_OPTIONS_NONE) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(repo_path(target, "branches"), options=options)

    async def get(self, target: RepoTarget, branch: str) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(branch, "branch")
        return await self.api_connection.get(repo_path(target, "branches", branch))

    async def get_branch_protection(self, target: RepoTarget, branch: str) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(branch, "branch")
        return await self.api_connection.get(repo_path(target, "branches", branch, "protection"))

    async def update_branch_protection(self, target: RepoTarget, branch: str, update: dict) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(branch, "branch")
        ensure.not_none(update, "update")
        return await self.api_connection.put(repo_path(target, "branches", branch, "protection"), update)

    async def delete_branch_protection(self, target: RepoTarget, branch: str) -> bool:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(branch, "branch")
        return await probe.check(
            self.connection, repo_path(target, "branches", branch, "protection"), method="delete"
        )


class RepositoryTrafficClient(ApiClient):
    """Traffic statistics; every call carries the traffic preview media type."""

    _accept = accept_headers.accept_for("repos.traffic")

    async def get_all_paths(self, target: RepoTarget) -> list:
        ensure.not_none(target, "target")
        return await self.api_connection.get(repo_path(target, "traffic", "popular", "paths"), accept=self._accept)

    async def get_all_referrers(self, target: RepoTarget) -> list:
        ensure.not_none(target, "target")
        return await self.api_connection.get(
            repo_path(target, "traffic", "popular", "referrers"), accept=self._accept
        )

    async def get_clones(self, target: RepoTarget, per: RepositoryTrafficRequest) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(per, "per")
        return await self.api_connection.get(
            repo_path(target, "traffic", "clones"), params=per.to_parameters(), accept=self._accept
        )

    async def get_views(self, target: RepoTarget, per: RepositoryTrafficRequest) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(per, "per")
        return await self.api_connection.get(
            repo_path(target, "traffic", "views"), params=per.to_parameters(), accept=self._accept
        )


class StarredClient(ApiClient):
    """Stargazers and the current user's stars.

    The ``user/starred/{owner}/{name}`` routes have no repository-id form, so
    they take an ``OwnerRepo``.
    """

    async def get_all_stargazers(self, target: RepoTarget, options: ApiOptions = API_OPTIONS_NONE) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(repo_path(target, "stargazers"), options=options)

    async def get_all_for_current(
        self, request: StarredRequest | None = None, options: ApiOptions = API_OPTIONS_NONE
    ) -> list:
        ensure.not_none(options, "options")
        request = request or StarredRequest()
        return await self.api_connection.get_all(
            path("user", "starred"), params=request.to_parameters(), options=options
        )

    async def get_all_for_user(
        self, user: str, request: StarredRequest | None = None, options: ApiOptions = API_OPTIONS_NONE
    ) -> list:
        ensure.not_none_or_empty_string(user, "user")
        ensure.not_none(options, "options")
        request = request or StarredRequest()
        return await self.api_connection.get_all(
            path("users", user, "starred"), params=request.to_parameters(), options=options
        )

    async def check_starred(self, repo: OwnerRepo) -> bool:
        return await probe.check(self.connection, _starred_path(repo))

    async def star_repo(self, repo: OwnerRepo) -> bool:
        return await probe.check(self.connection, _starred_path(repo), method="put")

    async def remove_star_from_repo(self, repo: OwnerRepo) -> bool:
        return await probe.check(self.connection, _starred_path(repo), method="delete")


def _starred_path(repo: OwnerRepo) -> str:
    ensure.not_none(repo, "repo")
    if not isinstance(repo, OwnerRepo):
        raise TypeError(f"repo must be OwnerRepo, got {type(repo).__name__}")
    return path("user", "starred", repo.owner, repo.name)


class RepositoriesClient:
    """Groups the repository sub-clients under one attribute."""

    def __init__(self, api_connection):
        self.collaborator = RepositoryCollaboratorsClient(api_connection)
        self.branch = RepositoryBranchesClient(api_connection)
        self.traffic = RepositoryTrafficClient(api_connection)
