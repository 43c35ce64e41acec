"""Actions secrets at organization, repository and environment scope.

Secret values are never sent in the clear: callers encrypt them with the
scope's public key (see ``get_public_key``) and send the result as
``encrypted_value`` together with ``key_id``.
"""

from .. import ensure, pagination
from ..models import API_OPTIONS_NONE, ApiOptions
from ..paths import RepoTarget, path, repo_path
from ..requests import (
    SelectedRepositoryCollection,
    UpsertEnvironmentSecret,
    UpsertOrganizationSecret,
    UpsertRepositorySecret,
)
from .base import ApiClient


def _ensure_upsert(upsert_secret, name: str) -> None:
    ensure.not_none(upsert_secret, name)
    ensure.not_none_or_empty_string(upsert_secret.encrypted_value, f"{name}.encrypted_value")
    ensure.not_none_or_empty_string(upsert_secret.key_id, f"{name}.key_id")


class OrganizationSecretsClient(ApiClient):
    async def get_public_key(self, org: str) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        return await self.api_connection.get(path("orgs", org, "actions", "secrets", "public-key"))

    async def get_all(self, org: str) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        return await self.api_connection.get(path("orgs", org, "actions", "secrets"))

    async def get(self, org: str, secret_name: str) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        return await self.api_connection.get(path("orgs", org, "actions", "secrets", secret_name))

    async def create_or_update(self, org: str, secret_name: str, upsert_secret: UpsertOrganizationSecret):
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        _ensure_upsert(upsert_secret, "upsert_secret")
        return await self.api_connection.put(path("orgs", org, "actions", "secrets", secret_name), upsert_secret)

    async def delete(self, org: str, secret_name: str) -> None:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        await self.api_connection.delete(path("orgs", org, "actions", "secrets", secret_name))

    async def get_selected_repositories(self, org: str, secret_name: str) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        return await self.api_connection.get(path("orgs", org, "actions", "secrets", secret_name, "repositories"))

    async def set_selected_repositories(
        self, org: str, secret_name: str, repositories: SelectedRepositoryCollection
    ) -> None:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        ensure.not_none(repositories, "repositories")
        ensure.not_none(repositories.selected_repository_ids, "repositories.selected_repository_ids")
        await self.api_connection.put(
            path("orgs", org, "actions", "secrets", secret_name, "repositories"), repositories
        )

    async def add_repo_to_organization_secret(self, org: str, secret_name: str, repo_id: int) -> None:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        await self.api_connection.put(path("orgs", org, "actions", "secrets", secret_name, "repositories", repo_id))

    async def remove_repo_from_organization_secret(self, org: str, secret_name: str, repo_id: int) -> None:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        await self.api_connection.delete(
            path("orgs", org, "actions", "secrets", secret_name, "repositories", repo_id)
        )


class RepositorySecretsClient(ApiClient):
    async def get_public_key(self, target: RepoTarget) -> dict:
        ensure.not_none(target, "target")
        return await self.api_connection.get(repo_path(target, "actions", "secrets", "public-key"))

    async def get_all(self, target: RepoTarget) -> dict:
        ensure.not_none(target, "target")
        return await self.api_connection.get(repo_path(target, "actions", "secrets"))

    async def get(self, target: RepoTarget, secret_name: str) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        return await self.api_connection.get(repo_path(target, "actions", "secrets", secret_name))

    async def create_or_update(self, target: RepoTarget, secret_name: str, upsert_secret: UpsertRepositorySecret):
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        _ensure_upsert(upsert_secret, "upsert_secret")
        return await self.api_connection.put(repo_path(target, "actions", "secrets", secret_name), upsert_secret)

    async def delete(self, target: RepoTarget, secret_name: str) -> None:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        await self.api_connection.delete(repo_path(target, "actions", "secrets", secret_name))


class EnvironmentSecretsClient(ApiClient):
    """Environment secrets are addressed by numeric repository id only."""

    def _path(self, repository_id: int, environment_name: str, *segments) -> str:
        return path("repositories", repository_id, "environments", environment_name, "secrets", *segments)

    async def get_public_key(self, repository_id: int, environment_name: str) -> dict:
        ensure.greater_than_zero(repository_id, "repository_id")
        ensure.not_none_or_empty_string(environment_name, "environment_name")
        return await self.api_connection.get(self._path(repository_id, environment_name, "public-key"))

    async def get_all(
        self, repository_id: int, environment_name: str, options: ApiOptions = API_OPTIONS_NONE
    ) -> dict:
        ensure.greater_than_zero(repository_id, "repository_id")
        ensure.not_none_or_empty_string(environment_name, "environment_name")
        ensure.not_none(options, "options")
        params = pagination.setup(None, options)
        if params:
            return await self.api_connection.get(self._path(repository_id, environment_name), params=params)
        return await self.api_connection.get(self._path(repository_id, environment_name))

    async def get(self, repository_id: int, environment_name: str, secret_name: str) -> dict:
        ensure.greater_than_zero(repository_id, "repository_id")
        ensure.not_none_or_empty_string(environment_name, "environment_name")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        return await self.api_connection.get(self._path(repository_id, environment_name, secret_name))

    async def create_or_update(
        self,
        repository_id: int,
        environment_name: str,
        secret_name: str,
        upsert_secret: UpsertEnvironmentSecret,
    ):
        ensure.greater_than_zero(repository_id, "repository_id")
        ensure.not_none_or_empty_string(environment_name, "environment_name")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        _ensure_upsert(upsert_secret, "upsert_secret")
        return await self.api_connection.put(
            self._path(repository_id, environment_name, secret_name), upsert_secret
        )

    async def delete(self, repository_id: int, environment_name: str, secret_name: str) -> None:
        ensure.greater_than_zero(repository_id, "repository_id")
        ensure.not_none_or_empty_string(environment_name, "environment_name")
        ensure.not_none_or_empty_string(secret_name, "secret_name")
        await self.api_connection.delete(self._path(repository_id, environment_name, secret_name))


class SecretsClient:
    """Groups the secret sub-clients under one attribute."""

    def __init__(self, api_connection):
        self.organization = OrganizationSecretsClient(api_connection)
        self.repository = RepositorySecretsClient(api_connection)
        self.environment = EnvironmentSecretsClient(api_connection)
