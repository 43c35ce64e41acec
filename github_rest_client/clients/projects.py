"""Classic projects for repositories and organizations."""

from .. import accept_headers, ensure
from ..models import API_OPTIONS_NONE, ApiOptions
from ..paths import RepoTarget, path, repo_path
from ..requests import NewProject, ProjectRequest, ProjectUpdate
from .base import ApiClient


class ProjectsClient(ApiClient):
    _accept = accept_headers.accept_for("projects")

    async def get_all_for_repository(
        self,
        target: RepoTarget,
        request: ProjectRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        request = request or ProjectRequest()
        return await self.api_connection.get_all(
            repo_path(target, "projects"), params=request.to_parameters(), accept=self._accept, options=options
        )

    async def get_all_for_organization(
        self, org: str, request: ProjectRequest | None = None, options: ApiOptions = API_OPTIONS_NONE
    ) -> list:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(options, "options")
        request = request or ProjectRequest()
        return await self.api_connection.get_all(
            path("orgs", org, "projects"), params=request.to_parameters(), accept=self._accept, options=options
        )

    async def get(self, project_id: int) -> dict:
        return await self.api_connection.get(path("projects", project_id), accept=self._accept)

    async def create_for_repository(self, repository_id: int, new_project: NewProject) -> dict:
        ensure.greater_than_zero(repository_id, "repository_id")
        ensure.not_none(new_project, "new_project")
        return await self.api_connection.post(
            path("repositories", repository_id, "projects"), new_project, accept=self._accept
        )

    async def create_for_organization(self, org: str, new_project: NewProject) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(new_project, "new_project")
        return await self.api_connection.post(path("orgs", org, "projects"), new_project, accept=self._accept)

    async def update(self, project_id: int, project_update: ProjectUpdate) -> dict:
        ensure.not_none(project_update, "project_update")
        return await self.api_connection.patch(path("projects", project_id), project_update, accept=self._accept)

    async def delete(self, project_id: int) -> None:
        await self.api_connection.delete(path("projects", project_id), accept=self._accept)
