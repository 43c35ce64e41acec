"""GitHub Actions: workflow jobs and self-hosted runner groups."""

from .. import ensure
from ..models import API_OPTIONS_NONE, ApiOptions
from ..paths import RepoTarget, path, repo_path
from ..requests import WorkflowRunJobsRequest
from .base import ApiClient, merge_pages


class WorkflowJobsClient(ApiClient):
    async def get(self, target: RepoTarget, job_id: int) -> dict:
        ensure.not_none(target, "target")
        return await self.api_connection.get(repo_path(target, "actions", "jobs", job_id))

    async def rerun(self, target: RepoTarget, job_id: int) -> None:
        ensure.not_none(target, "target")
        await self.api_connection.post(repo_path(target, "actions", "jobs", job_id, "rerun"))

    async def get_logs(self, target: RepoTarget, job_id: int) -> str:
        """Plain-text log of a job; read from the raw response body."""
        ensure.not_none(target, "target")
        response = await self.connection.get_response(repo_path(target, "actions", "jobs", job_id, "logs"))
        return response.body

    async def list(
        self,
        target: RepoTarget,
        run_id: int,
        request: WorkflowRunJobsRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        request = request or WorkflowRunJobsRequest()
        pages = await self.api_connection.get_all(
            repo_path(target, "actions", "runs", run_id, "jobs"),
            params=request.to_parameters(),
            options=options,
        )
        return merge_pages(pages, "jobs")

    async def list_for_attempt(
        self,
        target: RepoTarget,
        run_id: int,
        attempt_number: int,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        pages = await self.api_connection.get_all(
            repo_path(target, "actions", "runs", run_id, "attempts", attempt_number, "jobs"),
            options=options,
        )
        return merge_pages(pages, "jobs")


class RunnerGroupsClient(ApiClient):
    """Self-hosted runner groups, at organization and enterprise level."""

    async def get_for_organization(self, org: str, runner_group_id: int) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        return await self.api_connection.get(path("orgs", org, "actions", "runner-groups", runner_group_id))

    async def get_for_enterprise(self, enterprise: str, runner_group_id: int) -> dict:
        ensure.not_none_or_empty_string(enterprise, "enterprise")
        return await self.api_connection.get(path("enterprises", enterprise, "actions", "runner-groups", runner_group_id))

    async def list_for_organization(self, org: str, options: ApiOptions = API_OPTIONS_NONE) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(options, "options")
        pages = await self.api_connection.get_all(path("orgs", org, "actions", "runner-groups"), options=options)
        return merge_pages(pages, "runner_groups")

    async def list_for_enterprise(self, enterprise: str, options: ApiOptions = API_OPTIONS_NONE) -> dict:
        ensure.not_none_or_empty_string(enterprise, "enterprise")
        ensure.not_none(options, "options")
        pages = await self.api_connection.get_all(
            path("enterprises", enterprise, "actions", "runner-groups"), options=options
        )
        return merge_pages(pages, "runner_groups")

    async def list_runners_for_organization(
        self, org: str, runner_group_id: int, options: ApiOptions = API_OPTIONS_NONE
    ) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(options, "options")
        pages = await self.api_connection.get_all(
            path("orgs", org, "actions", "runner-groups", runner_group_id, "runners"), options=options
        )
        return merge_pages(pages, "runners")

    async def list_runners_for_enterprise(
        self, enterprise: str, runner_group_id: int, options: ApiOptions = API_OPTIONS_NONE
    ) -> dict:
        ensure.not_none_or_empty_string(enterprise, "enterprise")
        ensure.not_none(options, "options")
        pages = await self.api_connection.get_all(
            path("enterprises", enterprise, "actions", "runner-groups", runner_group_id, "runners"), options=options
        )
        return merge_pages(pages, "runners")

    async def list_repositories_for_organization(
        self, org: str, runner_group_id: int, options: ApiOptions = API_OPTIONS_NONE
    ) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(options, "options")
        pages = await self.api_connection.get_all(
            path("orgs", org, "actions", "runner-groups", runner_group_id, "repositories"), options=options
        )
        return merge_pages(pages, "repositories")

    async def list_organizations_for_enterprise(
        self, enterprise: str, runner_group_id: int, options: ApiOptions = API_OPTIONS_NONE
    ) -> dict:
        ensure.not_none_or_empty_string(enterprise, "enterprise")
        ensure.not_none(options, "options")
        pages = await self.api_connection.get_all(
            path("enterprises", enterprise, "actions", "runner-groups", runner_group_id, "organizations"),
            options=options,
        )
        return merge_pages(pages, "organizations")


class ActionsClient:
    """Groups the Actions sub-clients under one attribute."""

    def __init__(self, api_connection):
        self.jobs = WorkflowJobsClient(api_connection)
        self.runner_groups = RunnerGroupsClient(api_connection)
