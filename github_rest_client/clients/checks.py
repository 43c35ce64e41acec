"""Check runs and their annotations."""

from .. import accept_headers, ensure
from ..models import API_OPTIONS_NONE, ApiOptions
from ..paths import RepoTarget, repo_path
from ..requests import CheckRunRequest, CheckRunUpdate, NewCheckRun
from .base import ApiClient, merge_pages


class CheckRunsClient(ApiClient):
    _accept = accept_headers.accept_for("checks.runs")

    async def create(self, target: RepoTarget, new_check_run: NewCheckRun) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(new_check_run, "new_check_run")
        return await self.api_connection.post(repo_path(target, "check-runs"), new_check_run, accept=self._accept)

    async def update(self, target: RepoTarget, check_run_id: int, check_run_update: CheckRunUpdate) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(check_run_update, "check_run_update")
        return await self.api_connection.patch(
            repo_path(target, "check-runs", check_run_id), check_run_update, accept=self._accept
        )

    async def get(self, target: RepoTarget, check_run_id: int) -> dict:
        ensure.not_none(target, "target")
        return await self.api_connection.get(repo_path(target, "check-runs", check_run_id), accept=self._accept)

    async def get_all_for_reference(
        self,
        target: RepoTarget,
        reference: str,
        request: CheckRunRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(reference, "reference")
        ensure.not_none(options, "options")
        request = request or CheckRunRequest()
        pages = await self.api_connection.get_all(
            repo_path(target, "commits", reference, "check-runs"),
            params=request.to_parameters(),
            accept=self._accept,
            options=options,
        )
        return merge_pages(pages, "check_runs")

    async def get_all_for_check_suite(
        self,
        target: RepoTarget,
        check_suite_id: int,
        request: CheckRunRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        request = request or CheckRunRequest()
        pages = await self.api_connection.get_all(
            repo_path(target, "check-suites", check_suite_id, "check-runs"),
            params=request.to_parameters(),
            accept=self._accept,
            options=options,
        )
        return merge_pages(pages, "check_runs")

    async def get_all_annotations(
        self, target: RepoTarget, check_run_id: int, options: ApiOptions = API_OPTIONS_NONE
    ) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(
            repo_path(target, "check-runs", check_run_id, "annotations"), accept=self._accept, options=options
        )
