"""Issues, issue comments, assignees and milestones."""

from .. import accept_headers, ensure, probe
from ..models import API_OPTIONS_NONE, ApiOptions
from ..paths import RepoTarget, path, repo_path
from ..requests import (
    AssigneesUpdate,
    IssueCommentRequest,
    IssueRequest,
    IssueUpdate,
    LockReason,
    MilestoneRequest,
    MilestoneUpdate,
    NewIssue,
    NewMilestone,
    RepositoryIssueRequest,
)
from .base import ApiClient


class IssuesClient(ApiClient):
    def __init__(self, api_connection):
        super().__init__(api_connection)
        self.comment = IssueCommentsClient(api_connection)
        self.assignee = AssigneesClient(api_connection)
        self.milestone = MilestonesClient(api_connection)

    async def get(self, target: RepoTarget, number: int) -> dict:
        ensure.not_none(target, "target")
        return await self.api_connection.get(repo_path(target, "issues", number))

    async def get_all_for_current(
        self, request: IssueRequest | None = None, options: ApiOptions = API_OPTIONS_NONE
    ) -> list:
        """Issues assigned to the authenticated user across every visible repository."""
        ensure.not_none(options, "options")
        request = request or IssueRequest()
        return await self.api_connection.get_all("issues", params=request.to_parameters(), options=options)

    async def get_all_for_owned_and_member_repositories(
        self, request: IssueRequest | None = None, options: ApiOptions = API_OPTIONS_NONE
    ) -> list:
        ensure.not_none(options, "options")
        request = request or IssueRequest()
        return await self.api_connection.get_all(
            path("user", "issues"), params=request.to_parameters(), options=options
        )

    async def get_all_for_organization(
        self, org: str, request: IssueRequest | None = None, options: ApiOptions = API_OPTIONS_NONE
    ) -> list:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(options, "options")
        request = request or IssueRequest()
        return await self.api_connection.get_all(
            path("orgs", org, "issues"), params=request.to_parameters(), options=options
        )

    async def get_all_for_repository(
        self,
        target: RepoTarget,
        request: RepositoryIssueRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        request = request or RepositoryIssueRequest()
        return await self.api_connection.get_all(
            repo_path(target, "issues"), params=request.to_parameters(), options=options
        )

    async def create(self, target: RepoTarget, new_issue: NewIssue) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(new_issue, "new_issue")
        return await self.api_connection.post(repo_path(target, "issues"), new_issue)

    async def update(self, target: RepoTarget, number: int, issue_update: IssueUpdate) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(issue_update, "issue_update")
        return await self.api_connection.patch(repo_path(target, "issues", number), issue_update)

    async def lock(self, target: RepoTarget, number: int, lock_reason: LockReason | None = None) -> None:
        ensure.not_none(target, "target")
        uri = repo_path(target, "issues", number, "lock")
        if lock_reason is None:
            await self.api_connection.put(uri)
        else:
            await self.api_connection.put(uri, {"lock_reason": lock_reason})

    async def unlock(self, target: RepoTarget, number: int) -> None:
        ensure.not_none(target, "target")
        await self.api_connection.delete(repo_path(target, "issues", number, "lock"))


class IssueCommentsClient(ApiClient):
    async def get(self, target: RepoTarget, comment_id: int) -> dict:
        ensure.not_none(target, "target")
        return await self.api_connection.get(repo_path(target, "issues", "comments", comment_id))

    async def get_all_for_repository(
        self,
        target: RepoTarget,
        request: IssueCommentRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        request = request or IssueCommentRequest()
        return await self.api_connection.get_all(
            repo_path(target, "issues", "comments"), params=request.to_parameters(), options=options
        )

    async def get_all_for_issue(
        self,
        target: RepoTarget,
        number: int,
        request: IssueCommentRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        request = request or IssueCommentRequest()
        return await self.api_connection.get_all(
            repo_path(target, "issues", number, "comments"), params=request.to_parameters(), options=options
        )

    async def create(self, target: RepoTarget, number: int, new_comment: str) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(new_comment, "new_comment")
        return await self.api_connection.post(repo_path(target, "issues", number, "comments"), {"body": new_comment})

    async def update(self, target: RepoTarget, comment_id: int, comment_update: str) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(comment_update, "comment_update")
        return await self.api_connection.patch(
            repo_path(target, "issues", "comments", comment_id), {"body": comment_update}
        )

    async def delete(self, target: RepoTarget, comment_id: int) -> None:
        ensure.not_none(target, "target")
        await self.api_connection.delete(repo_path(target, "issues", "comments", comment_id))


class AssigneesClient(ApiClient):
    async def get_all_for_repository(self, target: RepoTarget, options: ApiOptions = API_OPTIONS_NONE) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(
            repo_path(target, "assignees"), accept=accept_headers.accept_for("assignees"), options=options
        )

    async def check_assignee(self, target: RepoTarget, assignee: str) -> bool:
        ensure.not_none(target, "target")
        ensure.not_none_or_empty_string(assignee, "assignee")
        return await probe.check(self.connection, repo_path(target, "assignees", assignee))

    async def add_assignees(self, target: RepoTarget, number: int, assignees: AssigneesUpdate) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(assignees, "assignees")
        return await self.api_connection.post(repo_path(target, "issues", number, "assignees"), assignees)

    async def remove_assignees(self, target: RepoTarget, number: int, assignees: AssigneesUpdate) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(assignees, "assignees")
        return await self.api_connection.delete(repo_path(target, "issues", number, "assignees"), assignees)


class MilestonesClient(ApiClient):
    async def get(self, target: RepoTarget, number: int) -> dict:
        ensure.not_none(target, "target")
        return await self.api_connection.get(repo_path(target, "milestones", number))

    async def get_all_for_repository(
        self,
        target: RepoTarget,
        request: MilestoneRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> list:
        ensure.not_none(target, "target")
        ensure.not_none(options, "options")
        request = request or MilestoneRequest()
        return await self.api_connection.get_all(
            repo_path(target, "milestones"), params=request.to_parameters(), options=options
        )

    async def create(self, target: RepoTarget, new_milestone: NewMilestone) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(new_milestone, "new_milestone")
        return await self.api_connection.post(repo_path(target, "milestones"), new_milestone)

    async def update(self, target: RepoTarget, number: int, milestone_update: MilestoneUpdate) -> dict:
        ensure.not_none(target, "target")
        ensure.not_none(milestone_update, "milestone_update")
        return await self.api_connection.patch(repo_path(target, "milestones", number), milestone_update)

    async def delete(self, target: RepoTarget, number: int) -> None:
        ensure.not_none(target, "target")
        await self.api_connection.delete(repo_path(target, "milestones", number))
