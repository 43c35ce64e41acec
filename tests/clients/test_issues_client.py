"""Tests for issue, issue comment, assignee and milestone clients."""

from datetime import datetime, timezone

import pytest

from github_rest_client.clients.issues import AssigneesClient, IssueCommentsClient, IssuesClient, MilestonesClient
from github_rest_client.errors import ApiError, EmptyOrWhitespaceArgumentError, NotFoundError, NullArgumentError
from github_rest_client.models import API_OPTIONS_NONE, ApiOptions, ApiResponse
from github_rest_client.paths import OwnerRepo, RepositoryId
from github_rest_client.requests import (
    AssigneesUpdate,
    IssueCommentRequest,
    IssueRequest,
    IssueUpdate,
    ItemState,
    ItemStateFilter,
    LockReason,
    MilestoneRequest,
    MilestoneSort,
    NewIssue,
    NewMilestone,
    RepositoryIssueRequest,
    SortDirection,
)

REPO = OwnerRepo("fake", "repo")
REPO_ID = RepositoryId(1)
DEFAULT_ISSUE_PARAMS = {"filter": "assigned", "state": "open", "sort": "created", "direction": "desc"}


class TestIssuesClient:
    def test_exposes_sub_clients(self, api):
        client = IssuesClient(api)

        assert isinstance(client.comment, IssueCommentsClient)
        assert isinstance(client.assignee, AssigneesClient)
        assert isinstance(client.milestone, MilestonesClient)

    @pytest.mark.asyncio
    async def test_get(self, api):
        await IssuesClient(api).get(REPO, 42)

        api.get.assert_awaited_once_with("repos/fake/repo/issues/42")

    @pytest.mark.asyncio
    async def test_get_all_for_current(self, api):
        await IssuesClient(api).get_all_for_current()

        api.get_all.assert_awaited_once_with("issues", params=DEFAULT_ISSUE_PARAMS, options=API_OPTIONS_NONE)

    @pytest.mark.asyncio
    async def test_get_all_for_owned_and_member_repositories(self, api):
        options = ApiOptions(page_size=1, page_count=1, start_page=1)

        await IssuesClient(api).get_all_for_owned_and_member_repositories(options=options)

        api.get_all.assert_awaited_once_with("user/issues", params=DEFAULT_ISSUE_PARAMS, options=options)

    @pytest.mark.asyncio
    async def test_get_all_for_organization(self, api):
        request = IssueRequest(state=ItemStateFilter.CLOSED, sort_direction=SortDirection.ASCENDING)

        await IssuesClient(api).get_all_for_organization("org", request)

        api.get_all.assert_awaited_once_with(
            "orgs/org/issues",
            params={"filter": "assigned", "state": "closed", "sort": "created", "direction": "asc"},
            options=API_OPTIONS_NONE,
        )

    @pytest.mark.asyncio
    async def test_get_all_for_repository(self, api):
        request = RepositoryIssueRequest(milestone="3", since=datetime(2024, 1, 1, tzinfo=timezone.utc))

        await IssuesClient(api).get_all_for_repository(REPO_ID, request)

        api.get_all.assert_awaited_once_with(
            "repositories/1/issues",
            params={**DEFAULT_ISSUE_PARAMS, "since": "2024-01-01T00:00:00Z", "milestone": "3"},
            options=API_OPTIONS_NONE,
        )

    @pytest.mark.asyncio
    async def test_create(self, api):
        new_issue = NewIssue(title="a title")

        await IssuesClient(api).create(REPO, new_issue)

        api.post.assert_awaited_once_with("repos/fake/repo/issues", new_issue)

    @pytest.mark.asyncio
    async def test_create_requires_issue(self, api):
        with pytest.raises(NullArgumentError) as exc:
            await IssuesClient(api).create(REPO, None)
        assert exc.value.param_name == "new_issue"

    @pytest.mark.asyncio
    async def test_update(self, api):
        update = IssueUpdate(state=ItemState.CLOSED)

        await IssuesClient(api).update(REPO, 42, update)

        api.patch.assert_awaited_once_with("repos/fake/repo/issues/42", update)

    @pytest.mark.asyncio
    async def test_lock(self, api):
        await IssuesClient(api).lock(REPO, 42)

        api.put.assert_awaited_once_with("repos/fake/repo/issues/42/lock")

    @pytest.mark.asyncio
    async def test_lock_with_reason(self, api):
        await IssuesClient(api).lock(REPO, 42, LockReason.TOO_HEATED)

        api.put.assert_awaited_once_with("repos/fake/repo/issues/42/lock", {"lock_reason": LockReason.TOO_HEATED})

    @pytest.mark.asyncio
    async def test_unlock(self, api):
        await IssuesClient(api).unlock(REPO_ID, 42)

        api.delete.assert_awaited_once_with("repositories/1/issues/42/lock")


class TestIssueCommentsClient:
    @pytest.mark.asyncio
    async def test_get(self, api):
        await IssueCommentsClient(api).get(REPO, 22)

        api.get.assert_awaited_once_with("repos/fake/repo/issues/comments/22")

    @pytest.mark.asyncio
    async def test_get_all_for_repository(self, api):
        await IssueCommentsClient(api).get_all_for_repository(REPO)

        api.get_all.assert_awaited_once_with(
            "repos/fake/repo/issues/comments",
            params={"sort": "created", "direction": "asc"},
            options=API_OPTIONS_NONE,
        )

    @pytest.mark.asyncio
    async def test_get_all_for_issue(self, api):
        request = IssueCommentRequest(direction=SortDirection.DESCENDING)

        await IssueCommentsClient(api).get_all_for_issue(REPO_ID, 3, request)

        api.get_all.assert_awaited_once_with(
            "repositories/1/issues/3/comments",
            params={"sort": "created", "direction": "desc"},
            options=API_OPTIONS_NONE,
        )

    @pytest.mark.asyncio
    async def test_create(self, api):
        await IssueCommentsClient(api).create(REPO, 3, "a comment")

        api.post.assert_awaited_once_with("repos/fake/repo/issues/3/comments", {"body": "a comment"})

    @pytest.mark.asyncio
    async def test_update(self, api):
        await IssueCommentsClient(api).update(REPO, 22, "edited")

        api.patch.assert_awaited_once_with("repos/fake/repo/issues/comments/22", {"body": "edited"})

    @pytest.mark.asyncio
    async def test_delete(self, api):
        await IssueCommentsClient(api).delete(REPO, 22)

        api.delete.assert_awaited_once_with("repos/fake/repo/issues/comments/22")


class TestAssigneesClient:
    @pytest.mark.asyncio
    async def test_get_all_sends_stable_media_type(self, api):
        await AssigneesClient(api).get_all_for_repository(REPO)

        api.get_all.assert_awaited_once_with(
            "repos/fake/repo/assignees", accept="application/vnd.github.v3", options=API_OPTIONS_NONE
        )

    @pytest.mark.asyncio
    async def test_check_assignee_204_is_true(self, api):
        api.connection.get_response.return_value = ApiResponse(status=204)

        assert await AssigneesClient(api).check_assignee(REPO, "hubot") is True
        api.connection.get_response.assert_awaited_once_with("repos/fake/repo/assignees/hubot")

    @pytest.mark.asyncio
    async def test_check_assignee_404_is_false(self, api):
        api.connection.get_response.side_effect = NotFoundError(ApiResponse(status=404))

        assert await AssigneesClient(api).check_assignee(REPO_ID, "hubot") is False

    @pytest.mark.asyncio
    async def test_check_assignee_409_raises(self, api):
        api.connection.get_response.return_value = ApiResponse(status=409)

        with pytest.raises(ApiError):
            await AssigneesClient(api).check_assignee(REPO, "hubot")

    @pytest.mark.asyncio
    async def test_check_assignee_rejects_blank_login(self, api):
        with pytest.raises(EmptyOrWhitespaceArgumentError):
            await AssigneesClient(api).check_assignee(REPO, " ")

    @pytest.mark.asyncio
    async def test_add_assignees(self, api):
        update = AssigneesUpdate(assignees=["hubot"])

        await AssigneesClient(api).add_assignees(REPO, 2, update)

        api.post.assert_awaited_once_with("repos/fake/repo/issues/2/assignees", update)

    @pytest.mark.asyncio
    async def test_remove_assignees(self, api):
        update = AssigneesUpdate(assignees=["hubot"])

        await AssigneesClient(api).remove_assignees(REPO, 2, update)

        api.delete.assert_awaited_once_with("repos/fake/repo/issues/2/assignees", update)


class TestMilestonesClient:
    @pytest.mark.asyncio
    async def test_get(self, api):
        await MilestonesClient(api).get(REPO, 42)

        api.get.assert_awaited_once_with("repos/fake/repo/milestones/42")

    @pytest.mark.asyncio
    async def test_get_all_for_repository(self, api):
        await MilestonesClient(api).get_all_for_repository(REPO)

        api.get_all.assert_awaited_once_with(
            "repos/fake/repo/milestones",
            params={"state": "open", "sort": "due_date", "direction": "asc"},
            options=API_OPTIONS_NONE,
        )

    @pytest.mark.asyncio
    async def test_get_all_for_repository_with_request(self, api):
        request = MilestoneRequest(sort_property=MilestoneSort.COMPLETENESS, sort_direction=SortDirection.DESCENDING)

        await MilestonesClient(api).get_all_for_repository(REPO_ID, request)

        api.get_all.assert_awaited_once_with(
            "repositories/1/milestones",
            params={"state": "open", "sort": "completeness", "direction": "desc"},
            options=API_OPTIONS_NONE,
        )

    @pytest.mark.asyncio
    async def test_create(self, api):
        milestone = NewMilestone(title="v1")

        await MilestonesClient(api).create(REPO, milestone)

        api.post.assert_awaited_once_with("repos/fake/repo/milestones", milestone)

    @pytest.mark.asyncio
    async def test_delete(self, api):
        await MilestonesClient(api).delete(REPO_ID, 42)

        api.delete.assert_awaited_once_with("repositories/1/milestones/42")
