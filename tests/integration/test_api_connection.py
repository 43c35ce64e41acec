"""Integration tests for body-level calls and Link-header pagination."""

from unittest.mock import AsyncMock

import httpx
import pytest

from github_rest_client.api_connection import ApiConnection
from github_rest_client.connection import Connection
from github_rest_client.errors import NullArgumentError
from github_rest_client.models import ApiInfo, ApiOptions, ApiResponse

BASE_URL = "https://api.github.com/"
ISSUES_URL = "https://api.github.com/repos/fake/repo/issues"
PAGES = {1: [1, 2], 2: [3], 3: [4]}


class _PagedIssues:
    """Serves three pages of issues linked with ``rel="next"``."""

    def __init__(self):
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = int(request.url.params.get("page", "1"))
        headers = {}
        if page + 1 in PAGES:
            headers["Link"] = f'<{ISSUES_URL}?page={page + 1}>; rel="next", <{ISSUES_URL}?page=3>; rel="last"'
        return httpx.Response(200, json=PAGES[page], headers=headers)


def _api(handler) -> ApiConnection:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
    return ApiConnection(Connection(token="test-token", client=client))


class TestApiConnection:
    def test_requires_connection(self):
        with pytest.raises(NullArgumentError):
            ApiConnection(None)

    @pytest.mark.asyncio
    async def test_get_returns_body(self):
        api = _api(lambda request: httpx.Response(200, json={"id": 1}))

        assert await api.get("repos/fake/repo/issues/1") == {"id": 1}

    @pytest.mark.asyncio
    async def test_get_all_follows_every_page(self):
        handler = _PagedIssues()

        issues = await _api(handler).get_all("repos/fake/repo/issues")

        assert issues == [1, 2, 3, 4]
        assert len(handler.requests) == 3

    @pytest.mark.asyncio
    async def test_get_all_sends_filters_on_first_page_only(self):
        handler = _PagedIssues()

        await _api(handler).get_all("repos/fake/repo/issues", {"state": "open"})

        assert handler.requests[0].url.params["state"] == "open"
        assert "state" not in handler.requests[1].url.params

    @pytest.mark.asyncio
    async def test_get_all_stops_after_page_count(self):
        handler = _PagedIssues()
        options = ApiOptions(page_size=2, page_count=1, start_page=1)

        issues = await _api(handler).get_all("repos/fake/repo/issues", options=options)

        assert issues == [1, 2]
        assert len(handler.requests) == 1
        assert handler.requests[0].url.params["page"] == "1"
        assert handler.requests[0].url.params["per_page"] == "2"

    @pytest.mark.asyncio
    async def test_get_all_starts_at_start_page(self):
        handler = _PagedIssues()

        issues = await _api(handler).get_all("repos/fake/repo/issues", options=ApiOptions(page_count=2, start_page=2))

        assert issues == [3, 4]
        assert len(handler.requests) == 2

    @pytest.mark.asyncio
    async def test_get_all_keeps_wrapped_pages(self):
        api = _api(lambda request: httpx.Response(200, json={"total_count": 1, "jobs": [{"id": 1}]}))

        pages = await api.get_all("repos/fake/repo/actions/runs/1/jobs")

        assert pages == [{"total_count": 1, "jobs": [{"id": 1}]}]

    @pytest.mark.asyncio
    async def test_get_all_passes_accept(self):
        handler = _PagedIssues()

        await _api(handler).get_all("repos/fake/repo/issues", accept="application/vnd.github.v3")

        assert all(request.headers["Accept"] == "application/vnd.github.v3" for request in handler.requests)

    @pytest.mark.asyncio
    async def test_get_all_rejects_missing_options(self):
        with pytest.raises(NullArgumentError):
            await _api(_PagedIssues()).get_all("repos/fake/repo/issues", options=None)

    @pytest.mark.asyncio
    async def test_write_methods_return_bodies(self):
        seen = []

        def handler(request):
            seen.append(request.method)
            if request.method == "DELETE":
                return httpx.Response(204)
            return httpx.Response(200, json={"method": request.method})

        api = _api(handler)

        assert await api.post("repos/fake/repo/issues", {"title": "t"}) == {"method": "POST"}
        assert await api.put("repos/fake/repo/issues/1/lock") == {"method": "PUT"}
        assert await api.patch("repos/fake/repo/issues/1", {"state": "closed"}) == {"method": "PATCH"}
        assert await api.delete("repos/fake/repo/issues/1/lock") is None
        assert seen == ["POST", "PUT", "PATCH", "DELETE"]

    @pytest.mark.asyncio
    async def test_get_all_reads_next_link_from_each_page(self):
        connection = AsyncMock(spec=Connection)
        # another call on the shared connection left no next link behind
        connection.last_api_info = ApiInfo()
        connection.get_response.side_effect = [
            ApiResponse(status=200, body=[1, 2], link=f'<{ISSUES_URL}?page=2>; rel="next"'),
            ApiResponse(status=200, body=[3]),
        ]

        issues = await ApiConnection(connection).get_all("repos/fake/repo/issues")

        assert issues == [1, 2, 3]
        assert connection.get_response.await_args_list[1].args == (f"{ISSUES_URL}?page=2", None, None)
