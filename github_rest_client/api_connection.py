"""Body-level API on top of ``Connection``, including Link-header pagination."""

from . import ensure, pagination
from .api_info import parse_links
from .connection import Connection
from .models import API_OPTIONS_NONE, ApiOptions


class ApiConnection:
    """What endpoint clients talk to: every method returns the decoded body.

    ``connection`` exposes the underlying ``Connection`` for calls that need
    the raw status code (probes) or the raw body (logs).
    """

    def __init__(self, connection: Connection):
        ensure.not_none(connection, "connection")
        self.connection = connection

    async def get(self, uri: str, params: dict[str, str] | None = None, accept: str | None = None):
        ensure.not_none(uri, "uri")
        response = await self.connection.get_response(uri, params, accept)
        return response.body

    async def get_all(
        self,
        uri: str,
        params: dict[str, str] | None = None,
        accept: str | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> list:
        """Fetch every page allowed by ``options``.

        List pages are concatenated. Object pages (``{"total_count": .., "items": [..]}``
        style collections) are returned one entry per page.
        """
        ensure.not_none(uri, "uri")
        ensure.not_none(options, "options")

        results = []
        response = await self.connection.get_response(uri, pagination.setup(params, options), accept)
        while True:
            _collect(results, response.body)
            next_url = parse_links(response.link).get("next")
            if not next_url or not pagination.should_continue(next_url, options):
                return results
            # next links already carry the full query string
            response = await self.connection.get_response(next_url, None, accept)

    async def post(self, uri: str, body=None, accept: str | None = None, content_type: str | None = None):
        ensure.not_none(uri, "uri")
        response = await self.connection.post_response(uri, body, accept, content_type)
        return response.body

    async def put(self, uri: str, body=None, accept: str | None = None):
        ensure.not_none(uri, "uri")
        response = await self.connection.put_response(uri, body, accept)
        return response.body

    async def patch(self, uri: str, body=None, accept: str | None = None):
        ensure.not_none(uri, "uri")
        response = await self.connection.patch_response(uri, body, accept)
        return response.body

    async def delete(self, uri: str, body=None, accept: str | None = None):
        ensure.not_none(uri, "uri")
        response = await self.connection.delete_response(uri, body, accept)
        return response.body


def _collect(results: list, body) -> None:
    if body is None:
        return
    if isinstance(body, list):
        results.extend(body)
    else:
        results.append(body)
