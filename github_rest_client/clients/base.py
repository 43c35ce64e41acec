"""Shared base for endpoint clients."""

from .. import ensure
from ..api_connection import ApiConnection


class ApiClient:
    """Holds the ``ApiConnection`` every endpoint client issues its single call on."""

    def __init__(self, api_connection: ApiConnection):
        ensure.not_none(api_connection, "api_connection")
        self.api_connection = api_connection

    @property
    def connection(self):
        """Low-level connection, for calls that need the raw response."""
        return self.api_connection.connection


def merge_pages(pages: list[dict], key: str) -> dict:
    """Fold wrapped collection pages (``{"total_count": n, key: [...]}``) into one."""
    total_count = 0
    items = []
    for page in pages:
        total_count = max(total_count, page.get("total_count") or 0)
        items.extend(page.get(key) or [])
    return {"total_count": total_count, key: items}
