"""Shared fixtures: mocked connections for client tests."""

from unittest.mock import AsyncMock

import pytest

from github_rest_client.api_connection import ApiConnection
from github_rest_client.connection import Connection


@pytest.fixture
def api():
    """ApiConnection double; ``api.connection`` is the low-level connection double."""
    mock = AsyncMock(spec=ApiConnection)
    mock.connection = AsyncMock(spec=Connection)
    return mock
