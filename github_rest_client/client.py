"""Entry point wiring one connection into every endpoint client."""

from .api_connection import ApiConnection
from .clients import (
    ActionsClient,
    CheckRunsClient,
    IssuesClient,
    OrganizationsClient,
    ProjectsClient,
    PullRequestsClient,
    ReactionsClient,
    RepositoriesClient,
    SecretsClient,
    StarredClient,
)
from .connection import Connection


class GitHubClient:
    """GitHub REST API client.

    Usage:
        async with GitHubClient() as github:
            job = await github.actions.jobs.get(OwnerRepo("psf", "requests"), 123)

    Token, base URL and timeout come from settings (``GITHUB_TOKEN`` etc.) unless
    given here, or pass a ready ``connection`` to share or mock the transport.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        connection: Connection | None = None,
    ):
        self.connection = connection or Connection(base_url=base_url, token=token)
        self.api_connection = ApiConnection(self.connection)

        self.actions = ActionsClient(self.api_connection)
        self.check_run = CheckRunsClient(self.api_connection)
        self.issue = IssuesClient(self.api_connection)
        self.organization = OrganizationsClient(self.api_connection)
        self.project = ProjectsClient(self.api_connection)
        self.pull_request = PullRequestsClient(self.api_connection)
        self.reaction = ReactionsClient(self.api_connection)
        self.repository = RepositoriesClient(self.api_connection)
        self.secrets = SecretsClient(self.api_connection)
        self.starred = StarredClient(self.api_connection)

    @property
    def last_api_info(self):
        """Headers parsed from the most recent response (rate limit, links, scopes)."""
        return self.connection.last_api_info

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self.connection.aclose()
