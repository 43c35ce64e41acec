"""Media types sent in the Accept header, per endpoint family.

Families missing from ``MEDIA_TYPES`` use the connection default.
"""

STABLE_VERSION = "application/vnd.github.v3"

REACTIONS_PREVIEW = "application/vnd.github.squirrel-girl-preview"
CHECKS_API_PREVIEW = "application/vnd.github.antiope-preview+json"
PROJECTS_API_PREVIEW = "application/vnd.github.inertia-preview+json"
REPOSITORY_TRAFFIC_API_PREVIEW = "application/vnd.github.spiderman-preview"
TEAM_DISCUSSIONS_API_PREVIEW = "application/vnd.github.echo-preview+json"
ORGANIZATION_MEMBERSHIP_PREVIEW = "application/vnd.github.korra-preview+json"

MEDIA_TYPES: dict[str, tuple[str, ...]] = {
    "assignees": (STABLE_VERSION,),
    "checks.runs": (CHECKS_API_PREVIEW,),
    "issues.reactions": (REACTIONS_PREVIEW,),
    "orgs.invitations": (ORGANIZATION_MEMBERSHIP_PREVIEW,),
    "projects": (PROJECTS_API_PREVIEW,),
    "repos.traffic": (REPOSITORY_TRAFFIC_API_PREVIEW,),
    "teams.discussions": (TEAM_DISCUSSIONS_API_PREVIEW, REACTIONS_PREVIEW),
}


def concat(*media_types: str) -> str:
    return ",".join(media_types)


def accept_for(operation: str) -> str | None:
    """Accept header value for an endpoint family, or None for the default."""
    media_types = MEDIA_TYPES.get(operation)
    if not media_types:
        return None
    return concat(*media_types)
