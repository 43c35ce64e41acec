"""Relative URI construction for repository, organization and user routes."""

from dataclasses import dataclass
from urllib.parse import quote

from . import ensure

REPOS_PREFIX = "repos"
REPOSITORIES_PREFIX = "repositories"


@dataclass(frozen=True)
class OwnerRepo:
    """Address a repository by owner login and repository name."""

    owner: str
    name: str

    def __post_init__(self):
        ensure.not_none_or_empty_string(self.owner, "owner")
        ensure.not_none_or_empty_string(self.name, "name")

    def segments(self) -> tuple:
        return (REPOS_PREFIX, self.owner, self.name)


@dataclass(frozen=True)
class RepositoryId:
    """Address a repository by its numeric id."""

    id: int

    def __post_init__(self):
        ensure.greater_than_zero(self.id, "repository_id")

    def segments(self) -> tuple:
        return (REPOSITORIES_PREFIX, self.id)


RepoTarget = OwnerRepo | RepositoryId


def encode_segment(segment: str | int) -> str:
    # bool is an int subclass but never a valid path segment
    if isinstance(segment, bool):
        raise TypeError(f"Path segment cannot be a bool: {segment!r}")
    if isinstance(segment, int):
        return str(segment)
    if isinstance(segment, str):
        return quote(segment, safe="")
    raise TypeError(f"Unsupported path segment type: {type(segment).__name__}")


def path(*segments: str | int) -> str:
    """Join segments into a relative URI, e.g. ``path("orgs", org, "members")``."""
    return "/".join(encode_segment(segment) for segment in segments)


def repo_path(target: RepoTarget, *segments: str | int) -> str:
    """Relative URI under ``repos/{owner}/{name}`` or ``repositories/{id}``."""
    ensure.not_none(target, "target")
    if not isinstance(target, (OwnerRepo, RepositoryId)):
        raise TypeError(f"target must be OwnerRepo or RepositoryId, got {type(target).__name__}")
    return path(*target.segments(), *segments)
