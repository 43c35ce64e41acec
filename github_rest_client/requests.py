"""Request filters (sent as query parameters) and request bodies."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .query import BodyModel, RequestParameters, param


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class ItemStateFilter(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class ItemState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class IssueFilter(str, Enum):
    ASSIGNED = "assigned"
    CREATED = "created"
    MENTIONED = "mentioned"
    SUBSCRIBED = "subscribed"
    REPOS = "repos"
    ALL = "all"


class IssueSort(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    COMMENTS = "comments"


class CommentSort(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


class MilestoneSort(str, Enum):
    DUE_DATE = "due_date"
    COMPLETENESS = "completeness"


class CollaboratorAffiliation(str, Enum):
    OUTSIDE = "outside"
    DIRECT = "direct"
    ALL = "all"


class CollaboratorPermission(str, Enum):
    PULL = "pull"
    TRIAGE = "triage"
    PUSH = "push"
    MAINTAIN = "maintain"
    ADMIN = "admin"


class OrganizationMembersFilter(str, Enum):
    TWO_FACTOR_AUTHENTICATION_DISABLED = "2fa_disabled"
    ALL = "all"


class OrganizationMembersRole(str, Enum):
    ALL = "all"
    ADMIN = "admin"
    MEMBER = "member"


class StarredSort(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


class CheckStatusFilter(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class CheckRunCompletedAtFilter(str, Enum):
    LATEST = "latest"
    ALL = "all"


class TrafficDayOrWeek(str, Enum):
    DAY = "day"
    WEEK = "week"


class WorkflowRunJobsFilter(str, Enum):
    LATEST = "latest"
    ALL = "all"


class ReactionType(str, Enum):
    PLUS_ONE = "+1"
    MINUS_ONE = "-1"
    LAUGH = "laugh"
    CONFUSED = "confused"
    HEART = "heart"
    HOORAY = "hooray"
    ROCKET = "rocket"
    EYES = "eyes"


class LockReason(str, Enum):
    OFF_TOPIC = "off-topic"
    TOO_HEATED = "too heated"
    RESOLVED = "resolved"
    SPAM = "spam"


# -- query parameter requests -------------------------------------------------


@dataclass
class IssueRequest(RequestParameters):
    filter: IssueFilter = IssueFilter.ASSIGNED
    state: ItemStateFilter = ItemStateFilter.OPEN
    labels: list[str] | None = None
    sort: IssueSort = IssueSort.CREATED
    sort_direction: SortDirection = param("direction", default=SortDirection.DESCENDING)
    since: datetime | None = None


@dataclass
class RepositoryIssueRequest(IssueRequest):
    milestone: str | None = None
    assignee: str | None = None
    creator: str | None = None
    mentioned: str | None = None


@dataclass
class IssueCommentRequest(RequestParameters):
    sort: CommentSort = CommentSort.CREATED
    direction: SortDirection = SortDirection.ASCENDING
    since: datetime | None = None


@dataclass
class MilestoneRequest(RequestParameters):
    state: ItemStateFilter = ItemStateFilter.OPEN
    sort_property: MilestoneSort = param("sort", default=MilestoneSort.DUE_DATE)
    sort_direction: SortDirection = param("direction", default=SortDirection.ASCENDING)


@dataclass
class PullRequestReviewCommentRequest(RequestParameters):
    sort: CommentSort = CommentSort.CREATED
    direction: SortDirection = SortDirection.ASCENDING
    since: datetime | None = None


@dataclass
class RepositoryCollaboratorListRequest(RequestParameters):
    affiliation: CollaboratorAffiliation = CollaboratorAffiliation.ALL
    permission: CollaboratorPermission | None = None


@dataclass
class OrganizationMembersRequest(RequestParameters):
    filter: OrganizationMembersFilter | None = None
    role: OrganizationMembersRole | None = None


@dataclass
class StarredRequest(RequestParameters):
    sort_property: StarredSort = param("sort", default=StarredSort.CREATED)
    sort_direction: SortDirection = param("direction", default=SortDirection.ASCENDING)


@dataclass
class CheckRunRequest(RequestParameters):
    check_name: str | None = None
    status: CheckStatusFilter | None = None
    filter: CheckRunCompletedAtFilter | None = None


@dataclass
class ProjectRequest(RequestParameters):
    state: ItemStateFilter = ItemStateFilter.OPEN


@dataclass
class RepositoryTrafficRequest(RequestParameters):
    per: TrafficDayOrWeek = TrafficDayOrWeek.DAY


@dataclass
class WorkflowRunJobsRequest(RequestParameters):
    filter: WorkflowRunJobsFilter | None = None


# -- request bodies -----------------------------------------------------------


@dataclass
class NewIssue(BodyModel):
    title: str
    body: str | None = None
    assignees: list[str] | None = None
    milestone: int | None = None
    labels: list[str] | None = None


@dataclass
class IssueUpdate(BodyModel):
    title: str | None = None
    body: str | None = None
    state: ItemState | None = None
    assignees: list[str] | None = None
    milestone: int | None = None
    labels: list[str] | None = None


@dataclass
class NewMilestone(BodyModel):
    title: str
    state: ItemState | None = None
    description: str | None = None
    due_on: datetime | None = None


@dataclass
class MilestoneUpdate(BodyModel):
    title: str | None = None
    state: ItemState | None = None
    description: str | None = None
    due_on: datetime | None = None


@dataclass
class AssigneesUpdate(BodyModel):
    assignees: list[str]


@dataclass
class NewReaction(BodyModel):
    content: ReactionType


@dataclass
class CollaboratorRequest(BodyModel):
    permission: CollaboratorPermission | None = None


@dataclass
class UpsertOrganizationSecret(BodyModel):
    encrypted_value: str | None = None
    key_id: str | None = None
    visibility: str | None = None
    selected_repository_ids: list[int] | None = None


@dataclass
class UpsertRepositorySecret(BodyModel):
    encrypted_value: str | None = None
    key_id: str | None = None


@dataclass
class UpsertEnvironmentSecret(BodyModel):
    encrypted_value: str | None = None
    key_id: str | None = None


@dataclass
class SelectedRepositoryCollection(BodyModel):
    selected_repository_ids: list[int] | None = None


@dataclass
class OrganizationMembershipUpdate(BodyModel):
    role: str = "member"


@dataclass
class UpsertOrganizationCustomProperty(BodyModel):
    value_type: str | None = None
    required: bool | None = None
    default_value: str | None = None
    description: str | None = None
    allowed_values: list[str] | None = None


@dataclass
class OrganizationCustomPropertyUpdate(UpsertOrganizationCustomProperty):
    property_name: str | None = None


@dataclass
class UpsertOrganizationCustomProperties(BodyModel):
    properties: list[OrganizationCustomPropertyUpdate] | None = None


@dataclass
class CustomPropertyValueUpdate(BodyModel):
    property_name: str | None = None
    value: str | list[str] | None = None


@dataclass
class UpsertOrganizationCustomPropertyValues(BodyModel):
    repository_names: list[str] | None = None
    properties: list[CustomPropertyValueUpdate] | None = None


@dataclass
class NewTeamDiscussion(BodyModel):
    title: str
    body: str
    private: bool | None = None


@dataclass
class UpdateTeamDiscussion(BodyModel):
    title: str | None = None
    body: str | None = None


@dataclass
class NewCheckRun(BodyModel):
    name: str
    head_sha: str
    details_url: str | None = None
    external_id: str | None = None
    status: CheckStatusFilter | None = None
    started_at: datetime | None = None
    conclusion: str | None = None
    completed_at: datetime | None = None
    output: dict | None = None


@dataclass
class CheckRunUpdate(BodyModel):
    name: str | None = None
    details_url: str | None = None
    external_id: str | None = None
    status: CheckStatusFilter | None = None
    started_at: datetime | None = None
    conclusion: str | None = None
    completed_at: datetime | None = None
    output: dict | None = None


@dataclass
class NewProject(BodyModel):
    name: str
    body: str | None = None


@dataclass
class ProjectUpdate(BodyModel):
    name: str | None = None
    body: str | None = None
    state: ItemState | None = None
    organization_permission: str | None = None
    private: bool | None = None


@dataclass
class PullRequestReviewRequest(BodyModel):
    reviewers: list[str] | None = None
    team_reviewers: list[str] | None = None


@dataclass
class PullRequestReviewCommentCreate(BodyModel):
    body: str
    commit_id: str
    path: str
    line: int | None = None
    side: str | None = None


@dataclass
class PullRequestReviewCommentReplyCreate(BodyModel):
    body: str
    in_reply_to: int


@dataclass
class PullRequestReviewCommentEdit(BodyModel):
    body: str
