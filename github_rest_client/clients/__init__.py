from .actions import ActionsClient, RunnerGroupsClient, WorkflowJobsClient
from .base import ApiClient, merge_pages
from .checks import CheckRunsClient
from .issues import AssigneesClient, IssueCommentsClient, IssuesClient, MilestonesClient
from .organizations import (
    OrganizationCustomPropertiesClient,
    OrganizationCustomPropertyValuesClient,
    OrganizationMembersClient,
    OrganizationsClient,
    TeamDiscussionsClient,
)
from .projects import ProjectsClient
from .pulls import PullRequestReviewCommentsClient, PullRequestReviewRequestsClient, PullRequestsClient
from .reactions import (
    CommitCommentReactionsClient,
    IssueCommentReactionsClient,
    IssueReactionsClient,
    ReactionsClient,
)
from .repositories import (
    RepositoriesClient,
    RepositoryBranchesClient,
    RepositoryCollaboratorsClient,
    RepositoryTrafficClient,
    StarredClient,
)
from .secrets import EnvironmentSecretsClient, OrganizationSecretsClient, RepositorySecretsClient, SecretsClient
