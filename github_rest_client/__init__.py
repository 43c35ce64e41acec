from .api_connection import ApiConnection
from .client import GitHubClient
from .connection import Connection
from .errors import (
    AbuseError,
    ApiError,
    ApiValidationError,
    ArgumentError,
    AuthorizationError,
    EmptyArgumentError,
    EmptyOrWhitespaceArgumentError,
    ForbiddenError,
    InvalidIdentifierError,
    LegalRestrictionError,
    LoginAttemptsExceededError,
    NotFoundError,
    NullArgumentError,
    RateLimitExceededError,
    SecondaryRateLimitExceededError,
)
from .models import API_OPTIONS_NONE, ApiInfo, ApiOptions, ApiResponse, RateLimit
from .paths import OwnerRepo, RepositoryId, RepoTarget
from .settings import Settings, get_settings
