"""Exceptions raised by argument guards and by the transport."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .api_info import parse_api_info, parse_retry_after

if TYPE_CHECKING:
    from .models import ApiResponse

DEFAULT_API_ERROR_MESSAGE = "An error occurred with this API request"


class ArgumentError(ValueError):
    """A public operation was called with an invalid argument."""

    def __init__(self, param_name: str, message: str):
        self.param_name = param_name
        super().__init__(f"{message} (parameter: {param_name})")


class NullArgumentError(ArgumentError):
    def __init__(self, param_name: str):
        super().__init__(param_name, "Value cannot be None")


class EmptyOrWhitespaceArgumentError(ArgumentError):
    def __init__(self, param_name: str):
        super().__init__(param_name, "String cannot be empty or whitespace")


class EmptyArgumentError(ArgumentError):
    def __init__(self, param_name: str, message: str = "Collection cannot be empty"):
        super().__init__(param_name, message)


class InvalidIdentifierError(ArgumentError):
    def __init__(self, param_name: str):
        super().__init__(param_name, "Identifier must be greater than zero")


class ApiError(Exception):
    """The remote call completed with a status the caller did not expect.

    ``api_error`` holds the decoded GitHub error payload when the body was JSON,
    otherwise ``{"message": <raw body>}``.
    """

    def __init__(self, response: ApiResponse | None = None, message: str | None = None):
        self.response = response
        self.status_code = response.status if response is not None else None
        self.body = response.body if response is not None else None
        self.api_error = _api_error_from_body(self.body)
        self.message = message or self.api_error.get("message") or DEFAULT_API_ERROR_MESSAGE
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"


class AuthorizationError(ApiError):
    pass


class ForbiddenError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class ApiValidationError(ApiError):
    """422 Unprocessable Entity; ``errors`` lists the per-field problems."""

    @property
    def errors(self) -> list[dict]:
        return self.api_error.get("errors") or []


class LegalRestrictionError(ApiError):
    pass


class LoginAttemptsExceededError(ForbiddenError):
    pass


class AbuseError(ForbiddenError):
    pass


class SecondaryRateLimitExceededError(ForbiddenError):
    pass


class RateLimitExceededError(ForbiddenError):
    """Primary rate limit hit (403 with a rate-limit body, or 429)."""

    def __init__(self, response: ApiResponse | None = None, message: str | None = None):
        super().__init__(response, message)
        headers = response.headers if response is not None else {}
        rate = parse_api_info(headers).rate_limit
        self.limit = rate.limit if rate else None
        self.remaining = rate.remaining if rate else None
        self.reset = rate.reset if rate else None
        self.retry_after = parse_retry_after(headers)


def _api_error_from_body(body) -> dict:
    if isinstance(body, dict):
        return body
    if body is None or body == "":
        return {}
    return {"message": str(body)}
