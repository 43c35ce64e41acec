"""Low-level async GitHub REST connection using httpx."""

import logging

import httpx

from .api_info import parse_api_info
from .errors import (
    AbuseError,
    ApiError,
    ApiValidationError,
    AuthorizationError,
    ForbiddenError,
    LegalRestrictionError,
    LoginAttemptsExceededError,
    NotFoundError,
    RateLimitExceededError,
    SecondaryRateLimitExceededError,
)
from .models import ApiInfo, ApiResponse
from .query import to_payload
from .settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_ACCEPT = "application/vnd.github+json"

_STATUS_ERRORS = {
    401: AuthorizationError,
    404: NotFoundError,
    422: ApiValidationError,
    429: RateLimitExceededError,
    451: LegalRestrictionError,
}


class Connection:
    """Sends one HTTP request per call and returns the raw ``ApiResponse``.

    Error statuses are raised as ``ApiError`` subclasses; nothing is retried.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        settings = get_settings()
        token = token if token is not None else settings.github_token
        headers = {
            "User-Agent": user_agent or settings.user_agent,
            "X-GitHub-Api-Version": settings.github_api_version,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        if client is None:
            client = httpx.AsyncClient(
                base_url=base_url or settings.github_api_url,
                headers=headers,
                timeout=timeout if timeout is not None else settings.request_timeout,
            )
        else:
            client.headers.update(headers)
            if base_url:
                client.base_url = base_url
        self._client = client
        self.last_api_info: ApiInfo | None = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def get_response(self, uri, params=None, accept=None) -> ApiResponse:
        return await self._send("GET", uri, params=params, accept=accept)

    async def post_response(self, uri, body=None, accept=None, content_type=None) -> ApiResponse:
        return await self._send("POST", uri, body=body, accept=accept, content_type=content_type)

    async def put_response(self, uri, body=None, accept=None) -> ApiResponse:
        return await self._send("PUT", uri, body=body, accept=accept)

    async def patch_response(self, uri, body=None, accept=None) -> ApiResponse:
        return await self._send("PATCH", uri, body=body, accept=accept)

    async def delete_response(self, uri, body=None, accept=None) -> ApiResponse:
        return await self._send("DELETE", uri, body=body, accept=accept)

    async def _send(self, method, uri, params=None, body=None, accept=None, content_type=None):
        headers = {"Accept": accept or DEFAULT_ACCEPT}
        kwargs = {}
        if body is not None:
            if isinstance(body, (bytes, str)):
                kwargs["content"] = body
            else:
                kwargs["json"] = to_payload(body)
        if content_type:
            headers["Content-Type"] = content_type

        resp = await self._client.request(method, uri, params=params, headers=headers, **kwargs)
        logger.debug("%s %s -> %s", method, resp.request.url, resp.status_code)

        response = _to_api_response(resp)
        self.last_api_info = parse_api_info(response.headers)
        _raise_for_status(response)
        return response


def _to_api_response(resp: httpx.Response) -> ApiResponse:
    headers = {key.lower(): value for key, value in resp.headers.items()}
    if not resp.content:
        body = None
    elif "json" in headers.get("content-type", ""):
        body = resp.json()
    else:
        body = resp.text
    return ApiResponse(
        status=resp.status_code,
        body=body,
        headers=headers,
        etag=headers.get("etag"),
        link=headers.get("link"),
    )


def _forbidden_error(response: ApiResponse) -> ApiError:
    text = response.body if isinstance(response.body, str) else str(response.body or "")
    text = text.lower()
    if "rate limit exceeded" in text:
        return RateLimitExceededError(response)
    if "secondary rate limit" in text:
        return SecondaryRateLimitExceededError(response)
    if "number of login attempts exceeded" in text:
        return LoginAttemptsExceededError(response)
    if "abuse-rate-limits" in text or "abuse detection mechanism" in text:
        return AbuseError(response)
    return ForbiddenError(response)


def _raise_for_status(response: ApiResponse) -> None:
    if response.status < 400:
        return
    if response.status == 403:
        error = _forbidden_error(response)
    else:
        error = _STATUS_ERRORS.get(response.status, ApiError)(response)
    if isinstance(error, (RateLimitExceededError, SecondaryRateLimitExceededError, AbuseError)):
        logger.warning("GitHub rate limit response %s: %s", response.status, error.message)
    raise error
