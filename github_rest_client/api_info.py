"""Parse GitHub response headers (Link, OAuth scopes, rate limit)."""

import re
from collections.abc import Mapping

from .models import ApiInfo, RateLimit

_LINK_PATTERN = re.compile(r'<(?P<url>[^>]*)>\s*;\s*rel="(?P<rel>[^"]+)"')


def parse_links(value: str | None) -> dict[str, str]:
    """Map each ``rel`` of a Link header to its URL."""
    if not value:
        return {}
    return {match["rel"]: match["url"] for match in _LINK_PATTERN.finditer(value)}


def _scopes(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(scope.strip() for scope in value.split(",") if scope.strip())


def _header(headers: Mapping[str, str], name: str) -> str | None:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def _rate_limit(headers: Mapping[str, str]) -> RateLimit | None:
    raw = [_header(headers, f"x-ratelimit-{part}") for part in ("limit", "remaining", "reset")]
    if any(value is None for value in raw):
        return None
    try:
        limit, remaining, reset = (int(value) for value in raw)
    except ValueError:
        return None
    return RateLimit(limit=limit, remaining=remaining, reset=reset)


def parse_api_info(headers: Mapping[str, str]) -> ApiInfo:
    return ApiInfo(
        links=parse_links(_header(headers, "link")),
        oauth_scopes=_scopes(_header(headers, "x-oauth-scopes")),
        accepted_oauth_scopes=_scopes(_header(headers, "x-accepted-oauth-scopes")),
        etag=_header(headers, "etag"),
        rate_limit=_rate_limit(headers),
    )


def parse_retry_after(headers: Mapping[str, str]) -> float | None:
    val = _header(headers, "retry-after")
    if val is None:
        return None
    try:
        return float(val)
    except ValueError:
        return None
