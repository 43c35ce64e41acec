"""Data models shared by the transport and the endpoint clients."""

from dataclasses import dataclass, field


@dataclass
class ApiResponse:
    """Response returned by the low-level connection.

    ``headers`` keys are lower-cased. ``body`` is decoded JSON, text for
    non-JSON payloads, or None when the response carried no content.
    """

    status: int
    body: dict | list | str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    etag: str | None = None
    link: str | None = None


@dataclass(frozen=True)
class ApiOptions:
    """Pagination directive forwarded untouched to ``ApiConnection.get_all``.

    Unset fields mean "server default page size, fetch every page".
    """

    page_size: int | None = None
    page_count: int | None = None
    start_page: int | None = None

    def __post_init__(self):
        for name in ("page_size", "page_count", "start_page"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value}")


API_OPTIONS_NONE = ApiOptions()


@dataclass(frozen=True)
class RateLimit:
    limit: int
    remaining: int
    reset: int  # unix timestamp


@dataclass(frozen=True)
class ApiInfo:
    """Metadata parsed from the headers of the last response."""

    links: dict[str, str] = field(default_factory=dict)
    oauth_scopes: tuple[str, ...] = ()
    accepted_oauth_scopes: tuple[str, ...] = ()
    etag: str | None = None
    rate_limit: RateLimit | None = None

    @property
    def next_page_url(self) -> str | None:
        return self.links.get("next")
