"""Apply ApiOptions to a paginated GET and decide when to stop following Link headers."""

from urllib.parse import parse_qs, urlsplit

from .models import ApiOptions


def setup(parameters: dict[str, str] | None, options: ApiOptions) -> dict[str, str]:
    parameters = dict(parameters or {})
    if options.start_page is not None:
        parameters["page"] = str(options.start_page)
    if options.page_size is not None:
        parameters["per_page"] = str(options.page_size)
    return parameters


def page_number(url: str) -> int | None:
    values = parse_qs(urlsplit(url).query).get("page")
    if not values:
        return None
    try:
        return int(values[0])
    except ValueError:
        return None


def should_continue(next_url: str, options: ApiOptions) -> bool:
    """True while the next page is within ``start_page + page_count``."""
    if options.page_count is None:
        return True
    page = page_number(next_url)
    if page is None:
        return True
    start_page = options.start_page or 1
    return page < start_page + options.page_count
