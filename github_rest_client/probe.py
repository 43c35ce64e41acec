"""Turn "does X exist / is X a member" requests into booleans."""

from http import HTTPStatus

from .errors import ApiError, NotFoundError
from .models import ApiResponse


def is_true(response: ApiResponse, also_false: tuple[int, ...] = ()) -> bool:
    """204 means yes, 404 (or any status in ``also_false``) means no.

    Anything else is unexpected and raised as ``ApiError``.
    """
    if response.status == HTTPStatus.NO_CONTENT:
        return True
    if response.status == HTTPStatus.NOT_FOUND or response.status in also_false:
        return False
    expected = ", ".join(str(int(s)) for s in (HTTPStatus.NO_CONTENT, HTTPStatus.NOT_FOUND, *also_false))
    raise ApiError(response, f"Invalid Status Code returned. Expected one of: {expected}")


async def check(connection, uri: str, also_false: tuple[int, ...] = (), method: str = "get") -> bool:
    """Send ``method`` to ``uri`` on the low-level connection and interpret the status.

    ``method`` is ``"get"`` for membership checks and ``"put"``/``"delete"`` for
    toggles such as starring that answer with 204 on success.
    """
    send = getattr(connection, f"{method}_response")
    try:
        response = await send(uri)
    except NotFoundError:
        return False
    return is_true(response, also_false)
