"""Endpoint paths and expected HTTP statuses."""

from http import HTTPStatus

REGISTER = "/api/register"
LOGIN = "/api/login"
LOGOUT = "/api/logout"
DISHES = "/api/dishes"


def dish_path(dish_id: int) -> str:
    """Return the path of a single dish."""
    return f"{DISHES}/{dish_id}"


# Tolerated status sets. The backend's behavior for these cases is not
# pinned down, so callers assert membership instead of a single status.
LOGOUT_OK = frozenset({HTTPStatus.OK, HTTPStatus.FOUND})
ANONYMOUS_LOGOUT = frozenset({HTTPStatus.OK, HTTPStatus.FOUND, HTTPStatus.UNAUTHORIZED})
INVALID_SESSION = frozenset({HTTPStatus.UNAUTHORIZED, HTTPStatus.INTERNAL_SERVER_ERROR})
SESSION_AFTER_LOGOUT = frozenset({HTTPStatus.OK, HTTPStatus.UNAUTHORIZED})
FOREIGN_DISH = frozenset({HTTPStatus.FORBIDDEN, HTTPStatus.NOT_FOUND})
MALFORMED_INPUT = frozenset(
    {
        HTTPStatus.BAD_REQUEST,
        HTTPStatus.UNPROCESSABLE_ENTITY,
        HTTPStatus.INTERNAL_SERVER_ERROR,
    }
)
