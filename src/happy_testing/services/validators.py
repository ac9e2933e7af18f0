"""Structural assertions for API responses.

Every validator returns ``None`` on success and raises ``ContractViolation``
on the first problem it finds, so a failing check fails the calling test.
"""

import re
from collections.abc import Collection, Mapping
from dataclasses import asdict

import httpx

from happy_testing.domain.dishes import DishRecord
from happy_testing.domain.users import UserRecord
from happy_testing.errors import ContractViolation

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_USER_STRING_FIELDS = ("firstName", "lastName", "email", "nationality", "phone")
_DISH_INT_FIELDS = ("id", "prepTime", "cookTime", "userId")
_DISH_STRING_FIELDS = ("name", "description")


def decode_json(response: httpx.Response) -> object:
    """Return the decoded JSON body, failing when it is not JSON."""
    try:
        return response.json()
    except ValueError as exc:
        raise ContractViolation(
            f"Response body is not JSON: {response.text[:200]!r}",
            status_code=response.status_code,
        ) from exc


def expect_status(response: httpx.Response, expected: int) -> None:
    """Fail unless the response has exactly the expected status."""
    if response.status_code != expected:
        raise ContractViolation(
            f"{_describe(response)} returned {response.status_code}, "
            f"expected {int(expected)}",
            status_code=response.status_code,
            body=_safe_body(response),
        )


def expect_status_in(response: httpx.Response, tolerated: Collection[int]) -> None:
    """Fail unless the response status is one of a tolerated set."""
    if response.status_code not in tolerated:
        allowed = ", ".join(str(status) for status in sorted(int(s) for s in tolerated))
        raise ContractViolation(
            f"{_describe(response)} returned {response.status_code}, "
            f"expected one of [{allowed}]",
            status_code=response.status_code,
            body=_safe_body(response),
        )


def validate_error_response(
    response: httpx.Response,
    expected_status: int,
    expected_message: str | None = None,
) -> None:
    """Check status, a string ``error`` field, and optional substring match."""
    expect_status(response, expected_status)
    body = decode_json(response)
    if not isinstance(body, Mapping) or "error" not in body:
        raise ContractViolation(
            "Error response has no 'error' field",
            status_code=response.status_code,
            body=body,
        )
    error = body["error"]
    if not isinstance(error, str):
        raise ContractViolation(
            f"Error field must be a string, got {type(error).__name__}",
            status_code=response.status_code,
            body=body,
        )
    if expected_message and expected_message not in error:
        raise ContractViolation(
            f"Error {error!r} does not contain {expected_message!r}",
            status_code=response.status_code,
            body=body,
        )


def validate_user_structure(user: UserRecord | Mapping[str, object] | None) -> None:
    """Check required user fields, their types, and the email format."""
    if user is None:
        raise ContractViolation("User is missing")
    fields = _user_fields(user) if isinstance(user, UserRecord) else user
    _require_int(fields, "id", "user")
    for name in _USER_STRING_FIELDS:
        _require_type(fields, name, str, "user")
    if not _EMAIL_PATTERN.match(fields["email"]):
        raise ContractViolation(f"User email {fields['email']!r} is not a mailbox")


def validate_dish_structure(dish: DishRecord | Mapping[str, object] | None) -> None:
    """Check required dish fields and type-check optional ones when present."""
    if dish is None:
        raise ContractViolation("Dish is missing")
    fields = _dish_fields(dish) if isinstance(dish, DishRecord) else dish
    for name in _DISH_INT_FIELDS:
        _require_int(fields, name, "dish")
    for name in _DISH_STRING_FIELDS:
        _require_type(fields, name, str, "dish")
    _require_type(fields, "quickPrep", bool, "dish")
    _require_type(fields, "steps", list, "dish")
    if fields.get("imageUrl") is not None:
        _require_type(fields, "imageUrl", str, "dish")
    if fields.get("calories") is not None:
        _require_int(fields, "calories", "dish")


def _require_type(
    fields: Mapping[str, object], name: str, expected: type, entity: str
) -> None:
    if name not in fields:
        raise ContractViolation(f"{entity} is missing field {name!r}", body=fields)
    value = fields[name]
    if not isinstance(value, expected):
        raise ContractViolation(
            f"{entity}.{name} should be {expected.__name__}, "
            f"got {type(value).__name__}",
            body=fields,
        )


def _require_int(fields: Mapping[str, object], name: str, entity: str) -> None:
    _require_type(fields, name, int, entity)
    # bool is an int subclass but JSON true/false is never a valid number here.
    if isinstance(fields[name], bool):
        raise ContractViolation(f"{entity}.{name} should be int, got bool", body=fields)


def _user_fields(user: UserRecord) -> dict[str, object]:
    return {
        "id": user.id,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "email": user.email,
        "nationality": user.nationality,
        "phone": user.phone,
    }


def _dish_fields(dish: DishRecord) -> dict[str, object]:
    values = asdict(dish)
    return {
        "id": values["id"],
        "name": values["name"],
        "description": values["description"],
        "quickPrep": values["quick_prep"],
        "prepTime": values["prep_time"],
        "cookTime": values["cook_time"],
        "userId": values["user_id"],
        "steps": values["steps"],
        "imageUrl": values["image_url"],
        "calories": values["calories"],
    }


def _describe(response: httpx.Response) -> str:
    request = response.request
    return f"{request.method} {request.url.path}"


def _safe_body(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError:
        return response.text
