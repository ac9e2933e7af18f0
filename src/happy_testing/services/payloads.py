"""Shared response unpacking for the helper services."""

from collections.abc import Callable, Mapping
from typing import TypeVar

import httpx

from happy_testing.errors import ContractViolation
from happy_testing.services.validators import decode_json

_T = TypeVar("_T")


def unwrap(response: httpx.Response, key: str) -> dict[str, object]:
    """Return the object stored under ``key`` in a JSON body."""
    body = decode_json(response)
    if not isinstance(body, Mapping) or not isinstance(body.get(key), Mapping):
        raise ContractViolation(
            f"Response has no {key!r} object",
            status_code=response.status_code,
            body=body,
        )
    return dict(body[key])


def to_record(
    row: dict[str, object], mapper: Callable[[dict[str, object]], _T], entity: str
) -> _T:
    """Map a decoded row, turning shape errors into contract violations."""
    try:
        return mapper(row)
    except (KeyError, TypeError, ValueError) as exc:
        raise ContractViolation(f"Malformed {entity} payload: {exc}", body=row) from exc
