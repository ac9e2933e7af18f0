"""Shared test fixtures."""

import asyncio
from collections.abc import Iterator

import httpx
import pytest
from fastapi import FastAPI

from happy_testing.config import Settings
from happy_testing.containers import HelperContainer, build_container
from tests.fake_app import FakeAppState, create_fake_app

BASE_URL = "http://testserver"


def json_response(
    status_code: int,
    payload: object,
    *,
    method: str = "GET",
    path: str = "/api/dishes",
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build a decoded response bound to a request, as httpx would return it."""
    return httpx.Response(
        status_code,
        json=payload,
        headers=headers,
        request=httpx.Request(method, f"{BASE_URL}{path}"),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url=BASE_URL, api_timeout_seconds=5)


@pytest.fixture
def fake_state() -> FakeAppState:
    return FakeAppState()


@pytest.fixture
def fake_app(fake_state: FakeAppState) -> FastAPI:
    return create_fake_app(fake_state)


@pytest.fixture
def container(settings: Settings, fake_app: FastAPI) -> Iterator[HelperContainer]:
    helpers = build_container(settings, transport=httpx.ASGITransport(app=fake_app))
    yield helpers
    asyncio.run(helpers.close_resources())
