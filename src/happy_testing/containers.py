"""Dependency container wiring for the API test helpers."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import httpx

from happy_testing.adapters.app_client import AppClient, HttpxAppClient
from happy_testing.app_logging import configure_logging
from happy_testing.config import Settings, parse_status_set
from happy_testing.domain import endpoints
from happy_testing.services.dishes import DishService
from happy_testing.services.fixtures import FixtureGenerator
from happy_testing.services.sessions import SessionService

_T = TypeVar("_T")


@dataclass
class HelperContainer:
    """Holds the helpers a test scenario needs."""

    settings: Settings
    app_client: AppClient
    fixtures: FixtureGenerator
    session_service: SessionService
    dish_service: DishService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HelperContainer:
    """Create the default helper container.

    ``transport`` replaces the network, e.g. with an ``httpx.ASGITransport``.
    """
    resolved_settings = settings or Settings()
    app_client = HttpxAppClient.create(
        resolved_settings.api_base_url,
        timeout=resolved_settings.api_timeout_seconds,
        transport=transport,
        log_http=resolved_settings.log_http,
    )
    fixtures = FixtureGenerator(
        email_domain=resolved_settings.fixture_email_domain,
        password=resolved_settings.fixture_password,
        nationality=resolved_settings.fixture_nationality,
        phone_prefix=resolved_settings.fixture_phone_prefix,
    )

    logout_statuses = (
        parse_status_set(resolved_settings.logout_ok_statuses) or endpoints.LOGOUT_OK
    )

    async def close_resources() -> None:
        await app_client.close()

    return HelperContainer(
        settings=resolved_settings,
        app_client=app_client,
        fixtures=fixtures,
        session_service=SessionService(
            client=app_client, fixtures=fixtures, logout_statuses=logout_statuses
        ),
        dish_service=DishService(client=app_client),
        close_resources=close_resources,
    )


async def run_scenario(
    scenario: Callable[[HelperContainer], Awaitable[_T]],
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> _T:
    """Run a scenario against a fresh container and close it afterwards.

    ``log_http`` also lowers the helper log level to DEBUG.
    """
    resolved_settings = settings or Settings()
    configure_logging(logging.DEBUG if resolved_settings.log_http else logging.INFO)
    container = build_container(resolved_settings, transport=transport)
    try:
        return await scenario(container)
    finally:
        await container.close_resources()
