"""HTTP client for the dish-management application API."""

import logging
from dataclasses import dataclass
from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Protocol

import httpx

from happy_testing.domain import endpoints
from happy_testing.domain.sessions import SessionHandle

_logger = logging.getLogger(__name__)


class AppClient(Protocol):
    """Interface for raw calls against the application API.

    Payloads are plain dicts so negative tests can send malformed bodies.
    """

    async def register(self, payload: dict[str, object]) -> httpx.Response:
        """POST a registration body."""

    async def login(self, payload: dict[str, object]) -> httpx.Response:
        """POST a login body."""

    async def logout(self, session: SessionHandle | None = None) -> httpx.Response:
        """POST a logout, optionally with a session attached."""

    async def list_dishes(self, session: SessionHandle | None) -> httpx.Response:
        """GET the dish list."""

    async def create_dish(
        self, payload: dict[str, object], session: SessionHandle | None
    ) -> httpx.Response:
        """POST a new dish."""

    async def get_dish(
        self, dish_id: int, session: SessionHandle | None
    ) -> httpx.Response:
        """GET a single dish."""

    async def update_dish(
        self, dish_id: int, payload: dict[str, object], session: SessionHandle | None
    ) -> httpx.Response:
        """PUT a partial dish update."""

    async def delete_dish(
        self, dish_id: int, session: SessionHandle | None
    ) -> httpx.Response:
        """DELETE a dish."""


def _cookie_jar_refusing_all() -> CookieJar:
    """Return a jar that never stores cookies, keeping the client stateless."""
    return CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))


@dataclass
class HttpxAppClient(AppClient):
    """Application client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 30.0
    log_http: bool = False

    @classmethod
    def create(
        cls,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        log_http: bool = False,
    ) -> "HttpxAppClient":
        """Create a client with a managed httpx session."""
        http_client = httpx.AsyncClient(
            cookies=_cookie_jar_refusing_all(), transport=transport
        )
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=http_client,
            timeout=timeout,
            log_http=log_http,
        )

    async def register(self, payload: dict[str, object]) -> httpx.Response:
        """POST to the registration endpoint."""
        return await self._send("POST", endpoints.REGISTER, payload=payload)

    async def login(self, payload: dict[str, object]) -> httpx.Response:
        """POST to the login endpoint."""
        return await self._send("POST", endpoints.LOGIN, payload=payload)

    async def logout(self, session: SessionHandle | None = None) -> httpx.Response:
        """POST to the logout endpoint."""
        return await self._send("POST", endpoints.LOGOUT, session=session)

    async def list_dishes(self, session: SessionHandle | None) -> httpx.Response:
        """GET the dishes of the session owner."""
        return await self._send("GET", endpoints.DISHES, session=session)

    async def create_dish(
        self, payload: dict[str, object], session: SessionHandle | None
    ) -> httpx.Response:
        """POST a dish for the session owner."""
        return await self._send(
            "POST", endpoints.DISHES, session=session, payload=payload
        )

    async def get_dish(
        self, dish_id: int, session: SessionHandle | None
    ) -> httpx.Response:
        """GET a dish by id."""
        return await self._send("GET", endpoints.dish_path(dish_id), session=session)

    async def update_dish(
        self, dish_id: int, payload: dict[str, object], session: SessionHandle | None
    ) -> httpx.Response:
        """PUT changes to a dish."""
        return await self._send(
            "PUT", endpoints.dish_path(dish_id), session=session, payload=payload
        )

    async def delete_dish(
        self, dish_id: int, session: SessionHandle | None
    ) -> httpx.Response:
        """DELETE a dish by id."""
        return await self._send(
            "DELETE", endpoints.dish_path(dish_id), session=session
        )

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

    async def _send(
        self,
        method: str,
        path: str,
        *,
        session: SessionHandle | None = None,
        payload: dict[str, object] | None = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        headers = {"Cookie": str(session)} if session is not None else {}
        response = await self.http_client.request(
            method, url, json=payload, headers=headers, timeout=self.timeout
        )
        if self.log_http:
            _logger.info("%s %s -> %s", method, path, response.status_code)
        return response
