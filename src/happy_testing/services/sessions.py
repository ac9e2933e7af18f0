"""Register, login and logout flow for test users."""

import logging
from dataclasses import dataclass
from http import HTTPStatus
from http.cookies import CookieError, SimpleCookie

import httpx

from happy_testing.adapters.app_client import AppClient
from happy_testing.domain import endpoints
from happy_testing.domain.sessions import SESSION_COOKIE, SessionHandle, TestUserContext
from happy_testing.domain.users import (
    LoginRequest,
    RegisterUserRequest,
    UserRecord,
    user_from_payload,
)
from happy_testing.errors import ContractViolation, SessionCookieError
from happy_testing.services.fixtures import FixtureGenerator
from happy_testing.services.payloads import to_record, unwrap
from happy_testing.services.validators import expect_status, expect_status_in

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationResult:
    """Raw response and parsed user from a registration."""

    response: httpx.Response
    user: UserRecord


@dataclass(frozen=True)
class LoginResult:
    """Raw response, parsed user and session from a login."""

    response: httpx.Response
    user: UserRecord
    session: SessionHandle


@dataclass
class SessionService:
    """Drives UNREGISTERED -> REGISTERED -> AUTHENTICATED -> LOGGED_OUT.

    The service keeps no per-user state; callers thread the returned
    ``SessionHandle`` through later calls and must await ``register`` before
    reusing the same credentials for ``login``.
    """

    client: AppClient
    fixtures: FixtureGenerator
    logout_statuses: frozenset[int] = endpoints.LOGOUT_OK

    async def register(self, user_data: RegisterUserRequest) -> RegistrationResult:
        """Register a user, failing unless the server echoes the email back."""
        response = await self.client.register(user_data.to_payload())
        expect_status(response, HTTPStatus.OK)
        row = unwrap(response, "user")
        if row.get("email") != user_data.email:
            raise ContractViolation(
                f"Registered email {row.get('email')!r} != {user_data.email!r}",
                status_code=response.status_code,
                body=row,
            )
        user = to_record(row, user_from_payload, "user")
        _logger.debug("Registered user id=%s email=%s", user.id, user.email)
        return RegistrationResult(response=response, user=user)

    async def login(self, login_data: LoginRequest) -> LoginResult:
        """Log in and capture the session cookie."""
        response = await self.client.login(login_data.to_payload())
        expect_status(response, HTTPStatus.OK)
        user = to_record(unwrap(response, "user"), user_from_payload, "user")
        session = extract_session(response)
        _logger.debug("Logged in user id=%s", user.id)
        return LoginResult(response=response, user=user, session=session)

    async def create_authenticated_context(self) -> TestUserContext:
        """Generate, register and log in a fresh user."""
        user_data = self.fixtures.generate_unique_user_data()
        registration = await self.register(user_data)
        login_data = user_data.login_request()
        login = await self.login(login_data)
        return TestUserContext(
            user_data=user_data,
            login_data=login_data,
            session=login.session,
            user=registration.user,
        )

    async def logout(self, session: SessionHandle) -> None:
        """Log out; any status in ``logout_statuses`` counts as acknowledged."""
        response = await self.client.logout(session)
        expect_status_in(response, self.logout_statuses)


def extract_session(response: httpx.Response) -> SessionHandle:
    """Return the session handle set by a response, or raise.

    Cookie attributes such as Domain and Expires are not checked; the value
    the server assigns to ``session`` is the credential.
    """
    headers = response.headers.get_list("set-cookie")
    if not headers:
        raise SessionCookieError("No Set-Cookie header in login response")
    token = None
    for header in headers:
        cookie = SimpleCookie()
        try:
            cookie.load(header)
        except CookieError:
            _logger.debug("Skipping unparseable Set-Cookie header %r", header)
            continue
        if SESSION_COOKIE in cookie:
            token = cookie[SESSION_COOKIE].value
    if not token:
        raise SessionCookieError(
            f"Set-Cookie header does not contain a {SESSION_COOKIE!r} cookie"
        )
    return SessionHandle.from_token(token)
