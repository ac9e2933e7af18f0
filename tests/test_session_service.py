"""Tests for the register/login/logout lifecycle."""

import asyncio
from collections.abc import Callable
from dataclasses import replace
from http import HTTPStatus

import httpx
import pytest

from happy_testing.adapters.app_client import HttpxAppClient
from happy_testing.containers import HelperContainer
from happy_testing.domain import endpoints
from happy_testing.domain.sessions import SessionHandle
from happy_testing.domain.users import LoginRequest, RegisterUserRequest
from happy_testing.errors import ContractViolation, SessionCookieError
from happy_testing.sample_data import INVALID_USER_DATA
from happy_testing.services.fixtures import FixtureGenerator
from happy_testing.services.sessions import SessionService, extract_session
from happy_testing.services.validators import (
    expect_status,
    expect_status_in,
    validate_error_response,
    validate_user_structure,
)
from tests.conftest import BASE_URL, json_response
from tests.fake_app import FakeAppState

_USER_ROW = {
    "id": 1,
    "firstName": "Test",
    "lastName": "User1",
    "email": "test.user.abc123@example.com",
    "nationality": "México",
    "phone": "+521234567890",
}


def _service(handler: Callable[[httpx.Request], httpx.Response]) -> SessionService:
    client = HttpxAppClient.create(BASE_URL, transport=httpx.MockTransport(handler))
    return SessionService(client=client, fixtures=FixtureGenerator())


def test_register_returns_user_matching_request(container: HelperContainer) -> None:
    user_data = RegisterUserRequest(
        first_name="Test",
        last_name="User1",
        email="test.user.abc123@example.com",
        nationality="México",
        phone="+521234567890",
        password="Test1234!",
    )

    result = asyncio.run(container.session_service.register(user_data))

    assert result.response.status_code == HTTPStatus.OK
    assert result.user.email == "test.user.abc123@example.com"
    assert result.user.id > 0
    assert result.user.password_hash != "Test1234!"
    assert result.user.created_at is not None
    validate_user_structure(result.user)


def test_duplicate_registration_is_rejected_by_server(
    container: HelperContainer,
) -> None:
    user_data = container.fixtures.generate_unique_user_data()
    asyncio.run(container.session_service.register(user_data))

    with pytest.raises(ContractViolation) as excinfo:
        asyncio.run(container.session_service.register(user_data))

    assert excinfo.value.status_code == HTTPStatus.CONFLICT
    response = asyncio.run(container.app_client.register(user_data.to_payload()))
    validate_error_response(response, HTTPStatus.CONFLICT, "ya está registrado")


def test_register_fails_when_email_is_not_echoed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"user": {**_USER_ROW, "email": "x@y.zz"}})

    service = _service(handler)
    user_data = service.fixtures.generate_unique_user_data()

    with pytest.raises(ContractViolation, match="Registered email"):
        asyncio.run(service.register(user_data))


def test_register_fails_without_user_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True})

    service = _service(handler)

    with pytest.raises(ContractViolation, match="'user'"):
        asyncio.run(service.register(service.fixtures.generate_unique_user_data()))


def test_login_captures_session_cookie(container: HelperContainer) -> None:
    user_data = container.fixtures.generate_unique_user_data()
    registered = asyncio.run(container.session_service.register(user_data))

    login = asyncio.run(container.session_service.login(user_data.login_request()))

    assert login.user.id == registered.user.id
    assert login.session.token
    assert str(login.session) == f"session={login.session.token}"
    assert "HttpOnly" in login.response.headers["set-cookie"]


def test_login_without_cookie_is_a_hard_failure(
    container: HelperContainer, fake_state: FakeAppState
) -> None:
    user_data = container.fixtures.generate_unique_user_data()
    asyncio.run(container.session_service.register(user_data))
    fake_state.set_session_cookie = False

    with pytest.raises(SessionCookieError):
        asyncio.run(container.session_service.login(user_data.login_request()))


def test_login_with_wrong_password_reports_status(container: HelperContainer) -> None:
    user_data = container.fixtures.generate_unique_user_data()
    asyncio.run(container.session_service.register(user_data))
    wrong = LoginRequest(email=user_data.email, password="wrongpassword")

    with pytest.raises(ContractViolation) as excinfo:
        asyncio.run(container.session_service.login(wrong))

    assert excinfo.value.status_code == HTTPStatus.UNAUTHORIZED
    response = asyncio.run(container.app_client.login(wrong.to_payload()))
    validate_error_response(response, HTTPStatus.UNAUTHORIZED, "Invalid credentials")


def test_login_missing_fields_are_bad_requests(container: HelperContainer) -> None:
    cases = [
        {"email": "", "password": "Test1234!"},
        {"email": "test@example.com", "password": ""},
        {},
    ]

    for payload in cases:
        response = asyncio.run(container.app_client.login(payload))
        validate_error_response(response, HTTPStatus.BAD_REQUEST, "Missing fields")


def test_extract_session_rejects_other_cookies() -> None:
    response = json_response(
        200,
        {"user": _USER_ROW},
        method="POST",
        path="/api/login",
        headers={"set-cookie": "theme=dark; Path=/"},
    )

    with pytest.raises(SessionCookieError, match="'session'"):
        extract_session(response)


def test_extract_session_requires_set_cookie_header() -> None:
    response = json_response(200, {"user": _USER_ROW}, method="POST", path="/api/login")

    with pytest.raises(SessionCookieError, match="No Set-Cookie"):
        extract_session(response)


def test_extract_session_reads_token_among_attributes() -> None:
    response = json_response(
        200,
        {"user": _USER_ROW},
        method="POST",
        path="/api/login",
        headers={"set-cookie": "session=s3cr3t; Path=/; HttpOnly; SameSite=Lax"},
    )

    assert extract_session(response) == SessionHandle("session=s3cr3t")


@pytest.mark.parametrize(
    ("url", "cookie_domain"),
    [
        ("http://127.0.0.1:3000/api/login", "localhost"),
        ("http://app.internal/api/login", "example.com"),
    ],
)
def test_extract_session_ignores_cookie_domain(url: str, cookie_domain: str) -> None:
    response = httpx.Response(
        200,
        json={"user": _USER_ROW},
        headers={
            "set-cookie": f"session=abc; Domain={cookie_domain}; Path=/; HttpOnly"
        },
        request=httpx.Request("POST", url),
    )

    assert extract_session(response) == SessionHandle("session=abc")


def test_extract_session_picks_session_among_several_cookies() -> None:
    response = httpx.Response(
        200,
        json={"user": _USER_ROW},
        headers=[
            ("set-cookie", "theme=dark; Path=/"),
            (
                "set-cookie",
                "session=tok123; Path=/; Expires=Wed, 21 Oct 2037 07:28:00 GMT",
            ),
        ],
        request=httpx.Request("POST", f"{BASE_URL}/api/login"),
    )

    assert extract_session(response) == SessionHandle("session=tok123")


def test_authenticated_context_can_list_dishes(container: HelperContainer) -> None:
    context = asyncio.run(container.session_service.create_authenticated_context())

    response = asyncio.run(container.app_client.list_dishes(context.session))

    assert context.login_data.email == context.user_data.email
    assert context.user.email == context.user_data.email
    expect_status(response, HTTPStatus.OK)


def test_logout_invalidates_session(container: HelperContainer) -> None:
    context = asyncio.run(container.session_service.create_authenticated_context())

    asyncio.run(container.session_service.logout(context.session))
    response = asyncio.run(container.app_client.list_dishes(context.session))

    expect_status_in(response, endpoints.SESSION_AFTER_LOGOUT)
    assert response.status_code == HTTPStatus.UNAUTHORIZED


def test_logout_accepts_redirect() -> None:
    service = _service(lambda request: httpx.Response(302, headers={"location": "/"}))

    asyncio.run(service.logout(SessionHandle.from_token("t")))


def test_logout_rejects_unexpected_status() -> None:
    service = _service(lambda request: httpx.Response(500, json={"error": "boom"}))

    with pytest.raises(ContractViolation, match="one of"):
        asyncio.run(service.logout(SessionHandle.from_token("t")))


def test_logout_uses_configured_statuses() -> None:
    no_content = replace(
        _service(lambda request: httpx.Response(204)),
        logout_statuses=frozenset({HTTPStatus.NO_CONTENT}),
    )
    plain_ok = replace(
        _service(lambda request: httpx.Response(200)),
        logout_statuses=frozenset({HTTPStatus.NO_CONTENT}),
    )

    asyncio.run(no_content.logout(SessionHandle.from_token("t")))
    with pytest.raises(ContractViolation, match=r"\[204\]"):
        asyncio.run(plain_ok.logout(SessionHandle.from_token("t")))


def test_anonymous_and_forged_logouts_are_tolerated(
    container: HelperContainer,
) -> None:
    anonymous = asyncio.run(container.app_client.logout())
    forged = asyncio.run(
        container.app_client.logout(SessionHandle("session=invalid_session_token"))
    )

    expect_status_in(anonymous, endpoints.ANONYMOUS_LOGOUT)
    expect_status_in(forged, endpoints.ANONYMOUS_LOGOUT)


def test_registration_rejects_empty_names(container: HelperContainer) -> None:
    base = container.fixtures.generate_unique_user_data()

    for user_data in (replace(base, first_name=""), replace(base, last_name="")):
        response = asyncio.run(container.app_client.register(user_data.to_payload()))
        validate_error_response(response, HTTPStatus.BAD_REQUEST, "Missing fields")


def test_invalid_registration_payloads(container: HelperContainer) -> None:
    missing = asyncio.run(
        container.app_client.register(dict(INVALID_USER_DATA["missing_fields"]))
    )
    generated = asyncio.run(
        container.app_client.register(FixtureGenerator.generate_invalid_user_data())
    )
    short_password = asyncio.run(
        container.app_client.register(dict(INVALID_USER_DATA["short_password"]))
    )

    validate_error_response(missing, HTTPStatus.BAD_REQUEST, "Missing fields")
    validate_error_response(generated, HTTPStatus.BAD_REQUEST, "Missing fields")
    # The backend may accept short passwords.
    expect_status_in(short_password, {HTTPStatus.OK, HTTPStatus.BAD_REQUEST})
