"""Domain models for authenticated sessions."""

from dataclasses import dataclass

from happy_testing.domain.users import LoginRequest, RegisterUserRequest, UserRecord

SESSION_COOKIE = "session"


@dataclass(frozen=True)
class SessionHandle:
    """Opaque credential sent as the ``Cookie`` header, e.g. ``session=abc``."""

    value: str

    @classmethod
    def from_token(cls, token: str) -> "SessionHandle":
        """Build a handle from a bare session token."""
        return cls(f"{SESSION_COOKIE}={token}")

    @property
    def token(self) -> str | None:
        """Return the session token, or None for a malformed handle."""
        name, separator, token = self.value.partition("=")
        if not separator or name.strip() != SESSION_COOKIE:
            return None
        return token.split(";", 1)[0]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TestUserContext:
    """A registered and logged-in user, alive for one test case."""

    __test__ = False

    user_data: RegisterUserRequest
    login_data: LoginRequest
    session: SessionHandle
    user: UserRecord
