"""Domain models for application users."""

from dataclasses import dataclass
from datetime import datetime

from happy_testing.domain.timestamps import parse_timestamp


@dataclass(frozen=True)
class UserRecord:
    """A user as returned by the application."""

    id: int
    first_name: str
    last_name: str
    email: str
    nationality: str
    phone: str
    password_hash: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class RegisterUserRequest:
    """Payload for the registration endpoint."""

    first_name: str
    last_name: str
    email: str
    nationality: str
    phone: str
    password: str

    def to_payload(self) -> dict[str, object]:
        """Return the camelCase JSON body."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "nationality": self.nationality,
            "phone": self.phone,
            "password": self.password,
        }

    def login_request(self) -> "LoginRequest":
        """Return the credentials that log this user in."""
        return LoginRequest(email=self.email, password=self.password)


@dataclass(frozen=True)
class LoginRequest:
    """Payload for the login endpoint."""

    email: str
    password: str

    def to_payload(self) -> dict[str, object]:
        """Return the JSON body."""
        return {"email": self.email, "password": self.password}


def user_from_payload(row: dict[str, object]) -> UserRecord:
    """Map a decoded ``user`` object to a record."""
    return UserRecord(
        id=row["id"],
        first_name=row["firstName"],
        last_name=row["lastName"],
        email=row["email"],
        nationality=row["nationality"],
        phone=row["phone"],
        password_hash=row.get("password"),
        created_at=parse_timestamp(row.get("createdAt")),
    )
