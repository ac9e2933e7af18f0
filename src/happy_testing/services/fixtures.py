"""Collision-free fixture data for registration and dish creation."""

import random
from dataclasses import dataclass, field
from uuid import uuid4

from happy_testing.domain.dishes import CreateDishRequest
from happy_testing.domain.users import RegisterUserRequest

_USER_TOKEN_LENGTH = 8
_DISH_TOKEN_LENGTH = 6
_PHONE_SUFFIX_DIGITS = 7


def _unique_token(length: int) -> str:
    return uuid4().hex[:length]


@dataclass
class FixtureGenerator:
    """Builds request payloads that can be reused across parallel tests.

    Emails embed a UUID fragment, so two calls in one process never share an
    email in practice. Dish fields only need to be distinct within one test.
    """

    email_domain: str = "example.com"
    password: str = "Test1234!"
    nationality: str = "México"
    phone_prefix: str = "+52155"
    rng: random.Random = field(default_factory=random.Random)

    def generate_unique_user_data(self) -> RegisterUserRequest:
        """Return a registration request with a unique email."""
        token = _unique_token(_USER_TOKEN_LENGTH)
        suffix = str(self.rng.randrange(10**_PHONE_SUFFIX_DIGITS))
        return RegisterUserRequest(
            first_name="Test",
            last_name=f"User{token}",
            email=f"test.user.{token}@{self.email_domain}",
            nationality=self.nationality,
            phone=f"{self.phone_prefix}{suffix.zfill(_PHONE_SUFFIX_DIGITS)}",
            password=self.password,
        )

    def generate_unique_dish_data(self) -> CreateDishRequest:
        """Return a dish creation request with randomized times and calories."""
        token = _unique_token(_DISH_TOKEN_LENGTH)
        return CreateDishRequest(
            name=f"Platillo Test {token}",
            description=f"Descripción del platillo de prueba {token}",
            quick_prep=self.rng.random() > 0.5,
            prep_time=self.rng.randrange(5, 35),
            cook_time=self.rng.randrange(10, 70),
            image_url=f"https://example.com/image-{token}.jpg",
            steps=[
                f"Paso 1: Preparar ingredientes para {token}",
                "Paso 2: Cocinar según instrucciones",
                "Paso 3: Servir y disfrutar",
            ],
            calories=self.rng.randrange(100, 600),
        )

    @staticmethod
    def generate_invalid_user_data() -> dict[str, object]:
        """Return a registration body the server should reject."""
        return {
            "firstName": "",
            "lastName": "Test",
            "email": "invalid-email",
            "nationality": "",
            "phone": "123",
            "password": "123",
        }

    @staticmethod
    def generate_invalid_dish_data() -> dict[str, object]:
        """Return a dish body with empty, negative and mistyped fields."""
        return {
            "name": "",
            "description": "",
            "prepTime": -1,
            "cookTime": 0,
            "steps": "not-an-array",
        }
