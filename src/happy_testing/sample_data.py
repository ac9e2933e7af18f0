"""Predefined request data for positive and negative API tests."""

from types import MappingProxyType

from happy_testing.domain.dishes import CreateDishRequest, UpdateDishRequest
from happy_testing.domain.sessions import SessionHandle
from happy_testing.domain.users import LoginRequest, RegisterUserRequest


def valid_user_data(email: str) -> RegisterUserRequest:
    """Return a well-formed registration for the given email."""
    return RegisterUserRequest(
        first_name="Juan",
        last_name="Pérez",
        email=email,
        nationality="México",
        phone="+521234567890",
        password="Test1234!",
    )


_VALID_USER_BODY = {
    "firstName": "Juan",
    "lastName": "Pérez",
    "nationality": "México",
    "phone": "+521234567890",
    "password": "Test1234!",
}

INVALID_USER_DATA = MappingProxyType(
    {
        "missing_fields": {
            "firstName": "",
            "lastName": "",
            "email": "",
            "nationality": "",
            "phone": "",
            "password": "",
        },
        "invalid_email": {**_VALID_USER_BODY, "email": "invalid-email-format"},
        "short_password": {
            **_VALID_USER_BODY,
            "email": "test@example.com",
            "password": "123",
        },
        "invalid_phone": {
            **_VALID_USER_BODY,
            "email": "test@example.com",
            "phone": "123",
        },
    }
)

VALID_DISH_DATA = CreateDishRequest(
    name="Tacos de Pescado",
    description="Deliciosos tacos de pescado fresco con aguacate",
    quick_prep=False,
    prep_time=20,
    cook_time=15,
    image_url="https://example.com/tacos-pescado.jpg",
    steps=[
        "Marinar el pescado con limón y especias",
        "Calentar las tortillas",
        "Cocinar el pescado a la plancha",
        "Servir con aguacate y salsa",
    ],
    calories=320,
)

MULTIPLE_DISHES_DATA = (
    CreateDishRequest(
        name="Ensalada César",
        description="Ensalada clásica con pollo y aderezo césar",
        quick_prep=True,
        prep_time=10,
        cook_time=5,
        steps=["Lavar lechugas", "Cocinar pollo", "Mezclar ingredientes"],
        calories=280,
    ),
    CreateDishRequest(
        name="Pasta Carbonara",
        description="Pasta italiana con huevo, queso y panceta",
        quick_prep=False,
        prep_time=15,
        cook_time=20,
        image_url="https://example.com/carbonara.jpg",
        steps=[
            "Hervir agua para la pasta",
            "Cocinar panceta",
            "Mezclar huevo con queso",
            "Combinar todos los ingredientes",
        ],
        calories=520,
    ),
    CreateDishRequest(
        name="Smoothie Verde",
        description="Batido saludable con espinacas y frutas",
        quick_prep=True,
        prep_time=5,
        cook_time=0,
        steps=["Lavar espinacas", "Pelar frutas", "Licuar todos los ingredientes"],
        calories=150,
    ),
)

INVALID_DISH_DATA = MappingProxyType(
    {
        "missing_required_fields": {"name": "", "description": ""},
        "negative_values": {
            "name": "Test Dish",
            "description": "Test Description",
            "prepTime": -5,
            "cookTime": -10,
            "calories": -100,
        },
        "invalid_data_types": {
            "name": 123,
            "description": True,
            "prepTime": "ten",
            "cookTime": "five",
            "quickPrep": "yes",
            "steps": "not an array",
        },
    }
)

DISH_UPDATE_DATA = MappingProxyType(
    {
        "partial_update": UpdateDishRequest(
            name="Nombre Actualizado",
            description="Descripción actualizada",
        ),
        "full_update": UpdateDishRequest(
            name="Platillo Completamente Actualizado",
            description="Nueva descripción completa",
            quick_prep=True,
            prep_time=25,
            cook_time=30,
            image_url="https://example.com/updated-dish.jpg",
            steps=["Nuevo paso 1", "Nuevo paso 2", "Nuevo paso 3"],
            calories=400,
        ),
        "toggle_quick_prep": UpdateDishRequest(quick_prep=True),
    }
)

INVALID_CREDENTIALS = LoginRequest(
    email="nonexistent@example.com", password="wrongpassword"
)
EXPIRED_SESSION_HANDLE = SessionHandle("session=expired_session_token")
INVALID_SESSION_HANDLE = SessionHandle("session=invalid_session_format")
MALFORMED_COOKIE_HANDLE = SessionHandle("invalid_cookie_format")

SQL_INJECTION_EMAILS = (
    "admin@example.com'; DROP TABLE users; --",
    "' OR '1'='1' --",
    "admin@example.com' UNION SELECT * FROM users --",
)

SPECIAL_CHARACTER_DISH = MappingProxyType(
    {
        "name": '<script>alert("xss")</script>',
        "description": '"; DROP TABLE dishes; --',
        "imageUrl": 'javascript:alert("xss")',
    }
)
