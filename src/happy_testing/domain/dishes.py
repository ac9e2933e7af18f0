"""Domain models for dishes."""

from dataclasses import dataclass, field
from datetime import datetime

from happy_testing.domain.timestamps import parse_timestamp


@dataclass(frozen=True)
class DishRecord:
    """A dish as returned by the application."""

    id: int
    name: str
    description: str
    quick_prep: bool
    prep_time: int
    cook_time: int
    user_id: int
    steps: list[str] = field(default_factory=list)
    image_url: str | None = None
    calories: int | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class CreateDishRequest:
    """Payload for creating a dish; unset optional fields are omitted."""

    name: str
    description: str
    prep_time: int
    cook_time: int
    quick_prep: bool | None = None
    image_url: str | None = None
    steps: list[str] | None = None
    calories: int | None = None

    def to_payload(self) -> dict[str, object]:
        """Return the camelCase JSON body."""
        return _compact(
            {
                "name": self.name,
                "description": self.description,
                "quickPrep": self.quick_prep,
                "prepTime": self.prep_time,
                "cookTime": self.cook_time,
                "imageUrl": self.image_url,
                "steps": self.steps,
                "calories": self.calories,
            }
        )


@dataclass(frozen=True)
class UpdateDishRequest:
    """Partial dish update; only fields that are set are sent."""

    name: str | None = None
    description: str | None = None
    quick_prep: bool | None = None
    prep_time: int | None = None
    cook_time: int | None = None
    image_url: str | None = None
    steps: list[str] | None = None
    calories: int | None = None

    def to_payload(self) -> dict[str, object]:
        """Return the camelCase JSON body with unset fields dropped."""
        return _compact(
            {
                "name": self.name,
                "description": self.description,
                "quickPrep": self.quick_prep,
                "prepTime": self.prep_time,
                "cookTime": self.cook_time,
                "imageUrl": self.image_url,
                "steps": self.steps,
                "calories": self.calories,
            }
        )


def dish_from_payload(row: dict[str, object]) -> DishRecord:
    """Map a decoded ``dish`` object to a record."""
    return DishRecord(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        quick_prep=row.get("quickPrep", False),
        prep_time=row["prepTime"],
        cook_time=row["cookTime"],
        user_id=row["userId"],
        steps=list(row.get("steps") or []),
        image_url=row.get("imageUrl"),
        calories=row.get("calories"),
        created_at=parse_timestamp(row.get("createdAt")),
    )


def _compact(payload: dict[str, object]) -> dict[str, object]:
    return {key: value for key, value in payload.items() if value is not None}
