"""Authenticated CRUD calls against the dish resource."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus

import httpx

from happy_testing.adapters.app_client import AppClient
from happy_testing.domain.dishes import (
    CreateDishRequest,
    DishRecord,
    UpdateDishRequest,
    dish_from_payload,
)
from happy_testing.domain.sessions import SessionHandle
from happy_testing.errors import ContractViolation
from happy_testing.services.payloads import to_record, unwrap
from happy_testing.services.validators import decode_json, expect_status

_logger = logging.getLogger(__name__)


@dataclass
class DishService:
    """Dish operations that always carry the caller's session.

    Ownership is enforced by the server; tests assert it with the raw client.
    """

    client: AppClient

    async def list_dishes(self, session: SessionHandle) -> list[DishRecord]:
        """Return the session owner's dishes in server order."""
        response = await self.client.list_dishes(session)
        expect_status(response, HTTPStatus.OK)
        body = decode_json(response)
        if not isinstance(body, Mapping) or not isinstance(body.get("dishes"), list):
            raise ContractViolation(
                "Response has no 'dishes' list",
                status_code=response.status_code,
                body=body,
            )
        return [to_record(row, dish_from_payload, "dish") for row in body["dishes"]]

    async def create_dish(
        self, dish_data: CreateDishRequest, session: SessionHandle
    ) -> DishRecord:
        """Create a dish and check the server kept its name."""
        response = await self.client.create_dish(dish_data.to_payload(), session)
        expect_status(response, HTTPStatus.OK)
        dish = to_record(unwrap(response, "dish"), dish_from_payload, "dish")
        if dish.name != dish_data.name:
            raise ContractViolation(
                f"Created dish name {dish.name!r} != {dish_data.name!r}",
                status_code=response.status_code,
            )
        _logger.debug("Created dish id=%s for user id=%s", dish.id, dish.user_id)
        return dish

    async def get_dish(self, dish_id: int, session: SessionHandle) -> DishRecord:
        """Fetch a dish by id."""
        response = await self.client.get_dish(dish_id, session)
        expect_status(response, HTTPStatus.OK)
        return self._matching(response, dish_id)

    async def update_dish(
        self, dish_id: int, changes: UpdateDishRequest, session: SessionHandle
    ) -> DishRecord:
        """Apply a partial update; omitted fields keep their prior values."""
        response = await self.client.update_dish(dish_id, changes.to_payload(), session)
        expect_status(response, HTTPStatus.OK)
        return self._matching(response, dish_id)

    async def delete_dish(self, dish_id: int, session: SessionHandle) -> None:
        """Delete a dish, requiring an explicit success flag."""
        response = await self.client.delete_dish(dish_id, session)
        expect_status(response, HTTPStatus.OK)
        body = decode_json(response)
        if not isinstance(body, Mapping) or body.get("success") is not True:
            raise ContractViolation(
                f"Delete of dish {dish_id} was not acknowledged",
                status_code=response.status_code,
                body=body,
            )
        _logger.debug("Deleted dish id=%s", dish_id)

    @staticmethod
    def _matching(response: httpx.Response, dish_id: int) -> DishRecord:
        dish = to_record(unwrap(response, "dish"), dish_from_payload, "dish")
        if dish.id != dish_id:
            raise ContractViolation(
                f"Returned dish id {dish.id} != requested {dish_id}",
                status_code=response.status_code,
            )
        return dish
