"""In-memory order service that checks users and catalogue items."""

from __future__ import annotations

import threading
from typing import Iterable

from microshop.messages import (
    CatalogueClient,
    OrderRecord,
    PositionInput,
    PositionRecord,
    UserClient,
)


class InvalidOrderError(ValueError):
    """Raised when an order refers to an unknown user or unknown items."""


class OrderService:
    """Creates and stores orders with sequential order and position ids."""

    def __init__(self, catalogue: CatalogueClient, users: UserClient) -> None:
        self.catalogue = catalogue
        self.users = users
        self._lock = threading.Lock()
        self._orders: list[OrderRecord] = []
        self._next_order_id = 0
        self._next_position_id = 0

    def create_order(self, user_id: str, positions: Iterable[PositionInput]) -> OrderRecord:
        positions = list(positions)
        try:
            self.users.get_user(user_id)
        except Exception as err:
            raise InvalidOrderError(f"invalid user ID: {err}") from err

        item_ids = [pos.catalogue_item_id for pos in positions]
        try:
            result = self.catalogue.validate_items(item_ids)
        except Exception as err:
            raise InvalidOrderError(f"invalid catalogue items: {err}") from err
        if not result.all_found:
            missing = " ".join(result.missing_ids)
            raise InvalidOrderError(f"invalid catalogue items: [{missing}]")

        with self._lock:
            self._next_order_id += 1
            records = []
            for pos in positions:
                self._next_position_id += 1
                records.append(
                    PositionRecord(
                        id=str(self._next_position_id),
                        catalogue_item_id=pos.catalogue_item_id,
                        title=pos.title,
                        quantity=pos.quantity,
                    )
                )
            order = OrderRecord(
                id=str(self._next_order_id), user_id=user_id, positions=tuple(records)
            )
            self._orders.append(order)
            return order

    def list_orders(self) -> list[OrderRecord]:
        with self._lock:
            return list(self._orders)