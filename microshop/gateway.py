"""Query and mutation resolvers that join the user, catalogue and order services."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from microshop.messages import (
    CatalogueClient,
    OrderClient,
    PositionInput,
    PositionRecord,
    UserClient,
)


class GatewayError(RuntimeError):
    """Raised when a backing service call fails while resolving a field."""


@dataclass
class User:
    """A user as exposed by the gateway."""

    id: str
    name: str = ""
    email: str = ""
    orders: list[Order] = field(default_factory=list)


@dataclass
class CatalogueItem:
    """A catalogue item as exposed by the gateway."""

    id: str
    title: str = ""
    uom: str = ""
    orders: list[Order] = field(default_factory=list)


@dataclass
class OrderPosition:
    """One line of an order as exposed by the gateway."""

    id: str
    catalogue_item: CatalogueItem
    quantity: int | None = None


@dataclass
class Order:
    """An order as exposed by the gateway."""

    id: str
    user: User
    positions: list[OrderPosition] = field(default_factory=list)


@dataclass(frozen=True)
class CreateUserInput:
    name: str
    email: str


@dataclass(frozen=True)
class CreateCatalogueItemInput:
    title: str
    uom: str


@dataclass(frozen=True)
class OrderPositionInput:
    catalogue_item_id: str
    title: str
    quantity: int


@dataclass(frozen=True)
class CreateOrderInput:
    user_id: str
    positions: Sequence[OrderPositionInput] = ()


def _map_position(pos: PositionRecord) -> OrderPosition:
    return OrderPosition(
        id=pos.id,
        catalogue_item=CatalogueItem(id=pos.catalogue_item_id, title=pos.title),
        quantity=pos.quantity,
    )


def map_order_positions(positions: Iterable[PositionRecord]) -> list[OrderPosition]:
    """Convert stored order positions into gateway positions."""
    return [_map_position(pos) for pos in positions]


class Resolver:
    """Resolves gateway queries and mutations against the three service clients."""

    def __init__(
        self,
        user_client: UserClient,
        catalogue_client: CatalogueClient,
        order_client: OrderClient,
    ) -> None:
        self.user_client = user_client
        self.catalogue_client = catalogue_client
        self.order_client = order_client

    def _list_orders(self, action: str):
        try:
            return self.order_client.list_orders()
        except Exception as err:
            raise GatewayError(f"failed to {action}: {err}") from err

    # Mutations

    def create_user(self, data: CreateUserInput) -> User:
        record = self.user_client.create_user(data.name, data.email)
        return User(id=record.id, name=record.name, email=record.email)

    def create_catalogue_item(self, data: CreateCatalogueItemInput) -> CatalogueItem:
        try:
            record = self.catalogue_client.create_item(data.title, data.uom)
        except Exception as err:
            raise GatewayError(f"failed to create catalogue item: {err}") from err
        return CatalogueItem(id=record.id, title=record.title, uom=record.uom)

    def create_order(self, data: CreateOrderInput) -> Order:
        positions = [
            PositionInput(
                catalogue_item_id=p.catalogue_item_id, title=p.title, quantity=p.quantity
            )
            for p in data.positions
        ]
        try:
            record = self.order_client.create_order(data.user_id, positions)
        except Exception as err:
            raise GatewayError(f"failed to create order: {err}") from err
        return Order(
            id=record.id,
            user=User(id=record.user_id),
            positions=map_order_positions(record.positions),
        )

    # Queries

    def user(self, user_id: str) -> User:
        try:
            record = self.user_client.get_user(user_id)
        except Exception as err:
            raise GatewayError(f"failed to get user: {err}") from err

        orders = self._list_orders("list orders")
        user_orders = [
            Order(
                id=order.id,
                user=User(id=record.id, name=record.name, email=record.email),
                positions=map_order_positions(order.positions),
            )
            for order in orders
            if order.user_id == user_id
        ]
        return User(id=record.id, name=record.name, email=record.email, orders=user_orders)

    def users(self) -> list[User]:
        records = self.user_client.list_users()
        orders = self._list_orders("get orders")

        by_user: dict[str, list[Order]] = defaultdict(list)
        for order in orders:
            by_user[order.user_id].append(
                Order(
                    id=order.id,
                    user=User(id=order.user_id),
                    positions=map_order_positions(order.positions),
                )
            )

        return [
            User(id=rec.id, name=rec.name, email=rec.email, orders=list(by_user.get(rec.id, [])))
            for rec in records
        ]

    def catalogue_item(self, item_id: str) -> CatalogueItem:
        try:
            record = self.catalogue_client.get_item(item_id)
        except Exception as err:
            raise GatewayError(f"failed to get catalogue item: {err}") from err

        orders = self._list_orders("get orders")
        related = []
        for order in orders:
            matched = [
                _map_position(pos) for pos in order.positions if pos.catalogue_item_id == item_id
            ]
            if matched:
                related.append(
                    Order(id=order.id, user=User(id=order.user_id), positions=matched)
                )

        return CatalogueItem(id=record.id, title=record.title, uom=record.uom, orders=related)

    def catalogue_items(self) -> list[CatalogueItem]:
        try:
            records = self.catalogue_client.list_items()
        except Exception as err:
            raise GatewayError(f"failed to list catalogue items: {err}") from err

        orders = self._list_orders("get orders")
        by_item: dict[str, list[Order]] = defaultdict(list)
        for order in orders:
            for pos in order.positions:
                by_item[pos.catalogue_item_id].append(
                    Order(
                        id=order.id,
                        user=User(id=order.user_id),
                        positions=[_map_position(pos)],
                    )
                )

        return [
            CatalogueItem(
                id=rec.id, title=rec.title, uom=rec.uom, orders=list(by_item.get(rec.id, []))
            )
            for rec in records
        ]

    def orders(self) -> list[Order]:
        records = self._list_orders("list orders")
        return [
            Order(
                id=order.id,
                user=User(id=order.user_id),
                positions=map_order_positions(order.positions),
            )
            for order in records
        ]