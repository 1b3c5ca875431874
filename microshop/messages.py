"""Records exchanged between the services and the client interfaces they expose."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class UserRecord:
    """A registered user."""

    id: str
    name: str
    email: str


@dataclass(frozen=True)
class PositionInput:
    """One requested line of a new order."""

    catalogue_item_id: str
    title: str
    quantity: int


@dataclass(frozen=True)
class PositionRecord:
    """One stored line of an order."""

    id: str
    catalogue_item_id: str
    title: str
    quantity: int


@dataclass(frozen=True)
class OrderRecord:
    """A stored order with its positions."""

    id: str
    user_id: str
    positions: tuple[PositionRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CatalogueRecord:
    """An item in the catalogue."""

    id: str
    title: str
    uom: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a set of catalogue item ids."""

    missing_ids: tuple[str, ...] = ()

    @property
    def all_found(self) -> bool:
        return not self.missing_ids

    @classmethod
    def check(cls, item_ids: Iterable[str], known_ids: Iterable[str]) -> ValidationResult:
        """Build a result listing, in request order, the ids not among ``known_ids``."""
        known = set(known_ids)
        return cls(tuple(item_id for item_id in item_ids if item_id not in known))


@runtime_checkable
class UserClient(Protocol):
    """Access to the user service."""

    def create_user(self, name: str, email: str) -> UserRecord:
        """Register a user and return the stored record."""

    def get_user(self, user_id: str) -> UserRecord:
        """Return the user with ``user_id``; raise if there is none."""

    def list_users(self) -> Sequence[UserRecord]:
        """Return every registered user."""


@runtime_checkable
class CatalogueClient(Protocol):
    """Access to the catalogue service."""

    def create_item(self, title: str, uom: str) -> CatalogueRecord:
        """Add an item to the catalogue and return it."""

    def get_item(self, item_id: str) -> CatalogueRecord:
        """Return the item with ``item_id``; raise if there is none."""

    def list_items(self) -> Sequence[CatalogueRecord]:
        """Return every catalogue item."""

    def validate_items(self, item_ids: Sequence[str]) -> ValidationResult:
        """Report which of ``item_ids`` are not in the catalogue."""


@runtime_checkable
class OrderClient(Protocol):
    """Access to the order service."""

    def create_order(self, user_id: str, positions: Sequence[PositionInput]) -> OrderRecord:
        """Place an order and return the stored record."""

    def list_orders(self) -> Sequence[OrderRecord]:
        """Return every stored order."""