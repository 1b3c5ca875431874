import pytest

from microshop.messages import CatalogueRecord, PositionInput, ValidationResult
from microshop.orders import InvalidOrderError, OrderService
from microshop.users import UserService


class _Catalogue:
    def __init__(self, *ids, fail=False):
        self.items = {i: CatalogueRecord(i, f"title {i}", "pcs") for i in ids}
        self.fail = fail
        self.validated = []

    def create_item(self, title, uom):
        record = CatalogueRecord(str(len(self.items) + 1), title, uom)
        self.items[record.id] = record
        return record

    def get_item(self, item_id):
        return self.items[item_id]

    def list_items(self):
        return list(self.items.values())

    def validate_items(self, item_ids):
        self.validated.append(list(item_ids))
        if self.fail:
            raise ConnectionError("catalogue down")
        return ValidationResult.check(item_ids, self.items)


@pytest.fixture
def setup():
    users = UserService()
    user = users.create_user("Ann", "ann@example.com")
    catalogue = _Catalogue("bolt", "nut")
    return OrderService(catalogue, users), user, catalogue


def test_create_order_copies_positions(setup):
    service, user, _ = setup
    order = service.create_order(
        user.id, [PositionInput("bolt", "Bolt", 3), PositionInput("nut", "Nut", 7)]
    )
    assert order.user_id == user.id
    assert [(p.catalogue_item_id, p.title, p.quantity) for p in order.positions] == [
        ("bolt", "Bolt", 3),
        ("nut", "Nut", 7),
    ]


def test_ids_are_sequential(setup):
    service, user, _ = setup
    first = service.create_order(
        user.id, [PositionInput("bolt", "Bolt", 1), PositionInput("nut", "Nut", 2)]
    )
    second = service.create_order(user.id, [PositionInput("bolt", "Bolt", 4)])
    assert [first.id, second.id] == ["1", "2"]
    position_ids = [p.id for o in (first, second) for p in o.positions]
    assert position_ids == ["1", "2", "3"]


def test_list_orders_in_creation_order(setup):
    service, user, _ = setup
    created = [service.create_order(user.id, [PositionInput("bolt", "Bolt", n)]) for n in range(3)]
    assert service.list_orders() == created


def test_list_orders_returns_copy(setup):
    service, user, _ = setup
    service.create_order(user.id, [PositionInput("bolt", "Bolt", 1)])
    listing = service.list_orders()
    listing.clear()
    assert len(service.list_orders()) == 1


def test_unknown_user_rejected(setup):
    service, _, _ = setup
    with pytest.raises(InvalidOrderError, match="invalid user ID"):
        service.create_order("nobody", [PositionInput("bolt", "Bolt", 1)])
    assert service.list_orders() == []


def test_unknown_item_rejected(setup):
    service, user, _ = setup
    with pytest.raises(InvalidOrderError, match="invalid catalogue items") as info:
        service.create_order(user.id, [PositionInput("washer", "Washer", 1)])
    assert "washer" in str(info.value)
    assert service.list_orders() == []


def test_catalogue_failure_rejected():
    users = UserService()
    user = users.create_user("Ann", "ann@example.com")
    service = OrderService(_Catalogue("bolt", fail=True), users)
    with pytest.raises(InvalidOrderError, match="invalid catalogue items"):
        service.create_order(user.id, [PositionInput("bolt", "Bolt", 1)])


def test_catalogue_receives_requested_ids(setup):
    service, user, catalogue = setup
    service.create_order(user.id, [PositionInput("nut", "Nut", 1), PositionInput("bolt", "Bolt", 2)])
    assert catalogue.validated == [["nut", "bolt"]]


def test_failed_order_does_not_consume_ids(setup):
    service, user, _ = setup
    with pytest.raises(InvalidOrderError):
        service.create_order(user.id, [PositionInput("washer", "Washer", 1)])
    order = service.create_order(user.id, [PositionInput("bolt", "Bolt", 1)])
    assert order.id == "1"