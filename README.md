# microshop

A small shop back end kept entirely in memory.

- `microshop.users.UserService` stores users under generated UUID strings
  and raises `UserNotFoundError` (a `LookupError`) for unknown ids.
- `microshop.orders.OrderService` creates orders after checking the user
  with a user client and the item ids with a catalogue client. An unknown
  user, a failing catalogue call or missing items raise `InvalidOrderError`
  (a `ValueError`). Order ids and position ids are separate counters that
  start at `"1"`.
- `microshop.gateway.Resolver` is the gateway layer. It turns the records
  of the three clients into `User`, `CatalogueItem`, `Order` and
  `OrderPosition` objects and joins them: a user comes back with its
  orders, and a catalogue item with the orders that contain it. Most
  failing client calls are reported as `GatewayError`; errors from
  `create_user` and `list_users` on the user client pass through unchanged.

The client interfaces (`UserClient`, `CatalogueClient`, `OrderClient`) and
the records they exchange (`UserRecord`, `OrderRecord`, `PositionRecord`,
`PositionInput`, `CatalogueRecord`, `ValidationResult`) are defined in
`microshop.messages`. The interfaces are runtime-checkable protocols, so
any object with the same methods will do. `UserService` can stand in for
a user client and `OrderService` for an order client.
`ValidationResult.check(item_ids, known_ids)` builds a validation result
for a catalogue of your own.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Using the services

```python
from microshop.messages import CatalogueRecord, PositionInput, ValidationResult
from microshop.orders import OrderService
from microshop.users import UserService


class Catalogue:
    def __init__(self):
        self.items = {"a": CatalogueRecord("a", "Apple", "kg")}

    def create_item(self, title, uom):
        raise NotImplementedError

    def get_item(self, item_id):
        return self.items[item_id]

    def list_items(self):
        return list(self.items.values())

    def validate_items(self, item_ids):
        return ValidationResult.check(item_ids, self.items)


users = UserService()
ada = users.create_user("Ada", "ada@example.com")
orders = OrderService(Catalogue(), users)
order = orders.create_order(ada.id, [PositionInput("a", "Apple", 2)])
print(order.id, order.positions)
print(orders.list_orders())
```

`list_orders()` returns the orders in the order they were created.

## The gateway

```python
from microshop.gateway import CreateUserInput, Resolver

resolver = Resolver(user_client, catalogue_client, order_client)
resolver.create_user(CreateUserInput(name="Ada", email="ada@example.com"))
for user in resolver.users():
    print(user.name, [order.id for order in user.orders])
```

Mutations: `create_user`, `create_catalogue_item`, `create_order`.
Queries: `user`, `users`, `catalogue_item`, `catalogue_items`, `orders`.

## Greeting command

```
microshop-greeting [NAME] [--count N]
```

Prints `Hello and welcome, NAME!` (NAME defaults to `gopher`) followed by
`i = 100 // i` for `i` from 1 to N (default 5).

## What this package does not do

- It runs no servers: the services and the resolver are plain Python
  objects, with no network transport, query endpoint or playground page.
- It has no catalogue service; supply your own catalogue client.
- Nothing is stored on disk; all data lives in memory for the life of
  the objects.