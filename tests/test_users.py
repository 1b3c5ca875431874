import uuid

import pytest

from microshop.users import UserNotFoundError, UserService


def test_create_user_assigns_uuid():
    service = UserService()
    user = service.create_user("Ann", "ann@example.com")
    assert str(uuid.UUID(user.id)) == user.id
    assert (user.name, user.email) == ("Ann", "ann@example.com")


def test_get_user_returns_created():
    service = UserService()
    user = service.create_user("Ann", "ann@example.com")
    assert service.get_user(user.id) == user


def test_get_unknown_user_raises():
    service = UserService()
    with pytest.raises(UserNotFoundError, match="user not found"):
        service.get_user("missing")


def test_ids_are_unique():
    service = UserService()
    ids = {service.create_user(f"n{i}", f"n{i}@example.com").id for i in range(20)}
    assert len(ids) == 20


def test_list_users_contains_all():
    service = UserService()
    created = [
        service.create_user("Ann", "ann@example.com"),
        service.create_user("Bob", "bob@example.com"),
    ]
    assert sorted(service.list_users(), key=lambda u: u.id) == sorted(created, key=lambda u: u.id)


def test_list_users_empty():
    assert UserService().list_users() == []