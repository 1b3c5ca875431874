"""In-memory user service."""

from __future__ import annotations

import threading
import uuid

from microshop.messages import UserRecord


class UserNotFoundError(LookupError):
    """Raised when a user id is unknown."""


class UserService:
    """Stores users in memory, keyed by a generated UUID."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, UserRecord] = {}

    def create_user(self, name: str, email: str) -> UserRecord:
        with self._lock:
            user = UserRecord(id=str(uuid.uuid4()), name=name, email=email)
            self._users[user.id] = user
            return user

    def get_user(self, user_id: str) -> UserRecord:
        with self._lock:
            try:
                return self._users[user_id]
            except KeyError:
                raise UserNotFoundError("user not found") from None

    def list_users(self) -> list[UserRecord]:
        with self._lock:
            return list(self._users.values())