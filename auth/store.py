"""
auth/store.py -- In-memory persistence for User records.

Pattern: Repository. UserStore owns the user collection for the lifetime of
one application instance; route and dependency code goes through it instead
of touching the list directly. A fresh store per app lifespan keeps tests
isolated from each other.

Concurrency: no locking. Handlers run on the event loop thread and each
mutation is a single list append.

Layer rule: no imports from api/, directory/, or core/.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from auth.models import User

logger = logging.getLogger("staffdesk.auth.store")


class UsernameTakenError(ValueError):
    """Raised by UserStore.create_user() when the username already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already exists: {username!r}")
        self.username = username


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class UserStore:
    """Repository for User entities.

    Usage:
        store = UserStore()
        store.create_user(User(username="admin", role="admin", hashed_password=hash_password("secret")))
        user = store.get_by_username("admin")
    """

    def __init__(self) -> None:
        self._users: list[User] = []

    def has_users(self) -> bool:
        return bool(self._users)

    def count(self) -> int:
        return len(self._users)

    def create_user(self, user: User) -> int:
        """Insert a new user and return its assigned ID.

        IDs are sequential: users are never deleted, so count + 1 is always
        unused. Raises UsernameTakenError if the username already exists.
        """
        if self.get_by_username(user.username) is not None:
            raise UsernameTakenError(user.username)
        user.id = len(self._users) + 1
        user.created_at = _now_iso()
        self._users.append(user)
        logger.debug("Stored user id=%d username=%s", user.id, user.username)
        return user.id

    def get_by_username(self, username: str) -> User | None:
        """Exact, case-sensitive lookup. Returns None if absent."""
        for user in self._users:
            if user.username == username:
                return user
        return None
