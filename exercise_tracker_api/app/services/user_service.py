"""
Business logic for users.

The ``UserService`` creates and lists users held by the in‑memory
store and resolves user ids for the exercise endpoints.
"""

import logging
from typing import List

from ..core.errors import NotFoundError
from ..core.store import InMemoryStore
from ..models import User
from ..schemas.user import UserCreate, UserCreated, UserRead

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"


class UserService:
    """Create, list and look up users."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def create_user(self, data: UserCreate) -> UserCreated:
        user = self.store.add_user(data.username)
        logger.info("Created user %s (%s)", user.id, user.username)
        return UserCreated(username=user.username, id=user.id, exercises=[])

    async def list_users(self) -> List[UserRead]:
        return [UserRead.from_user(user) for user in self.store.list_users()]

    async def get_user(self, user_id: str) -> User:
        """Return the user with ``user_id`` or raise :class:`NotFoundError`."""
        user = self.store.get_user(user_id)
        if user is None:
            logger.warning("Unknown user id %s", user_id)
            raise NotFoundError(USER_NOT_FOUND)
        return user
