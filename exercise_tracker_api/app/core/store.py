"""
In‑memory storage for users and their exercises.

An :class:`InMemoryStore` is created by ``create_app`` and kept on
``app.state.store`` for the lifetime of the application.  Nothing is
persisted: restarting the process starts from an empty store, and
several worker processes each hold their own independent copy.

Records are only ever appended.  Lookups are a linear scan over the
users in insertion order.
"""

import logging
import threading
import uuid
from typing import Callable, List, Optional

from ..models import Exercise, User

logger = logging.getLogger(__name__)


def generate_user_id() -> str:
    """Return a new opaque user identifier."""
    return uuid.uuid4().hex


class InMemoryStore:
    """Ordered collection of :class:`User` records.

    Parameters
    ----------
    id_factory : Callable[[], str], optional
        Produces identifiers for new users.  Defaults to
        :func:`generate_user_id`.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None) -> None:
        self._id_factory = id_factory or generate_user_id
        self._users: List[User] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def add_user(self, username: str) -> User:
        """Create a user with no exercises and append it to the store."""
        with self._lock:
            user_id = self._id_factory()
            if any(existing.id == user_id for existing in self._users):
                raise RuntimeError(f"User id {user_id!r} is already taken")
            user = User(id=user_id, username=username)
            self._users.append(user)
        return user

    def list_users(self) -> List[User]:
        """Return every user in creation order."""
        return list(self._users)

    def get_user(self, user_id: str) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def add_exercise(self, user: User, exercise: Exercise) -> Exercise:
        """Append ``exercise`` as the last entry of ``user``."""
        with self._lock:
            user.exercises.append(exercise)
        return exercise

    def clear(self) -> None:
        """Drop every record.  Called when the application shuts down."""
        with self._lock:
            count = len(self._users)
            self._users.clear()
        logger.debug("Cleared %d users from the store", count)
