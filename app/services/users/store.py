"""
In-memory user store.
Keeps user records in a dict keyed by id, with ids taken from a monotonic sequence.
Safe to share between request-handling threads.
"""

import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional, Protocol

from app.models.user import User

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    """Operations every user store backend provides."""

    def save(self, user: User) -> User: ...

    def find_by_id(self, user_id: int) -> Optional[User]: ...

    def find_all(self) -> List[User]: ...

    def delete_by_id(self, user_id: int) -> None: ...

    def find_by_email(self, email: str) -> Optional[User]: ...


class IdSequence:
    """Atomic fetch-and-increment counter starting at 1."""

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value


class InMemoryUserStore:
    """
    User store backed by a plain dict.

    Single-key dict operations are atomic, so the map itself is not guarded by a lock;
    only the id sequence synchronizes. The store keeps its own copies of records:
    `save` stores a copy of the argument and every read returns a copy.
    """

    def __init__(self):
        self._users: Dict[int, User] = {}
        self._ids = IdSequence()

    def save(self, user: User) -> User:
        """
        Stores a user. Assigns the next id when `user.id` is None, otherwise
        replaces whatever is stored under that id (last writer wins).

        Returns:
            Copy of the stored record with id populated
        """
        user_id = user.id if user.id is not None else self._ids.next_id()
        stored = replace(user, id=user_id)
        self._users[user_id] = stored
        logger.debug("Saved user id=%s email=%s", user_id, stored.email)
        return replace(stored)

    def find_by_id(self, user_id: int) -> Optional[User]:
        stored = self._users.get(user_id)
        return replace(stored) if stored is not None else None

    def find_all(self) -> List[User]:
        """Returns a point-in-time snapshot of all records, in no particular order."""
        return [replace(user) for user in self._users.copy().values()]

    def delete_by_id(self, user_id: int) -> None:
        # Brak rekordu to nie błąd
        if self._users.pop(user_id, None) is not None:
            logger.debug("Deleted user id=%s", user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        """
        Finds a user by exact, case-sensitive email.
        When several records share the email, the one with the lowest id wins.
        """
        matches = [user for user in self._users.copy().values() if user.email == email]
        if not matches:
            return None
        return replace(min(matches, key=lambda user: user.id))

    def __len__(self) -> int:
        return len(self._users)
