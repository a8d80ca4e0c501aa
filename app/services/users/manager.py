"""
User management service.
Thin layer over a user store: turns absence into UserNotFoundError and
keeps the rules for updates and registration.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from app.core.exceptions import EmailAlreadyRegisteredError, UserNotFoundError
from app.models.user import User
from app.services.users.store import InMemoryUserStore, UserStore

logger = logging.getLogger(__name__)


def build_user_store(backend: str) -> UserStore:
    """
    Creates the user store for the configured backend.

    Args:
        backend: "memory" or "sql"

    Raises:
        ValueError: for an unknown backend name
    """
    if backend == "memory":
        return InMemoryUserStore()
    if backend == "sql":
        from app.services.users.sql_store import SqlUserStore
        return SqlUserStore()
    raise ValueError(f"Unknown user store backend: {backend!r}")


class UserManager:
    """Service operations on users."""

    def __init__(self, store: UserStore):
        self.store = store

    def _ensure_email_free(self, email: str, user_id: Optional[int] = None) -> None:
        """Raises EmailAlreadyRegisteredError when another user already has this email."""
        owner = self.store.find_by_email(email)
        if owner is not None and owner.id != user_id:
            raise EmailAlreadyRegisteredError(email)

    def create_user(self, user: User) -> User:
        """
        Saves a new user.

        Raises:
            EmailAlreadyRegisteredError: when the email is already used
        """
        self._ensure_email_free(user.email)
        # Nowy rekord zawsze dostaje ID ze sekwencji
        return self.store.save(replace(user, id=None))

    def get_user_by_id(self, user_id: int) -> User:
        user = self.store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User not found with id: {user_id}")
        return user

    def get_all_users(self) -> List[User]:
        return self.store.find_all()

    def update_user(self, user_id: int, user: User) -> User:
        """
        Replaces username and email of an existing user.
        Password and admin flag are kept from the stored record.

        Raises:
            UserNotFoundError: when no user has this id
            EmailAlreadyRegisteredError: when the email belongs to another user
        """
        existing = self.get_user_by_id(user_id)
        self._ensure_email_free(user.email, user_id)
        existing.username = user.username
        existing.email = user.email
        return self.store.save(existing)

    def delete_user(self, user_id: int) -> None:
        self.store.delete_by_id(user_id)

    def get_user_by_email(self, email: str) -> User:
        user = self.store.find_by_email(email)
        if user is None:
            raise UserNotFoundError(f"User not found with email: {email}")
        return user

    def register_user(self, username: str, email: str, password_hash: str) -> User:
        """
        Creates a regular (non-admin) user with a password.

        Raises:
            EmailAlreadyRegisteredError: when the email is already used
        """
        self._ensure_email_free(email)
        user = self.store.save(User(username=username, email=email, password=password_hash))
        logger.info("Registered user id=%s email=%s", user.id, user.email)
        return user

    def change_password(self, user: User, password_hash: str) -> User:
        return self.store.save(replace(user, password=password_hash))
