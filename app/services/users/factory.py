"""
Builds unsaved user records.
"""

from typing import Optional

from app.models.user import User


class UserFactory:
    """Default user factory. Subclass to change how plain or admin users are built."""

    def create_user(self, username: str, email: str, user_id: Optional[int] = None) -> User:
        return User(id=user_id, username=username, email=email)

    def create_admin_user(self, username: str, email: str) -> User:
        user = self.create_user(username, email)
        user.is_admin = True
        return user
