"""
Modele - eksport wszystkich modeli.
"""

from app.models.user import User
from app.models.user_row import UserRow

__all__ = [
    "User",
    "UserRow",
]
