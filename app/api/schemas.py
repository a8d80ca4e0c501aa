"""
Request and response models of the users and auth endpoints.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.user import User

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'


def is_valid_email(email: str) -> bool:
    """Sprawdza czy string jest poprawnym emailem."""
    return bool(re.match(EMAIL_PATTERN, email))


class UserRequest(BaseModel):
    """Body of user create and update requests."""
    username: str = Field(..., min_length=3, max_length=50)
    email: str

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Username is required")
        return value

    @field_validator("email")
    @classmethod
    def email_valid(cls, value: str) -> str:
        if not value:
            raise ValueError("Email is required")
        if not is_valid_email(value):
            raise ValueError("Email should be valid")
        return value

    def to_user(self) -> User:
        return User(username=self.username, email=self.email)


class UserResponse(BaseModel):
    """Public view of a user. Never carries the password hash."""
    id: int
    username: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, username=user.username, email=user.email)


class AuthRequest(BaseModel):
    """Model logowania użytkownika."""
    email: str
    password: str


class RegisterRequest(UserRequest):
    """Model rejestracji użytkownika."""
    password: str = Field(..., min_length=6)


class AuthResponse(BaseModel):
    """Odpowiedź z tokenem."""
    token: str
    token_type: str = "bearer"


class CurrentUserResponse(UserResponse):
    is_admin: bool

    @classmethod
    def from_user(cls, user: User) -> "CurrentUserResponse":
        return cls(id=user.id, username=user.username, email=user.email, is_admin=user.is_admin)


class ChangePasswordRequest(BaseModel):
    """Model zmiany hasła."""
    old_password: str
    new_password: str
