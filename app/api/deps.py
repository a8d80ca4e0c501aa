"""
FastAPI dependencies giving routes access to the shared user store.
The store is created once in the application lifespan and kept on app.state.
"""

from fastapi import Depends, Request

from app.services.users.manager import UserManager
from app.services.users.store import UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_user_manager(store: UserStore = Depends(get_user_store)) -> UserManager:
    return UserManager(store)
