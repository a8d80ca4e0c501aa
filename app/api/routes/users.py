"""
API endpoints for user management.
All endpoints have prefix /api/users/ and require an admin token.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_user_manager
from app.api.schemas import UserRequest, UserResponse
from app.core.auth import require_admin
from app.core.exceptions import EmailAlreadyRegisteredError, UserNotFoundError
from app.services.users.manager import UserManager

router = APIRouter(
    prefix="/api/users",
    tags=["users"],
    dependencies=[Depends(require_admin)],
)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_data: UserRequest, manager: UserManager = Depends(get_user_manager)):
    """Creates a new user."""
    try:
        created = manager.create_user(user_data.to_user())
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return UserResponse.from_user(created)


@router.get("/email/{email}", response_model=UserResponse)
def get_user_by_email(email: str, manager: UserManager = Depends(get_user_manager)):
    """Gets a user by exact (case-sensitive) email."""
    try:
        return UserResponse.from_user(manager.get_user_by_email(email))
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, manager: UserManager = Depends(get_user_manager)):
    """Gets a user by id."""
    try:
        return UserResponse.from_user(manager.get_user_by_id(user_id))
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.get("", response_model=List[UserResponse])
def get_users(manager: UserManager = Depends(get_user_manager)):
    """Gets list of all users."""
    return [UserResponse.from_user(user) for user in manager.get_all_users()]


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    user_data: UserRequest,
    manager: UserManager = Depends(get_user_manager)
):
    """Updates username and email of an existing user."""
    try:
        updated = manager.update_user(user_id, user_data.to_user())
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return UserResponse.from_user(updated)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, manager: UserManager = Depends(get_user_manager)):
    """Deletes a user. Deleting a missing user is not an error."""
    manager.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
