"""
Endpointy autentykacji - logowanie, rejestracja i konto zalogowanego użytkownika.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_user_manager
from app.api.schemas import (
    AuthRequest,
    AuthResponse,
    ChangePasswordRequest,
    CurrentUserResponse,
    RegisterRequest,
)
from app.core.auth import (
    verify_password,
    get_password_hash,
    create_access_token,
    get_current_user
)
from app.core.exceptions import EmailAlreadyRegisteredError
from app.models.user import User
from app.services.users.manager import UserManager

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=AuthResponse)
def login(auth_request: AuthRequest, manager: UserManager = Depends(get_user_manager)):
    """Logowanie użytkownika. Login to email (wielkość liter ma znaczenie)."""
    user = manager.store.find_by_email(auth_request.email)

    if user is None or not verify_password(auth_request.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return AuthResponse(token=create_access_token(user))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, manager: UserManager = Depends(get_user_manager)):
    """Rejestracja nowego użytkownika (bez uprawnień administratora)."""
    try:
        user = manager.register_user(
            username=user_data.username,
            email=user_data.email,
            password_hash=get_password_hash(user_data.password),
        )
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return AuthResponse(token=create_access_token(user))


@router.get("/me", response_model=CurrentUserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    """Pobiera informacje o zalogowanym użytkowniku."""
    return CurrentUserResponse.from_user(current_user)


@router.put("/me/password")
def change_password(
    password_data: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    manager: UserManager = Depends(get_user_manager)
):
    """Zmienia hasło użytkownika. Wymaga podania starego hasła."""
    # Sprawdź stare hasło
    if not verify_password(password_data.old_password, current_user.password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid old password"
        )

    # Walidacja nowego hasła
    if len(password_data.new_password) < 6:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="New password must be at least 6 characters long"
        )

    manager.change_password(current_user, get_password_hash(password_data.new_password))

    return {
        "message": "Password changed"
    }


@router.post("/health")
def health_check():
    """Sprawdzenie działania serwisu autentykacji."""
    return "Auth service is healthy"
