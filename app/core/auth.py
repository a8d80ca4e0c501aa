"""
Autentykacja - hashowanie haseł, tokeny JWT i zależności FastAPI
sprawdzające zalogowanego użytkownika.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.api.deps import get_user_store
from app.config import settings
from app.models.user import User
from app.services.users.store import UserStore

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")
security = HTTPBearer(auto_error=False)


def get_password_hash(password: str) -> str:
    """Hashuje hasło."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Sprawdza hasło. Użytkownik bez hasła nigdy się nie zaloguje."""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Tworzy token JWT z emailem jako `sub` i flagą administratora."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"sub": user.email, "is_admin": user.is_admin, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Dict[str, Any]:
    """Dekoduje token. Rzuca JWTError dla niepoprawnego lub wygasłego tokenu."""
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: UserStore = Depends(get_user_store),
) -> User:
    """
    Zwraca użytkownika z tokenu Bearer.
    401 gdy brak tokenu, token jest niepoprawny lub użytkownik nie istnieje.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise _unauthorized("Invalid or expired token")

    email = payload.get("sub")
    if not email:
        raise _unauthorized("Invalid or expired token")

    user = store.find_by_email(email)
    if user is None:
        raise _unauthorized("User not found")
    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Przepuszcza tylko administratora, w przeciwnym razie 403."""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return current_user
