"""
Inicjalizacja konta administratora przy starcie aplikacji.
"""

import logging
from typing import Callable, Optional

from app.config import Settings
from app.models.user import User
from app.services.users.factory import UserFactory
from app.services.users.store import UserStore

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_PASSWORD = Settings.model_fields["admin_password"].default


def init_admin_user(
    store: UserStore,
    settings: Settings,
    factory: Optional[UserFactory] = None,
    hash_password: Optional[Callable[[str], str]] = None,
) -> Optional[User]:
    """
    Tworzy konto administratora jeśli nie istnieje.

    Sprawdzenie i zapis nie są atomowe: dwa równoległe starty na wspólnym
    magazynie mogą utworzyć dwóch administratorów.

    Args:
        store: Magazyn użytkowników
        settings: Ustawienia z danymi administratora (admin_*)
        factory: Fabryka użytkowników (domyślnie UserFactory)
        hash_password: Funkcja hashująca hasło (domyślnie app.core.auth.get_password_hash)

    Returns:
        Utworzony administrator albo None, gdy nic nie utworzono
    """
    if not settings.admin_enabled:
        logger.info("Admin user initialization is disabled")
        return None

    if hash_password is None:
        from app.core.auth import get_password_hash
        hash_password = get_password_hash
    factory = factory or UserFactory()

    try:
        existing = store.find_by_email(settings.admin_email)
        if existing is not None:
            logger.info("Admin user already exists: %s", existing.username)
            return None

        admin = factory.create_admin_user(settings.admin_username, settings.admin_email)
        admin.password = hash_password(settings.admin_password)
        admin.is_admin = True
        admin = store.save(admin)

        logger.info("[OK] Admin user created: %s (%s)", admin.username, admin.email)
        if settings.admin_password == DEFAULT_ADMIN_PASSWORD:
            logger.warning("[WARN] Admin uses the default password - set ADMIN_PASSWORD and change it immediately!")
        return admin
    except Exception:
        # Start aplikacji trwa dalej nawet gdy inicjalizacja się nie powiedzie
        logger.exception("Failed to initialize admin user")
        return None
