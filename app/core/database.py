"""
Moduł inicjalizacji bazy danych z SQLAlchemy.
Używany tylko przez magazyn użytkowników SQL (USER_STORE_BACKEND=sql).
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from app.config import settings

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """Creates an engine; SQLite needs check_same_thread disabled for FastAPI workers."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}  # Konieczne dla SQLite z FastAPI
    return create_engine(database_url, connect_args=connect_args)


# Tworzenie silnika bazy danych
engine = create_db_engine(settings.database_url)

# Sesja bazy danych
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Baza dla modeli ORM
Base = declarative_base()


def init_db(bind: Engine = None):
    """
    Inicjalizuje bazę danych - tworzy wszystkie tabele.
    """
    from app.models.user_row import UserRow  # noqa: F401 - rejestruje tabelę w metadanych

    Base.metadata.create_all(bind=bind or engine, checkfirst=True)
    logger.info("[OK] Baza danych zainicjalizowana")


if __name__ == "__main__":
    init_db()
