"""
Tabela użytkowników dla magazynu SQL.
"""

from sqlalchemy import Column, String, Boolean, Integer
from app.core.database import Base


class UserRow(Base):
    """Wiersz tabeli users."""
    __tablename__ = "users"
    # AUTOINCREMENT: SQLite nie używa ponownie ID po usunięciu ostatniego wiersza
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True, index=True)  # bez unique - unikalność zapewnia wywołujący
    password_hash = Column(String(255), nullable=True)
    is_admin = Column(Boolean, default=False, nullable=False)
