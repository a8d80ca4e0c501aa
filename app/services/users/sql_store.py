"""
User store backed by SQLAlchemy.
Same operations as InMemoryUserStore; each operation runs in its own short-lived session.
Unlike the in-memory sequence, AUTOINCREMENT moves past ids saved explicitly,
so a later save without an id never lands on them.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session, sessionmaker

from app.core.database import SessionLocal
from app.models.user import User
from app.models.user_row import UserRow

logger = logging.getLogger(__name__)


def _to_user(row: UserRow) -> User:
    return User(
        id=row.id,
        username=row.username,
        email=row.email,
        password=row.password_hash,
        is_admin=bool(row.is_admin),
    )


class SqlUserStore:
    """User store persisting records in the `users` table."""

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._session_factory = session_factory

    def save(self, user: User) -> User:
        """Inserts a new row when `user.id` is None, otherwise overwrites the row with that id."""
        db: Session = self._session_factory()
        try:
            row = UserRow(
                id=user.id,
                username=user.username,
                email=user.email,
                password_hash=user.password,
                is_admin=user.is_admin,
            )
            if user.id is None:
                db.add(row)
            else:
                # merge = INSERT lub UPDATE wiersza o tym ID
                row = db.merge(row)
            db.commit()
            db.refresh(row)
            logger.debug("Saved user id=%s email=%s", row.id, row.email)
            return _to_user(row)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def find_by_id(self, user_id: int) -> Optional[User]:
        db: Session = self._session_factory()
        try:
            row = db.get(UserRow, user_id)
            return _to_user(row) if row is not None else None
        finally:
            db.close()

    def find_all(self) -> List[User]:
        db: Session = self._session_factory()
        try:
            return [_to_user(row) for row in db.query(UserRow).all()]
        finally:
            db.close()

    def delete_by_id(self, user_id: int) -> None:
        db: Session = self._session_factory()
        try:
            db.query(UserRow).filter(UserRow.id == user_id).delete()
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def find_by_email(self, email: str) -> Optional[User]:
        """Exact, case-sensitive match; the lowest id wins when emails repeat."""
        db: Session = self._session_factory()
        try:
            row = (
                db.query(UserRow)
                .filter(UserRow.email == email)
                .order_by(UserRow.id.asc())
                .first()
            )
            return _to_user(row) if row is not None else None
        finally:
            db.close()
