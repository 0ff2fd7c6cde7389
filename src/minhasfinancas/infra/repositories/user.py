"""SQLModel implementation of the User repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ...models.user import User


class SQLModelUserRepository:
    """SQLModel-based user repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def create(self, user: User) -> User:
        """Create a new user."""
        with self.session_factory() as session:
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
            return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Retrieve a user by ID."""
        with self.session_factory() as session:
            obj = session.get(User, user_id)
            if obj:
                session.expunge(obj)
            return obj

    def exists_by_email(self, email: str) -> bool:
        """Return True when a user already holds the e-mail (case-insensitive)."""
        with self.session_factory() as session:
            statement = select(User.id).where(func.lower(User.email) == email.strip().lower())
            return session.exec(statement).first() is not None
