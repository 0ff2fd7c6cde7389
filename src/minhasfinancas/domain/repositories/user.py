"""User repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.user import User


class UserRepository(Protocol):
    """Repository for managing users."""

    def create(self, user: User) -> User:
        """Create a new user."""
        ...

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Retrieve a user by ID."""
        ...

    def exists_by_email(self, email: str) -> bool:
        """Check whether an e-mail address is already registered."""
        ...
