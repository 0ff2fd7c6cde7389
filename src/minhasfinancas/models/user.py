"""User model owning financial entries."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover - import guard for circular dependency
    from .entry import Entry


class User(SQLModel, table=True):
    """Account holder; every entry belongs to exactly one user."""

    __tablename__: ClassVar[str] = "usuario"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=150)
    email: str = Field(nullable=False, unique=True, index=True, max_length=150)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    entries: list["Entry"] = Relationship(
        back_populates="user",
        sa_relationship=relationship("Entry", back_populates="user"),
    )
