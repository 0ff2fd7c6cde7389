"""SQLModel definition for financial entries (lançamentos)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

from .enums import EntryStatus, EntryType

if TYPE_CHECKING:  # pragma: no cover - import guard for circular dependency
    from .user import User


class Entry(SQLModel, table=True):
    """A single income or expense recorded by a user for a given month.

    Every attribute defaults to ``None`` so an unsaved instance can double as a
    search example; the columns themselves are NOT NULL.
    """

    __tablename__: ClassVar[str] = "lancamento"

    id: Optional[int] = Field(default=None, primary_key=True)
    description: Optional[str] = Field(default=None, nullable=False, max_length=100)
    month: Optional[int] = Field(default=None, nullable=False, index=True)
    year: Optional[int] = Field(default=None, nullable=False, index=True)
    value: Optional[Decimal] = Field(
        default=None, nullable=False, max_digits=16, decimal_places=2
    )
    type: Optional[EntryType] = Field(default=None, nullable=False)
    status: Optional[EntryStatus] = Field(default=None, nullable=False)
    registered_on: Optional[date] = Field(default=None, nullable=False)

    user_id: Optional[int] = Field(
        default=None, foreign_key="usuario.id", nullable=False, index=True
    )
    # Joined so detached rows handed back by repositories keep their owner loaded.
    user: "User | None" = Relationship(
        back_populates="entries",
        sa_relationship=relationship("User", back_populates="entries", lazy="joined"),
    )
