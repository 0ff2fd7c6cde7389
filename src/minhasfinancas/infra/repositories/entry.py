"""SQLModel implementation of the Entry repository."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.entry import Entry
from ...models.user import User

# Columns compared by equality when present on the example.
_EXACT_FIELDS = ("id", "month", "year", "value", "type", "status", "registered_on")
_COPIED_FIELDS = (
    "description",
    "month",
    "year",
    "value",
    "type",
    "status",
    "registered_on",
    "user_id",
)


class SQLModelEntryRepository:
    """SQLModel-based entry repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def _attach_owner(self, session: Session, entry: Entry) -> None:
        """Point the entry at the session's copy of its owner."""
        if entry.user is not None and entry.user.id is not None:
            owner_id = entry.user.id
            entry.user = session.get(User, owner_id)
            entry.user_id = owner_id

    def create(self, entry: Entry) -> Entry:
        """Insert a new entry."""
        with self.session_factory() as session:
            self._attach_owner(session, entry)
            if entry.registered_on is None:
                entry.registered_on = date.today()
            session.add(entry)
            session.commit()
            session.refresh(entry)
            session.expunge(entry)
            return entry

    def update(self, entry: Entry) -> Entry:
        """Copy the entry onto its stored row, inserting it if the row is gone."""
        with self.session_factory() as session:
            row = session.get(Entry, entry.id)
            if row is None:
                row = Entry(id=entry.id)
                session.add(row)
            for field in _COPIED_FIELDS:
                setattr(row, field, getattr(entry, field))
            if entry.user is not None and entry.user.id is not None:
                row.user_id = entry.user.id
            if row.registered_on is None:
                row.registered_on = date.today()
            session.commit()
            session.refresh(row)
            session.expunge(row)
            return row

    def delete(self, entry: Entry) -> None:
        """Delete the row backing the entry, if it still exists."""
        with self.session_factory() as session:
            row = session.get(Entry, entry.id)
            if row:
                session.delete(row)
                session.commit()

    def find_by_id(self, entry_id: int) -> Optional[Entry]:
        """Retrieve an entry by ID."""
        with self.session_factory() as session:
            obj = session.get(Entry, entry_id)
            if obj:
                session.expunge(obj)
            return obj

    def find_by_example(self, example: Entry) -> list[Entry]:
        """Match every non-null field of the example.

        The description matches case-insensitively anywhere in the text; the
        owner matches by id; everything else must be equal.
        """
        with self.session_factory() as session:
            statement = select(Entry)

            if example.description:
                statement = statement.where(
                    Entry.description.icontains(example.description, autoescape=True)  # type: ignore
                )
            for field in _EXACT_FIELDS:
                wanted = getattr(example, field)
                if wanted is not None:
                    statement = statement.where(getattr(Entry, field) == wanted)

            owner_id = example.user.id if example.user is not None else example.user_id
            if owner_id is not None:
                statement = statement.where(Entry.user_id == owner_id)

            statement = statement.order_by(Entry.year, Entry.month, Entry.id)  # type: ignore
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows
