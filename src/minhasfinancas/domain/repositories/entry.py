"""Entry repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.entry import Entry


class EntryRepository(Protocol):
    """Repository for persisting financial entries."""

    def create(self, entry: Entry) -> Entry:
        """Insert a new entry and return it with its assigned id."""
        ...

    def update(self, entry: Entry) -> Entry:
        """Persist changes to an existing entry."""
        ...

    def delete(self, entry: Entry) -> None:
        """Remove an entry."""
        ...

    def find_by_id(self, entry_id: int) -> Optional[Entry]:
        """Retrieve an entry by ID."""
        ...

    def find_by_example(self, example: Entry) -> list[Entry]:
        """Return entries matching every non-null field of the example."""
        ...
