"""SQLModel table exports."""

from .entry import Entry
from .enums import EntryStatus, EntryType
from .user import User

__all__ = [
    "Entry",
    "EntryStatus",
    "EntryType",
    "User",
]
