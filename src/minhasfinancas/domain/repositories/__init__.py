"""Repository protocol definitions for domain layer."""

from .entry import EntryRepository
from .user import UserRepository

__all__ = [
    "EntryRepository",
    "UserRepository",
]
