"""Concrete repository implementations using SQLModel."""

from .entry import SQLModelEntryRepository
from .user import SQLModelUserRepository

__all__ = [
    "SQLModelEntryRepository",
    "SQLModelUserRepository",
]
