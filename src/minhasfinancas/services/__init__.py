"""Service module exports."""

from . import entry_service, user_service
from .entry_service import EntryService

__all__ = [
    "EntryService",
    "entry_service",
    "user_service",
]
