"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import SQLModelEntryRepository, SQLModelUserRepository
from .services.entry_service import EntryService


@dataclass
class AppContext:
    """Repositories and services wired against one database."""

    config: BaseConfig
    session_factory: SessionFactory

    entry_repo: SQLModelEntryRepository
    user_repo: SQLModelUserRepository

    entry_service: EntryService


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create and initialize the application context."""

    if config is None:
        config = BaseConfig()

    _, session_factory = bootstrap_database(config)

    entry_repo = SQLModelEntryRepository(session_factory)
    user_repo = SQLModelUserRepository(session_factory)

    return AppContext(
        config=config,
        session_factory=session_factory,
        entry_repo=entry_repo,
        user_repo=user_repo,
        entry_service=EntryService(entry_repo),
    )
