"""Pytest configuration and shared fixtures for minhasfinancas tests.

Provides an isolated SQLite database per test, a session factory matching the
one repositories receive in production, and factories for users and entries.
"""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from decimal import Decimal
from pathlib import Path

import pytest

# Keep BaseConfig from creating ./instance while the suite runs.
os.environ.setdefault("MINHASFINANCAS_DATA_DIR", tempfile.mkdtemp(prefix="minhasfinancas-"))

from minhasfinancas.config import BaseConfig  # noqa: E402
from minhasfinancas.infra.database import apply_sqlite_pragmas  # noqa: E402
from minhasfinancas.models import Entry, EntryType, User  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    apply_sqlite_pragmas(engine, BaseConfig.SQLITE_PRAGMAS)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory with the same commit/rollback semantics as production."""

    @contextmanager
    def factory():
        session = Session(db_engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def user(session_factory) -> User:
    """Persist a default owner for entries."""

    with session_factory() as session:
        owner = User(name="Tester", email="tester@example.com")
        session.add(owner)
        session.commit()
        session.refresh(owner)
        session.expunge(owner)
    return owner


@pytest.fixture
def entry_factory(user):
    """Factory for building valid, unsaved entries.

    Returns:
        Callable: Function returning a transient Entry owned by ``user``
    """

    def _build_entry(
        description: str = "Salário",
        month: int = 1,
        year: int = 2024,
        value: Decimal | str = Decimal("10.00"),
        entry_type: EntryType = EntryType.INCOME,
        owner: User | None = None,
    ) -> Entry:
        return Entry(
            description=description,
            month=month,
            year=year,
            value=Decimal(value),
            type=entry_type,
            user=owner or user,
        )

    return _build_entry
