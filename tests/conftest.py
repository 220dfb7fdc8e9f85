"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.

Every test gets its own in-memory SQLite database, so tests never see each
other's meals or users.
"""

import os
import sys
from pathlib import Path
from typing import Generator

# Settings are read at import time; keep the app off the on-disk database.
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from api.dependencies import get_db  # noqa: E402
from domain.models import Base  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture(scope="function")
def engine():
    """In-memory SQLite engine with the full schema"""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, future=True, expire_on_commit=False)


@pytest.fixture(scope="function")
def db_session(session_factory) -> Generator[Session, None, None]:
    """
    Create a database session for integration tests.

    Yields:
        Session: SQLAlchemy session bound to a throwaway database
    """
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(session_factory) -> Generator[TestClient, None, None]:
    """TestClient whose routes use the throwaway database"""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
