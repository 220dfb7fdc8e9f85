"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("dietlog.database")

# Create SQLAlchemy Base
Base = declarative_base()


def build_engine(url: str, echo: bool = False):
    """Create an engine; SQLite connections are shared across request threads."""
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, future=True, connect_args=connect_args)


# Create engine
engine = build_engine(settings.database_url, echo=settings.db_echo)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True, expire_on_commit=False)


def init_database():
    """Initialize database schema"""
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
