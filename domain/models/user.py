"""
User-related database models.
"""

from datetime import datetime
import uuid

from sqlalchemy import Column, DateTime, Index, String, Text

from domain.models.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """Registered diet log user"""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    email = Column(String(254), unique=True, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    # Opaque token of the user's current session; replaced on each issue
    session_id = Column(Text)

    __table_args__ = (
        Index("ix_users_session_id", "session_id", unique=True, mysql_length=255),
    )
