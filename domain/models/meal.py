"""
Meal log database models.
"""

from datetime import datetime
import uuid

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text

from domain.models.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Meal(Base):
    """A single logged meal, owned by exactly one scoping key"""

    __tablename__ = "meals"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    is_on_diet = Column(Boolean, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    # Per-owner insertion counter; orders meals sharing a created_at
    seq = Column(Integer, nullable=False)
    # Session token, or the resolved user id in strict mode
    user_id = Column(Text, nullable=False)

    __table_args__ = (
        Index(
            "ix_meals_user_id_created_at_seq",
            "user_id",
            "created_at",
            "seq",
            mysql_length={"user_id": 255},
        ),
    )
