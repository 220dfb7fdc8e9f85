"""
Meal Repository - Data access layer for meal log operations.

Every query here is scoped by an owner id; callers never see a meal that
does not match both the meal id and the owner.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def _owned(self, meal_id: str, owner_id: str):
        return self.db.query(Meal).filter(Meal.id == meal_id, Meal.user_id == owner_id)

    def get_owned(self, meal_id: str, owner_id: str) -> Optional[Meal]:
        """Get a single meal matching both id and owner"""
        return self._owned(meal_id, owner_id).first()

    def list_by_owner(self, owner_id: str) -> List[Meal]:
        """All meals of an owner, oldest first, then in insertion order"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == owner_id)
            .order_by(Meal.created_at.asc(), Meal.seq.asc())
            .all()
        )

    def next_seq(self, owner_id: str) -> int:
        """Next insertion counter value for an owner"""
        last = (
            self.db.query(func.max(Meal.seq)).filter(Meal.user_id == owner_id).scalar()
        )
        return (last or 0) + 1

    def create_meal(
        self,
        owner_id: str,
        name: str,
        description: str,
        is_on_diet: bool,
        created_at: Optional[datetime] = None,
    ) -> Meal:
        """Insert a new meal owned by owner_id"""
        meal = Meal(
            name=name,
            description=description,
            is_on_diet=is_on_diet,
            user_id=owner_id,
            seq=self.next_seq(owner_id),
        )
        if created_at is not None:
            meal.created_at = created_at
        return self.create(meal)

    def update_owned(self, meal_id: str, owner_id: str, fields: Mapping[str, Any]) -> int:
        """Overwrite fields of an owned meal; returns affected row count"""
        count = self._owned(meal_id, owner_id).update(
            dict(fields), synchronize_session="evaluate"
        )
        self.db.commit()
        return count

    def delete_owned(self, meal_id: str, owner_id: str) -> int:
        """Delete an owned meal; returns affected row count (0 or 1)"""
        count = self._owned(meal_id, owner_id).delete(synchronize_session="evaluate")
        self.db.commit()
        return count
