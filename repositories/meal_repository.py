"""
Meal Repository - Data access layer for the meal diary.

Every lookup is scoped by ``session_id``; a meal owned by another session
is never returned.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_owned(self, session_id: str, meal_id: str) -> Optional[Meal]:
        """Get a meal by ID if it belongs to the session"""
        return (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.session_id == session_id)
            .first()
        )

    def list_by_session(self, session_id: str) -> List[Meal]:
        """All meals of a session in storage order"""
        return self.db.query(Meal).filter(Meal.session_id == session_id).all()

    def list_by_session_chronological(self, session_id: str) -> List[Meal]:
        """All meals of a session, oldest first"""
        return (
            self.db.query(Meal)
            .filter(Meal.session_id == session_id)
            .order_by(Meal.date_time.asc(), Meal.created_at.asc())
            .all()
        )

    def create_meal(
        self,
        session_id: str,
        name: str,
        description: str,
        date_time: datetime,
        is_on_diet: bool,
    ) -> Meal:
        """Create a new meal under a session"""
        meal = Meal(
            name=name,
            description=description,
            date_time=date_time,
            is_on_diet=is_on_diet,
            session_id=session_id,
        )
        return self.create(meal)

    def apply_changes(self, meal: Meal, changes: Mapping[str, Any]) -> Meal:
        """Set the given columns on a meal and persist it"""
        for key, value in changes.items():
            setattr(meal, key, value)
        return self.update(meal)
