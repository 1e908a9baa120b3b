from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealPatch
from repositories import MealRepository
from services.session_service import SessionService
from app.exceptions import NotFoundError

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for the session-scoped meal diary.

    Every operation except creation takes the caller's session token and
    only ever sees meals stored under it. A meal owned by another session
    raises the same NotFoundError as a meal that does not exist.
    """

    @staticmethod
    def create_meal(
        db: Session, session_id: Optional[str], meal_data: MealCreate
    ) -> Tuple[Meal, bool]:
        """
        Record a meal, issuing a session token when the caller has none.

        Returns a tuple of (Meal, issued_flag).
        """
        session_id, issued = SessionService.resolve(session_id)
        meal = MealRepository(db).create_meal(
            session_id,
            name=meal_data.name,
            description=meal_data.description,
            date_time=meal_data.date_time,
            is_on_diet=meal_data.is_on_diet,
        )
        logger.info(
            f"meal_created meal_id={meal.id} session_id={session_id} "
            f"is_on_diet={meal.is_on_diet} session_issued={issued}"
        )
        return meal, issued

    @staticmethod
    def list_meals(db: Session, session_id: str) -> List[Meal]:
        """Return every meal recorded under the session"""
        meals = MealRepository(db).list_by_session(session_id)
        logger.info(f"meals_listed session_id={session_id} count={len(meals)}")
        return meals

    @staticmethod
    def get_meal(db: Session, session_id: str, meal_id: str) -> Meal:
        """
        Fetch one meal of the session.

        Raises:
            NotFoundError: if the meal is missing or owned by another session
        """
        meal = MealRepository(db).get_owned(session_id, meal_id)
        if not meal:
            logger.warning(f"meal_not_found meal_id={meal_id} session_id={session_id}")
            raise NotFoundError("Meal not found")
        return meal

    @staticmethod
    def replace_meal(
        db: Session, session_id: str, meal_id: str, meal_data: MealCreate
    ) -> Meal:
        """Overwrite every mutable field of a meal"""
        meal = MealService.get_meal(db, session_id, meal_id)
        meal = MealRepository(db).apply_changes(
            meal,
            {
                "name": meal_data.name,
                "description": meal_data.description,
                "date_time": meal_data.date_time,
                "is_on_diet": meal_data.is_on_diet,
            },
        )
        logger.info(f"meal_replaced meal_id={meal.id} session_id={session_id}")
        return meal

    @staticmethod
    def patch_meal(
        db: Session, session_id: str, meal_id: str, patch: MealPatch
    ) -> Meal:
        """
        Apply the fields present in the request, leaving the others alone.

        Presence is what counts: a field sent as an empty string or ``false``
        is applied, a field left out is not.
        """
        meal = MealService.get_meal(db, session_id, meal_id)
        changes = patch.model_dump(exclude_unset=True)
        if not changes:
            logger.info(f"meal_patch_empty meal_id={meal.id} session_id={session_id}")
            return meal

        meal = MealRepository(db).apply_changes(meal, changes)
        logger.info(
            f"meal_patched meal_id={meal.id} session_id={session_id} "
            f"fields={sorted(changes)}"
        )
        return meal

    @staticmethod
    def delete_meal(db: Session, session_id: str, meal_id: str) -> None:
        """Permanently remove a meal of the session"""
        meal = MealService.get_meal(db, session_id, meal_id)
        MealRepository(db).delete(meal)
        logger.info(f"meal_deleted meal_id={meal_id} session_id={session_id}")
