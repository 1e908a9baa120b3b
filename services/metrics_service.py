"""Diet adherence metrics derived from a session's meals"""

from typing import Iterable, Sequence
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealMetrics
from repositories import MealRepository

logger = logging.getLogger("dailydiet.metrics")


def best_on_diet_sequence(on_diet_flags: Iterable[bool]) -> int:
    """
    Length of the longest run of consecutive on-diet meals.

    The flags must already be in chronological order; an off-diet meal
    resets the running count.

    >>> best_on_diet_sequence([True, True, False, True, True, True])
    3
    >>> best_on_diet_sequence([])
    0
    """
    best = 0
    current = 0
    for on_diet in on_diet_flags:
        if on_diet:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def summarize_meals(meals: Sequence[Meal]) -> MealMetrics:
    """Build metrics from meals sorted oldest first"""
    on_diet = sum(1 for m in meals if m.is_on_diet)
    return MealMetrics(
        total_meals=len(meals),
        meals_on_diet=on_diet,
        meals_off_diet=len(meals) - on_diet,
        best_sequence_on_diet=best_on_diet_sequence(m.is_on_diet for m in meals),
    )


class MetricsService:
    @staticmethod
    def compute_metrics(db: Session, session_id: str) -> MealMetrics:
        """
        Compute adherence metrics for a session.

        Meals are read in ``date_time`` order, not insertion order, since the
        best sequence depends on when the meals were eaten.
        """
        meals = MealRepository(db).list_by_session_chronological(session_id)
        metrics = summarize_meals(meals)

        logger.info(
            f"metrics_computed session_id={session_id} "
            f"total={metrics.total_meals} on_diet={metrics.meals_on_diet} "
            f"off_diet={metrics.meals_off_diet} "
            f"best_sequence={metrics.best_sequence_on_diet}"
        )
        return metrics
