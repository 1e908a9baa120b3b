"""Diet adherence metrics routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_db, require_session_id
from api.responses import ErrorResponse, ResultResponse
from domain.schemas.meal_schemas import MealMetrics
from services import MetricsService

router = APIRouter(tags=["Metrics"], responses={401: {"model": ErrorResponse}})


@router.get("/metrics", response_model=ResultResponse[MealMetrics])
def get_metrics(
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db),
):
    """
    Adherence metrics for the current session.

    Returns totalMeals, mealsOnDiet, mealsOffDiet and bestSequenceOnDiet,
    the longest chronological run of on-diet meals.
    """
    return {
        "message": "Metrics retrieved successfully",
        "result": MetricsService.compute_metrics(db, session_id),
    }
