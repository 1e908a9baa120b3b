"""Meal diary routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from api.dependencies import (
    get_db,
    get_session_id,
    require_session_id,
    set_session_cookie,
)
from api.responses import (
    CreatedResponse,
    ErrorResponse,
    MessageResponse,
    ResultResponse,
    message_response,
)
from domain.mappers import MealMapper
from domain.schemas.meal_schemas import MealCreate, MealPatch, MealResponse
from services import MealService

router = APIRouter(
    tags=["Meals"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@router.post(
    "/meal",
    response_model=CreatedResponse[MealResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_meal(
    meal_data: MealCreate,
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    """Record a meal; callers without a session cookie get a new one"""
    meal, issued = MealService.create_meal(db, session_id, meal_data)
    if issued:
        set_session_cookie(response, meal.session_id)

    return {
        "message": "Meal created successfully",
        "results": MealMapper.to_response(meal),
    }


@router.get("/meals", response_model=ResultResponse[List[MealResponse]])
def list_meals(
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db),
):
    """List the meals of the current session"""
    meals = MealService.list_meals(db, session_id)
    return {
        "message": "Meals retrieved successfully",
        "result": MealMapper.to_response_list(meals),
    }


@router.get("/meal/{meal_id}", response_model=ResultResponse[MealResponse])
def get_meal(
    meal_id: str,
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db),
):
    meal = MealService.get_meal(db, session_id, meal_id)
    return {
        "message": "Meal retrieved successfully",
        "result": MealMapper.to_response(meal),
    }


@router.put("/meal/{meal_id}", response_model=ResultResponse[MealResponse])
def replace_meal(
    meal_id: str,
    meal_data: MealCreate,
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db),
):
    """Replace every field of a meal"""
    meal = MealService.replace_meal(db, session_id, meal_id, meal_data)
    return {
        "message": "Meal updated successfully",
        "result": MealMapper.to_response(meal),
    }


@router.patch("/meal/{meal_id}", response_model=ResultResponse[MealResponse])
def patch_meal(
    meal_id: str,
    patch: MealPatch,
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db),
):
    """Update only the fields present in the body"""
    meal = MealService.patch_meal(db, session_id, meal_id, patch)
    return {
        "message": "Meal updated successfully",
        "result": MealMapper.to_response(meal),
    }


@router.delete("/meal/{meal_id}", response_model=MessageResponse)
def delete_meal(
    meal_id: str,
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db),
):
    MealService.delete_meal(db, session_id, meal_id)
    return message_response("Meal deleted successfully")
