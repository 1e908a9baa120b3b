"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import UserCredentials, UserResponse
from domain.schemas.meal_schemas import (
    MealCreate,
    MealPatch,
    MealResponse,
    MealMetrics,
)

__all__ = [
    # User schemas
    "UserCredentials",
    "UserResponse",
    # Meal schemas
    "MealCreate",
    "MealPatch",
    "MealResponse",
    "MealMetrics",
]
