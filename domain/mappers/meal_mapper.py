"""
Meal domain mappers.
"""

from typing import Iterable, List

from domain.models import Meal
from domain.schemas.meal_schemas import MealResponse


class MealMapper:
    """Mapper for meal transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        return MealResponse.model_validate(meal)

    @staticmethod
    def to_response_list(meals: Iterable[Meal]) -> List[MealResponse]:
        return [MealMapper.to_response(m) for m in meals]
