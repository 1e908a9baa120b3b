"""Services package - Business logic layer"""

from services.session_service import SessionService
from services.user_service import UserService
from services.meal_service import MealService
from services.metrics_service import MetricsService, best_on_diet_sequence

__all__ = [
    "SessionService",
    "UserService",
    "MealService",
    "MetricsService",
    "best_on_diet_sequence",
]
