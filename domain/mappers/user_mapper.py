"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas.user_schemas import UserResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """
        Convert User ORM model to UserResponse DTO.

        Only the public fields are copied; the password stays behind.
        """
        return UserResponse(id=user.id, name=user.name)
