"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from app.exceptions import ConflictError


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_name(self, name: str) -> Optional[User]:
        """Get user by name"""
        return self.db.query(User).filter(User.name == name).first()

    def get_by_credentials(self, name: str, password: str) -> Optional[User]:
        """Get the user matching both name and password exactly"""
        return (
            self.db.query(User)
            .filter(User.name == name, User.password == password)
            .first()
        )

    def create_user(self, user_id: str, name: str, password: str) -> User:
        """Create a new user.

        The unique constraints on id and name back up the service-level
        checks when two signups race.
        """
        user = User(id=user_id, name=name, password=password)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            if not self.get_by_name(name) and self.exists(user_id):
                raise ConflictError("Session ID already exists")
            raise ConflictError("User already exists")
