from typing import Optional, Tuple
from sqlalchemy.orm import Session
import logging

from domain.models import User
from domain.schemas.user_schemas import UserCredentials
from repositories import UserRepository
from services.session_service import SessionService
from app.exceptions import ConflictError, NotFoundError

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Business logic for signup and signin"""

    @staticmethod
    def register(
        db: Session, credentials: UserCredentials, session_id: Optional[str] = None
    ) -> Tuple[User, bool]:
        """
        Create a user whose id is the caller's session token.

        Signing up with the cookie of an anonymous session keeps that
        session's meals: the token becomes the new user's id. A token that
        already belongs to a user is refused.

        Returns a tuple of (User, issued_flag); issued_flag is True when a new
        session token was generated and must be set as a cookie.

        Raises:
            ConflictError: if the name or the session token is already taken
        """
        user_repo = UserRepository(db)

        if user_repo.get_by_name(credentials.name):
            logger.warning(f"signup_rejected reason=duplicate_name name={credentials.name}")
            raise ConflictError("User already exists")

        if session_id and user_repo.exists(session_id):
            logger.warning(
                f"signup_rejected reason=duplicate_session session_id={session_id}"
            )
            raise ConflictError("Session ID already exists")

        session_id, issued = SessionService.resolve(session_id)
        user = user_repo.create_user(session_id, credentials.name, credentials.password)

        logger.info(f"user_created user_id={user.id} session_issued={issued}")
        return user, issued

    @staticmethod
    def authenticate(db: Session, credentials: UserCredentials) -> User:
        """
        Find the user matching name and password exactly.

        Raises:
            NotFoundError: if no user matches the pair
        """
        user = UserRepository(db).get_by_credentials(
            credentials.name, credentials.password
        )
        if not user:
            logger.warning(f"signin_failed name={credentials.name}")
            raise NotFoundError("User not found")

        logger.info(f"signin_succeeded user_id={user.id}")
        return user
