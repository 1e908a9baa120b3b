"""
API dependencies for dependency injection
"""

from typing import Generator, Optional

from fastapi import Cookie, Response
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_session_id(
    session_id: Optional[str] = Cookie(None, alias=settings.session_cookie_name),
) -> Optional[str]:
    """Session token from the request cookie, or None for a new visitor"""
    return session_id or None


def require_session_id(
    session_id: Optional[str] = Cookie(None, alias=settings.session_cookie_name),
) -> str:
    """
    Gate for session-scoped routes.

    Only the presence of the cookie is checked: anonymous sessions without
    a user record are valid.
    """
    if not session_id:
        raise UnauthorizedError("Unauthorized")
    return session_id


def set_session_cookie(response: Response, session_id: str) -> None:
    """Send the session token back to the client"""
    response.set_cookie(
        settings.session_cookie_name,
        session_id,
        max_age=settings.session_cookie_max_age,
        path="/",
        httponly=True,
        samesite="lax",
    )
