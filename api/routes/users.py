"""Signup and signin routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import Optional

from api.dependencies import get_db, get_session_id, set_session_cookie
from api.responses import (
    CreatedResponse,
    ErrorResponse,
    MessageResponse,
    message_response,
)
from domain.mappers import UserMapper
from domain.schemas.user_schemas import UserCredentials, UserResponse
from services import UserService

router = APIRouter(
    tags=["Users"], responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)


@router.post(
    "/signup",
    response_model=CreatedResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
def sign_up(
    credentials: UserCredentials,
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    """
    Register a user.

    The current session cookie, when present, becomes the user's id so
    meals recorded anonymously stay with the new account.
    """
    user, issued = UserService.register(db, credentials, session_id)
    if issued:
        set_session_cookie(response, user.id)

    return {
        "message": "User created successfully",
        "results": UserMapper.to_response(user),
    }


@router.post("/signin", response_model=MessageResponse)
def sign_in(
    credentials: UserCredentials,
    response: Response,
    db: Session = Depends(get_db),
):
    """Authenticate and switch the caller's session to the user's id"""
    user = UserService.authenticate(db, credentials)
    set_session_cookie(response, user.id)
    return message_response("Login successful")
