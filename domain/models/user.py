"""
User-related database models.
"""

from sqlalchemy import Column, Text, TIMESTAMP
from sqlalchemy.sql import func

from domain.models.database import Base


class User(Base):
    """User account model.

    The primary key doubles as the session token: signing in sets the
    ``sessionId`` cookie to ``id``, and signing up adopts the caller's
    current session token as ``id`` when one is present.
    """

    __tablename__ = "users"

    id = Column(Text, primary_key=True)
    name = Column(Text, unique=True, nullable=False)
    # Stored and compared as given
    password = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
