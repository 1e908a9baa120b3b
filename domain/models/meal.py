"""
Meal diary database models.
"""

import uuid

from sqlalchemy import Boolean, Column, String, Text, TIMESTAMP
from sqlalchemy.sql import func

from domain.models.database import Base


def _new_meal_id() -> str:
    return str(uuid.uuid4())


class Meal(Base):
    """A meal recorded under a session.

    ``session_id`` is a plain matching key, not a foreign key: anonymous
    sessions own meals without any backing user row.
    """

    __tablename__ = "meals"

    id = Column(String(36), primary_key=True, default=_new_meal_id)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    date_time = Column(TIMESTAMP(timezone=True), nullable=False)
    is_on_diet = Column(Boolean, nullable=False)
    session_id = Column(Text, nullable=False, index=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return (
            f"<Meal id={self.id} session_id={self.session_id} "
            f"date_time={self.date_time} is_on_diet={self.is_on_diet}>"
        )
