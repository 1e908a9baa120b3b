import re
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, StrictBool, StrictStr, field_validator


_ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


def _require_iso_string(value) -> datetime:
    # Numeric strings would otherwise pass as Unix timestamps
    if not isinstance(value, str) or not _ISO_DATE_PREFIX.match(value):
        raise ValueError("Expected an ISO-8601 date string")
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise ValueError("Expected an ISO-8601 date string")


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC already
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class MealCreate(BaseModel):
    """Full meal payload used by POST /meal and PUT /meal/{id}"""

    name: StrictStr
    description: StrictStr
    date_time: datetime = Field(..., alias="date", description="When the meal was eaten")
    is_on_diet: StrictBool = Field(..., alias="isOnDiet")

    @field_validator("date_time", mode="before")
    @classmethod
    def check_date_string(cls, v):
        return _require_iso_string(v)

    @field_validator("date_time")
    @classmethod
    def normalize_date_time(cls, v: datetime) -> datetime:
        return _as_utc(v)


class MealPatch(BaseModel):
    """Partial meal payload for PATCH /meal/{id}.

    Only keys present in the request are applied; use
    ``model_dump(exclude_unset=True)`` to get them. Explicit nulls and
    unknown keys are rejected.
    """

    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    date_time: Optional[datetime] = Field(None, alias="date")
    is_on_diet: Optional[StrictBool] = Field(None, alias="isOnDiet")

    model_config = {"extra": "forbid"}

    @field_validator("name", "description", "date_time", "is_on_diet", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may be omitted but not null")
        return v

    @field_validator("date_time", mode="before")
    @classmethod
    def check_date_string(cls, v):
        return _require_iso_string(v)

    @field_validator("date_time")
    @classmethod
    def normalize_date_time(cls, v: datetime) -> datetime:
        return _as_utc(v)


class MealResponse(BaseModel):
    """Meal as returned by the API"""

    id: str
    name: str
    description: str
    date_time: datetime
    is_on_diet: bool
    session_id: str

    model_config = {"from_attributes": True}

    @field_validator("date_time")
    @classmethod
    def normalize_date_time(cls, v: datetime) -> datetime:
        # SQLite hands back naive values for UTC-normalised columns
        return _as_utc(v)


class MealMetrics(BaseModel):
    """Diet adherence statistics for one session"""

    total_meals: int = Field(..., alias="totalMeals")
    meals_on_diet: int = Field(..., alias="mealsOnDiet")
    meals_off_diet: int = Field(..., alias="mealsOffDiet")
    best_sequence_on_diet: int = Field(..., alias="bestSequenceOnDiet")

    model_config = {"populate_by_name": True}
