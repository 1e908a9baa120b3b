"""
Standardized API response models and utilities.
Provides consistent response envelopes across all endpoints.
"""

from typing import Generic, TypeVar, Optional, List
from pydantic import BaseModel, Field

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Response carrying only a confirmation message"""

    message: str = Field(..., description="Human-readable message")


class ResultResponse(BaseModel, Generic[T]):
    """Message plus the requested resource"""

    message: str = Field(..., description="Human-readable message")
    result: T = Field(..., description="Response payload")


class CreatedResponse(BaseModel, Generic[T]):
    """Message plus the created resource"""

    message: str = Field(..., description="Human-readable message")
    results: T = Field(..., description="Created resource")


class FieldError(BaseModel):
    """One offending field of a rejected request body"""

    field: str = Field(..., description="Dotted path of the field inside the body")
    message: str = Field(..., description="Why the value was rejected")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    message: str = Field(..., description="Error message")
    errors: Optional[List[FieldError]] = Field(
        None, description="Per-field validation errors"
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")


def message_response(message: str) -> dict:
    """Create a message-only success body"""
    return {"message": message}


def error_response(message: str, errors: Optional[List[dict]] = None) -> dict:
    """Create a standardized error body"""
    payload = {"message": message}
    if errors is not None:
        payload["errors"] = errors
    return payload
