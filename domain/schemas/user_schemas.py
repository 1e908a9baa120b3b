from pydantic import BaseModel, Field, StrictStr


class UserCredentials(BaseModel):
    """Body of both POST /signup and POST /signin"""

    name: StrictStr = Field(..., min_length=1, description="Unique user name")
    password: StrictStr = Field(..., min_length=1, description="Account password")


class UserResponse(BaseModel):
    """Public user fields; the password is never echoed back"""

    id: str
    name: str

    model_config = {"from_attributes": True}
