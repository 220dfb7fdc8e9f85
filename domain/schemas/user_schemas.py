from pydantic import BaseModel, EmailStr, Field, StrictStr
from datetime import datetime


class UserCreate(BaseModel):
    name: StrictStr = Field(..., min_length=1, max_length=200)
    email: EmailStr


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}


class UserRegisteredResponse(BaseModel):
    """Registration result; session_id is also set as a cookie"""

    user: UserResponse
    session_id: str
