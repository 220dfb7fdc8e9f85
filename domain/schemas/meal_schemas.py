from pydantic import BaseModel, Field, StrictBool, StrictStr
from typing import Optional, List
from datetime import datetime


class MealCreate(BaseModel):
    """Payload for logging a new meal"""

    name: StrictStr
    description: StrictStr
    is_on_diet: StrictBool
    created_at: Optional[datetime] = Field(
        None, description="When the meal was eaten; defaults to now (UTC)"
    )


class MealUpdate(BaseModel):
    """Full replacement of a meal's mutable fields"""

    name: StrictStr
    description: StrictStr
    is_on_diet: StrictBool


class MealResponse(BaseModel):
    id: str
    name: str
    description: str
    is_on_diet: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class MealListResponse(BaseModel):
    meals: List[MealResponse]


class MealDetailResponse(BaseModel):
    meal: MealResponse


class MealUpdateResponse(BaseModel):
    data: MealUpdate


class MealMetrics(BaseModel):
    """Aggregate counts and on-diet streak for one owner"""

    total: int = Field(0, ge=0)
    diet_count: int = Field(0, ge=0)
    not_diet_count: int = Field(0, ge=0)
    streak: int = Field(0, ge=0)


class MealMetricsResponse(BaseModel):
    metrics: MealMetrics
