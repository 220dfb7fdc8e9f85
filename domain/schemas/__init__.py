"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealUpdateResponse,
    MealMetrics,
    MealMetricsResponse,
)
from domain.schemas.user_schemas import (
    UserCreate,
    UserResponse,
    UserRegisteredResponse,
)

__all__ = [
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealListResponse",
    "MealDetailResponse",
    "MealUpdateResponse",
    "MealMetrics",
    "MealMetricsResponse",
    # User schemas
    "UserCreate",
    "UserResponse",
    "UserRegisteredResponse",
]
