"""
Standardized API response models.
Provides consistent error and health payloads across all endpoints.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Error timestamp"
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Check timestamp"
    )


# OpenAPI documentation for the error statuses every meal route can return
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed id or payload"},
    401: {"model": ErrorResponse, "description": "Missing or invalid session"},
    404: {"model": ErrorResponse, "description": "Meal not found for this session"},
}
