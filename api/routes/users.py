"""User registration routes"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from api.dependencies import get_user_service
from app.config import settings
from domain.mappers import UserMapper
from domain.schemas.user_schemas import UserRegisteredResponse
from services import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "", response_model=UserRegisteredResponse, status_code=status.HTTP_201_CREATED
)
def register_user(
    response: Response,
    payload: Any = Body(None),
    service: UserService = Depends(get_user_service),
):
    """Register a user and start their session (sets the session cookie)"""
    user = service.register(payload)
    response.set_cookie(
        settings.session_cookie_name,
        user.session_id,
        httponly=True,
        samesite="lax",
        secure=settings.is_production(),
        max_age=settings.session_cookie_max_age,
        path="/",
    )
    return UserMapper.to_registered_response(user)
