"""
User domain mappers.
Handles transformation between ORM models and DTOs for user entities.
"""

from domain.models import User
from domain.schemas.user_schemas import UserRegisteredResponse, UserResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """
        Convert User ORM model to UserResponse DTO.

        The session token is only returned at registration, through
        to_registered_response().
        """
        return UserResponse.model_validate(user)

    @staticmethod
    def to_registered_response(user: User) -> UserRegisteredResponse:
        return UserRegisteredResponse(
            user=UserMapper.to_response(user),
            session_id=user.session_id,
        )
