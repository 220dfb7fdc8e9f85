from typing import Any, Mapping
from uuid import uuid4
import logging

from pydantic import ValidationError

from domain.models import User
from domain.schemas.user_schemas import UserCreate
from repositories import UserRepository
from app.exceptions import ServiceValidationError

logger = logging.getLogger("dietlog.users")


class UserService:
    """Registration and session issuance"""

    def __init__(self, users: UserRepository):
        self.users = users

    @staticmethod
    def new_session_token() -> str:
        return str(uuid4())

    def register(self, payload: Any) -> User:
        """
        Create a user and issue their first session token.

        Raises:
            ServiceValidationError: name/email missing or ill-typed
            ConflictError: email already registered
        """
        if not isinstance(payload, Mapping):
            raise ServiceValidationError("Request body must be a JSON object")
        try:
            data = UserCreate.model_validate(dict(payload))
        except ValidationError as e:
            raise ServiceValidationError(
                "Invalid user payload",
                details={
                    ".".join(str(p) for p in err["loc"]): err["msg"]
                    for err in e.errors()
                },
                code="INVALID_USER",
            ) from e

        user = self.users.create_user(
            name=data.name,
            email=str(data.email).lower(),
            session_id=self.new_session_token(),
        )
        logger.info(f"user_registered user_id={user.id}")
        return user
