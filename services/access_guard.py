"""
Access guard - turns a caller's session token into an authorization context.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from repositories import UserRepository
from app.exceptions import UnauthorizedError

logger = logging.getLogger("dietlog.access")


@dataclass(frozen=True)
class AuthorizationContext:
    """Validated caller scope.

    owner_id is the key every meal query filters on. In the default mode it
    is the session token itself; in strict mode it is the id of the user
    holding that token.
    """

    session_token: str
    owner_id: str


class AccessGuard:
    """Rejects callers without a usable session token"""

    def __init__(self, users: Optional[UserRepository] = None, strict: bool = False):
        if strict and users is None:
            raise ValueError("strict session checking needs a UserRepository")
        self.users = users
        self.strict = strict

    def authorize(self, token: Optional[str]) -> AuthorizationContext:
        """
        Resolve a token into an AuthorizationContext.

        Args:
            token: raw token from the transport, possibly None or blank;
                a usable token is kept verbatim as the scoping key

        Returns:
            AuthorizationContext for the caller

        Raises:
            UnauthorizedError: if the token is missing, blank, or (strict mode)
                not held by any registered user
        """
        if not token or not token.strip():
            logger.info("access_denied reason=missing_token")
            raise UnauthorizedError("Session token is missing")

        if not self.strict:
            return AuthorizationContext(session_token=token, owner_id=token)

        user = self.users.get_by_session_id(token)
        if user is None:
            logger.info("access_denied reason=unknown_session")
            raise UnauthorizedError("Session is not valid")
        return AuthorizationContext(session_token=token, owner_id=user.id)
