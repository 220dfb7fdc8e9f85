"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import settings
from domain.models import get_db_session
from repositories import MealRepository, UserRepository
from services import AccessGuard, AuthorizationContext, MealLedger, UserService


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_session_token(request: Request) -> Optional[str]:
    """Session token from the session cookie, else from a Bearer header"""
    cookie = request.cookies.get(settings.session_cookie_name)
    if cookie:
        return cookie
    auth = request.headers.get("authorization") or ""
    if auth.lower().startswith("bearer "):
        return auth.split(" ", 1)[1].strip() or None
    return None


def get_access_guard(db: Session = Depends(get_db)) -> AccessGuard:
    return AccessGuard(UserRepository(db), strict=settings.strict_sessions)


def get_auth_context(
    token: Optional[str] = Depends(get_session_token),
    guard: AccessGuard = Depends(get_access_guard),
) -> AuthorizationContext:
    """Authorize the caller; raises UnauthorizedError before any meal access"""
    return guard.authorize(token)


def get_meal_ledger(db: Session = Depends(get_db)) -> MealLedger:
    return MealLedger(MealRepository(db))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))
