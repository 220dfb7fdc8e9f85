"""Services package - Business logic layer"""

from services.access_guard import AccessGuard, AuthorizationContext
from services.meal_ledger import MealLedger
from services.user_service import UserService

# Note: streak contains plain functions, not a class

__all__ = [
    "AccessGuard",
    "AuthorizationContext",
    "MealLedger",
    "UserService",
]
