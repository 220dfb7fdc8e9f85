"""API routes package"""

from . import meals, users, health

__all__ = ["meals", "users", "health"]
