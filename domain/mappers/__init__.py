"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.meal_mapper import MealMapper
from domain.mappers.user_mapper import UserMapper

__all__ = ["MealMapper", "UserMapper"]
