"""MongoDB repository implementations."""

from .base import MongoBaseRepository, create_database
from .meal_repository import MongoMealRepository
from .user_repository import MongoUserRepository

__all__ = [
    "MongoBaseRepository",
    "MongoMealRepository",
    "MongoUserRepository",
    "create_database",
]
