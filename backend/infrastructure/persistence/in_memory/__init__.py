"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.meal_repository import (
    InMemoryMealRepository,
)
from infrastructure.persistence.in_memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryMealRepository",
    "InMemoryUserRepository",
]
