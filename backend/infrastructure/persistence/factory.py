"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory (safe fallback if env vars not set)

Usage:
    from infrastructure.persistence.factory import (
        get_meal_repository,
        get_user_repository,
    )

    meals = get_meal_repository()  # Singleton, inmemory or mongodb per env
    users = get_user_repository()
"""

import logging
from typing import Optional

from pymongo.database import Database

from domain.meal.core.ports.meal_repository import IMealRepository
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import get_repository_backend
from infrastructure.persistence.in_memory.meal_repository import InMemoryMealRepository
from infrastructure.persistence.in_memory.user_repository import InMemoryUserRepository
from infrastructure.persistence.mongodb.base import create_database
from infrastructure.persistence.mongodb.meal_repository import MongoMealRepository
from infrastructure.persistence.mongodb.user_repository import MongoUserRepository

logger = logging.getLogger(__name__)

BACKENDS = ("inmemory", "mongodb")


def _backend() -> str:
    mode = get_repository_backend()
    if mode not in BACKENDS:
        raise ValueError(
            f"Invalid REPOSITORY_BACKEND value: {mode}. Expected 'inmemory' or 'mongodb'"
        )
    return mode


def create_meal_repository() -> IMealRepository:
    """Create meal repository based on REPOSITORY_BACKEND env var.

    Values:
        - "inmemory": In-memory repository (default, fast, transient)
        - "mongodb": MongoDB repository (persistent, requires MONGODB_URI)

    Raises:
        ValueError: If the backend is unknown, or mongodb is selected
            without MONGODB_URI
    """
    if _backend() == "mongodb":
        repository = MongoMealRepository(_get_database())
        repository.ensure_indexes()
        return repository

    return InMemoryMealRepository()


def create_user_repository() -> IUserRepository:
    """Create user repository based on REPOSITORY_BACKEND env var.

    Raises:
        ValueError: If the backend is unknown, or mongodb is selected
            without MONGODB_URI
    """
    if _backend() == "mongodb":
        repository = MongoUserRepository(_get_database())
        repository.ensure_indexes()
        return repository

    return InMemoryUserRepository()


# Singleton instances (lazy initialization)
_database: Optional[Database] = None
_meal_repository: Optional[IMealRepository] = None
_user_repository: Optional[IUserRepository] = None


def _get_database() -> Database:
    global _database
    if _database is None:
        _database = create_database()
        logger.info("MongoDB database opened", extra={"database": _database.name})
    return _database


def get_meal_repository() -> IMealRepository:
    """Get singleton meal repository instance."""
    global _meal_repository
    if _meal_repository is None:
        _meal_repository = create_meal_repository()
    return _meal_repository


def get_user_repository() -> IUserRepository:
    """Get singleton user repository instance."""
    global _user_repository
    if _user_repository is None:
        _user_repository = create_user_repository()
    return _user_repository


def reset_repositories() -> None:
    """Reset singleton instances.

    Useful for testing to force re-creation with different env vars.

    Example:
        # In tests:
        reset_repositories()
        os.environ["REPOSITORY_BACKEND"] = "inmemory"
        repo = get_meal_repository()  # Creates new instance
    """
    global _database, _meal_repository, _user_repository
    _database = None
    _meal_repository = None
    _user_repository = None
