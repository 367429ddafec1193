"""Domain exceptions for the Meal bounded context."""

from domain.meal.core.exceptions.domain_errors import (
    MealDomainError,
    MealFilterError,
    MealNotFoundError,
)

__all__ = [
    "MealDomainError",
    "MealFilterError",
    "MealNotFoundError",
]
