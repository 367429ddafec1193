"""Meal repository port (interface).

Defines contract for meal persistence operations.
Follows the Dependency Inversion Principle: domain defines the port,
infrastructure provides the implementation.
"""

from datetime import date
from typing import List, Optional, Protocol

from domain.meal.core.entities.meal import Meal
from domain.meal.core.value_objects.dining_time import DiningTime
from domain.meal.core.value_objects.meal_id import MealId


class IMealRepository(Protocol):
    """
    Interface for meal persistence operations.

    Implementations:
    - In-memory repository (for testing)
    - MongoDB repository (for production)

    Example usage (domain service):
        >>> class MealDomainService:
        ...     def __init__(self, repository: IMealRepository):
        ...         self._repository = repository
        ...
        ...     def get_meals_by_date(self, day: date) -> List[Meal]:
        ...         return self._repository.find_by_date(day)
    """

    def save(self, meal: Meal) -> Meal:
        """
        Save or update a meal.

        Returns:
            Stored meal; id is assigned on first insert.
        """
        ...

    def find_by_id(self, meal_id: MealId) -> Optional[Meal]:
        """Meal with this id, or None."""
        ...

    def find_by_date(self, day: date) -> List[Meal]:
        """
        All meals served on a date, in repository-native order.

        This is the only query the domain service strictly relies on;
        range queries can be synthesized from it.
        """
        ...

    def find_by_date_and_dining_time(self, day: date, dining_time: DiningTime) -> List[Meal]:
        """Meals of one dining time on a date."""
        ...

    def find_by_date_range(self, start_date: date, end_date: date) -> List[Meal]:
        """Meals with start_date <= date <= end_date, date ascending."""
        ...

    def find_by_place(self, place: str) -> List[Meal]:
        """Meals whose place equals ``place`` ignoring case."""
        ...

    def delete(self, meal: Meal) -> None:
        """Delete a persisted meal. Unknown meals are ignored."""
        ...
