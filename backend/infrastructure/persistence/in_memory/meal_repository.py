"""In-memory meal repository implementation.

Provides an in-memory implementation of the IMealRepository port for tests
and local development. Uses a dictionary for storage with no external
dependencies. Native order is id order, i.e. insertion order for new meals.
"""

import threading
from datetime import date
from typing import Callable, Dict, List, Optional

from domain.meal.core.entities.meal import Meal
from domain.meal.core.value_objects.dining_time import DiningTime
from domain.meal.core.value_objects.meal_id import MealId


class InMemoryMealRepository:
    """
    In-memory implementation of IMealRepository port.

    Thread safety: saves are serialized by a lock (resolvers run in worker threads)
    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> repository = InMemoryMealRepository()
        >>> saved = repository.save(Meal.create(day, DiningTime.LUNCH, ...))
        >>> repository.find_by_date(day) == [saved]
        True
    """

    def __init__(self) -> None:
        """Initialize repository with empty storage."""
        self._storage: Dict[int, Meal] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def save(self, meal: Meal) -> Meal:
        """
        Save or update a meal in memory.

        Returns:
            Stored meal, carrying a new sequential id if it had none
        """
        with self._lock:
            if meal.id is None:
                self._last_id += 1
                meal = meal.with_id(MealId(self._last_id))
            else:
                self._last_id = max(self._last_id, meal.id.value)

            self._storage[meal.id.value] = meal  # type: ignore[union-attr]
        return meal

    def find_by_id(self, meal_id: MealId) -> Optional[Meal]:
        return self._storage.get(meal_id.value)

    def find_by_date(self, day: date) -> List[Meal]:
        return self._select(lambda meal: meal.date == day)

    def find_by_date_and_dining_time(self, day: date, dining_time: DiningTime) -> List[Meal]:
        return self._select(lambda meal: meal.date == day and meal.dining_time == dining_time)

    def find_by_date_range(self, start_date: date, end_date: date) -> List[Meal]:
        """Meals in [start_date, end_date], date ascending then id order."""
        meals = self._select(lambda meal: start_date <= meal.date <= end_date)
        # sort is stable, so id order survives within a day
        return sorted(meals, key=lambda meal: meal.date)

    def find_by_place(self, place: str) -> List[Meal]:
        wanted = place.lower()
        return self._select(lambda meal: meal.place.lower() == wanted)

    def delete(self, meal: Meal) -> None:
        if meal.id is not None:
            self._storage.pop(meal.id.value, None)

    def clear(self) -> None:
        """Clear all meals (for testing)."""
        self._storage.clear()
        self._last_id = 0

    def count(self) -> int:
        """Count total meals (for testing)."""
        return len(self._storage)

    def _select(self, predicate: Callable[[Meal], bool]) -> List[Meal]:
        meals = (self._storage[key] for key in sorted(self._storage))
        return [meal for meal in meals if predicate(meal)]
