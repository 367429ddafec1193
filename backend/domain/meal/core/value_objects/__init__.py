"""Core value objects for meal domain.

Immutable value objects that form the building blocks of domain entities.
All value objects are frozen dataclasses with value-based equality.
"""

from .calories import Calories
from .dining_time import DiningTime
from .meal_id import MealId
from .menu import Menu

__all__ = [
    "Calories",
    "DiningTime",
    "MealId",
    "Menu",
]
