"""Meal domain services."""

from .meal_filter import MealFilter
from .meal_service import MealDomainService
from .nutrition_summary import NutritionSummary

__all__ = [
    "MealDomainService",
    "MealFilter",
    "NutritionSummary",
]
