"""Nutrition summary projection over a set of meals."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from domain.meal.core.entities.meal import Meal
from domain.meal.core.value_objects.dining_time import DiningTime


@dataclass(frozen=True)
class NutritionSummary:
    """
    Aggregated nutrition figures for the meals of a day.

    Attributes:
        total_meals: Number of meals
        total_calories: Sum of meal calories (kcal)
        average_calories_per_meal: Integer division of total by count, 0 if empty
        average_price: Mean price rounded half-up to a whole unit, 0 if empty
        breakfast_count: Meals served at breakfast
        lunch_count: Meals served at lunch
        dinner_count: Meals served at dinner
        has_vegetarian_options: Any meal with a vegetarian item
        has_spicy_options: Any meal with a spicy item
    """

    total_meals: int
    total_calories: int
    average_calories_per_meal: int
    average_price: int
    breakfast_count: int
    lunch_count: int
    dinner_count: int
    has_vegetarian_options: bool
    has_spicy_options: bool

    @classmethod
    def empty(cls) -> "NutritionSummary":
        return cls(
            total_meals=0,
            total_calories=0,
            average_calories_per_meal=0,
            average_price=0,
            breakfast_count=0,
            lunch_count=0,
            dinner_count=0,
            has_vegetarian_options=False,
            has_spicy_options=False,
        )

    @classmethod
    def from_meals(cls, meals: Sequence[Meal]) -> "NutritionSummary":
        """Summarize meals. Prices are summed by amount, same currency assumed."""
        if not meals:
            return cls.empty()

        count = len(meals)
        total_calories = sum(meal.calories.value for meal in meals)
        total_price = sum((meal.price.amount for meal in meals), Decimal(0))
        average_price = (total_price / count).quantize(Decimal(1), rounding=ROUND_HALF_UP)

        return cls(
            total_meals=count,
            total_calories=total_calories,
            average_calories_per_meal=total_calories // count,
            average_price=int(average_price),
            breakfast_count=_count(meals, DiningTime.BREAKFAST),
            lunch_count=_count(meals, DiningTime.LUNCH),
            dinner_count=_count(meals, DiningTime.DINNER),
            has_vegetarian_options=any(meal.menu.has_vegetarian_options() for meal in meals),
            has_spicy_options=any(meal.menu.has_spicy_items() for meal in meals),
        )


def _count(meals: Sequence[Meal], dining_time: DiningTime) -> int:
    return sum(1 for meal in meals if meal.dining_time == dining_time)
