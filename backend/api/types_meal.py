"""GraphQL types for the meal context.

Read-only projections of Meal aggregates, nutrition summaries and meal
pages, plus the search filter input.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

import strawberry

from domain.meal.core.entities.meal import Meal
from domain.meal.core.value_objects.dining_time import DiningTime
from domain.meal.services.meal_filter import MealFilter
from domain.meal.services.nutrition_summary import NutritionSummary
from domain.shared.pagination import Page

__all__ = [
    "DiningTimeType",
    "MoneyType",
    "MealType",
    "MealPage",
    "NutritionSummaryType",
    "MealFilterInput",
    "map_meal_to_graphql",
    "map_meal_page_to_graphql",
    "map_summary_to_graphql",
]


# ============================================
# MEAL TYPES
# ============================================


@strawberry.enum
class DiningTimeType(Enum):
    """Meal slot of the day."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"

    def to_domain(self) -> DiningTime:
        return DiningTime(self.value)


@strawberry.type
class MoneyType:
    amount: Decimal
    currency: str

    @strawberry.field
    def display(self) -> str:
        """Amount followed by currency, e.g. "5000KRW"."""
        return f"{self.amount}{self.currency}"


@strawberry.type
class MealType:
    """Cafeteria meal served on a date, at a dining time, in a place."""

    id: int
    date: date
    dining_time: DiningTimeType
    dining_time_label: str
    place: str
    price: MoneyType
    calories: int
    menu: List[str]

    is_weekend: bool
    is_high_priced: bool
    is_low_calorie: bool
    has_vegetarian_options: bool
    has_spicy_items: bool

    created_at: datetime
    updated_at: datetime


# ============================================
# QUERY RESULT TYPES
# ============================================


@strawberry.type
class MealPage:
    """One page of a filtered meal search."""

    content: List[MealType]
    page: int
    size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool


@strawberry.type
class NutritionSummaryType:
    """Nutrition figures for the meals of a day."""

    total_meals: int
    total_calories: int
    average_calories_per_meal: int
    average_price: int
    breakfast_count: int
    lunch_count: int
    dinner_count: int
    has_vegetarian_options: bool
    has_spicy_options: bool


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class MealFilterInput:
    """Optional, AND-combined search criteria. Omitted fields match everything."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    dining_time: Optional[DiningTimeType] = None
    place: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    min_calories: Optional[int] = None
    max_calories: Optional[int] = None
    menu_keyword: Optional[str] = None

    def to_domain(self) -> MealFilter:
        return MealFilter(
            start_date=self.start_date,
            end_date=self.end_date,
            dining_time=self.dining_time.to_domain() if self.dining_time else None,
            place=self.place,
            min_price=self.min_price,
            max_price=self.max_price,
            min_calories=self.min_calories,
            max_calories=self.max_calories,
            menu_keyword=self.menu_keyword,
        )


# ============================================
# MAPPERS
# ============================================


def map_meal_to_graphql(meal: Meal) -> MealType:
    """Map domain Meal entity to GraphQL Meal type."""
    if meal.id is None:
        raise ValueError("Only persisted meals can be exposed")

    return MealType(
        id=meal.id.value,
        date=meal.date,
        dining_time=DiningTimeType(meal.dining_time.value),
        dining_time_label=meal.dining_time.display_name,
        place=meal.place,
        price=MoneyType(amount=meal.price.amount, currency=meal.price.currency),
        calories=meal.calories.value,
        menu=list(meal.menu.items),
        is_weekend=meal.is_weekend(),
        is_high_priced=meal.is_high_priced(),
        is_low_calorie=meal.is_low_calorie(),
        has_vegetarian_options=meal.menu.has_vegetarian_options(),
        has_spicy_items=meal.menu.has_spicy_items(),
        created_at=meal.created_at,
        updated_at=meal.updated_at,
    )


def map_meal_page_to_graphql(page: Page[Meal]) -> MealPage:
    return MealPage(
        content=[map_meal_to_graphql(meal) for meal in page.content],
        page=page.page,
        size=page.size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        first=page.first,
        last=page.last,
    )


def map_summary_to_graphql(summary: NutritionSummary) -> NutritionSummaryType:
    return NutritionSummaryType(
        total_meals=summary.total_meals,
        total_calories=summary.total_calories,
        average_calories_per_meal=summary.average_calories_per_meal,
        average_price=summary.average_price,
        breakfast_count=summary.breakfast_count,
        lunch_count=summary.lunch_count,
        dinner_count=summary.dinner_count,
        has_vegetarian_options=summary.has_vegetarian_options,
        has_spicy_options=summary.has_spicy_options,
    )
