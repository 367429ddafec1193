"""Meal query resolvers.

Thin adapters over MealDomainService:
- meals / todayMeals / mealDetail / meal: listing and lookups
- lowCalorieMeals / vegetarianMeals: classification filters
- mealNutritionSummary: per-day aggregate
- searchMeals: paginated filter engine

The domain service and its repository are synchronous, so every call is
moved to a worker thread with ``asyncio.to_thread``.
"""

import asyncio
from datetime import date
from typing import List, Optional

import strawberry
from strawberry.types import Info

from api.types_meal import (
    DiningTimeType,
    MealFilterInput,
    MealPage,
    MealType,
    NutritionSummaryType,
    map_meal_page_to_graphql,
    map_meal_to_graphql,
    map_summary_to_graphql,
)
from domain.meal.core.value_objects.meal_id import MealId
from domain.meal.services.meal_service import MealDomainService
from domain.shared.pagination import DEFAULT_PAGE_SIZE, PageRequest


def _meal_service(info: Info) -> MealDomainService:
    service = info.context.get("meal_service")
    if not service:
        raise RuntimeError("meal_service not found in context")
    return service


@strawberry.type
class MealQueries:
    """Meal read operations."""

    @strawberry.field
    async def meals(
        self,
        info: Info,
        date: Optional[date] = None,
        dining_time: Optional[DiningTimeType] = None,
        place: Optional[str] = None,
    ) -> List[MealType]:
        """Meals of a day (today by default).

        Dining time takes precedence over place when both are given.

        Example:
            query {
              meals(date: "2024-01-15", diningTime: LUNCH) {
                id place calories menu
              }
            }
        """
        meals = await asyncio.to_thread(
            _meal_service(info).list_meals,
            day=date,
            dining_time=dining_time.to_domain() if dining_time else None,
            place=place,
        )
        return [map_meal_to_graphql(meal) for meal in meals]

    @strawberry.field
    async def today_meals(self, info: Info) -> List[MealType]:
        meals = await asyncio.to_thread(_meal_service(info).get_today_meals)
        return [map_meal_to_graphql(meal) for meal in meals]

    @strawberry.field
    async def meal_detail(
        self, info: Info, date: date, dining_time: DiningTimeType, place: str
    ) -> MealType:
        """The meal served at ``place`` (case-insensitive) for a date and slot."""
        meal = await asyncio.to_thread(
            _meal_service(info).get_meal_detail, date, dining_time.to_domain(), place
        )
        return map_meal_to_graphql(meal)

    @strawberry.field
    async def meal(self, info: Info, id: int) -> MealType:
        meal = await asyncio.to_thread(_meal_service(info).get_meal_by_id, MealId(id))
        return map_meal_to_graphql(meal)

    @strawberry.field
    async def low_calorie_meals(self, info: Info, date: date) -> List[MealType]:
        """Meals under 500 kcal on a date."""
        meals = await asyncio.to_thread(_meal_service(info).get_low_calorie_meals, date)
        return [map_meal_to_graphql(meal) for meal in meals]

    @strawberry.field
    async def vegetarian_meals(self, info: Info, date: date) -> List[MealType]:
        meals = await asyncio.to_thread(_meal_service(info).get_vegetarian_meals, date)
        return [map_meal_to_graphql(meal) for meal in meals]

    @strawberry.field
    async def meal_nutrition_summary(self, info: Info, date: date) -> NutritionSummaryType:
        summary = await asyncio.to_thread(_meal_service(info).get_meal_nutrition_summary, date)
        return map_summary_to_graphql(summary)

    @strawberry.field
    async def search_meals(
        self,
        info: Info,
        filter: Optional[MealFilterInput] = None,
        page: int = 0,
        size: int = DEFAULT_PAGE_SIZE,
    ) -> MealPage:
        """Filter meals and return one page.

        Without a date range only today's meals are searched.

        Example:
            query {
              searchMeals(
                filter: {startDate: "2024-01-15", endDate: "2024-01-17", maxCalories: 700}
                page: 0
                size: 10
              ) {
                content { id date place }
                totalElements
                totalPages
                last
              }
            }
        """
        page_request = PageRequest(page=page, size=size)
        meal_filter = filter.to_domain() if filter else None
        result = await asyncio.to_thread(_meal_service(info).get_meals, page_request, meal_filter)
        return map_meal_page_to_graphql(result)
