"""Meal domain service.

Date-scoped meal queries, classification filters, nutrition summary and
the paginated filter engine. Everything here is a pure function of what
the repository returns for the requested days.
"""

import logging
from datetime import date, timedelta
from typing import Callable, List, Optional

from domain.meal.core.entities.meal import Meal
from domain.meal.core.exceptions.domain_errors import MealFilterError, MealNotFoundError
from domain.meal.core.ports.meal_repository import IMealRepository
from domain.meal.core.value_objects.dining_time import DiningTime
from domain.meal.core.value_objects.meal_id import MealId
from domain.meal.services.meal_filter import MealFilter
from domain.meal.services.nutrition_summary import NutritionSummary
from domain.shared.errors import ErrorKind, ValidationError
from domain.shared.pagination import Page, PageRequest
from domain.shared.ports.clock import IClock

logger = logging.getLogger(__name__)

# Longest searchable range, one find_by_date per day
MAX_RANGE_DAYS = 366


class MealDomainService:
    """Queries and classification over cafeteria meals.

    Example:
        >>> service = MealDomainService(repository, clock)
        >>> page = service.get_meals(
        ...     PageRequest(page=0, size=10),
        ...     MealFilter(dining_time=DiningTime.LUNCH, max_calories=700),
        ... )
        >>> page.total_elements >= len(page.content)
        True
    """

    def __init__(self, meal_repository: IMealRepository, clock: IClock):
        """
        Initialize service.

        Args:
            meal_repository: Meal repository port
            clock: Source of "today" for default-date queries
        """
        self._repository = meal_repository
        self._clock = clock

    # ------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------

    def get_meal_by_id(self, meal_id: MealId) -> Meal:
        """
        Raises:
            MealNotFoundError: If no meal has this id
        """
        meal = self._repository.find_by_id(meal_id)
        if meal is None:
            raise MealNotFoundError(str(meal_id))
        return meal

    def get_meal_detail(self, day: date, dining_time: DiningTime, place: str) -> Meal:
        """First meal of the slot whose place equals ``place`` ignoring case.

        Raises:
            MealFilterError: If no meal matches
        """
        wanted = place.lower()
        for meal in self.get_meals_by_date_and_dining_time(day, dining_time):
            if meal.place.lower() == wanted:
                return meal

        raise MealFilterError(
            f"No meal found for {day.isoformat()} {dining_time.value} at '{place}'"
        )

    # ------------------------------------------------------------
    # Date-scoped queries
    # ------------------------------------------------------------

    def get_meals_by_date(self, day: date) -> List[Meal]:
        return self._repository.find_by_date(day)

    def get_today_meals(self) -> List[Meal]:
        return self.get_meals_by_date(self._clock.today())

    def get_meals_by_date_and_dining_time(self, day: date, dining_time: DiningTime) -> List[Meal]:
        return self._filter_day(day, lambda meal: meal.dining_time == dining_time)

    def get_meals_by_place(self, day: date, place: str) -> List[Meal]:
        """Meals whose place contains ``place``, ignoring case."""
        needle = place.lower()
        return self._filter_day(day, lambda meal: needle in meal.place.lower())

    def get_low_calorie_meals(self, day: date) -> List[Meal]:
        """Meals under 500 kcal (Meal.is_low_calorie)."""
        return self._filter_day(day, lambda meal: meal.is_low_calorie())

    def get_vegetarian_meals(self, day: date) -> List[Meal]:
        return self._filter_day(day, lambda meal: meal.menu.has_vegetarian_options())

    def list_meals(
        self,
        day: Optional[date] = None,
        dining_time: Optional[DiningTime] = None,
        place: Optional[str] = None,
    ) -> List[Meal]:
        """Simple listing: dining time wins over place; no date means today."""
        target = day or self._clock.today()

        if dining_time is not None:
            return self.get_meals_by_date_and_dining_time(target, dining_time)
        if place is not None:
            return self.get_meals_by_place(target, place)
        return self.get_meals_by_date(target)

    def get_meal_nutrition_summary(self, day: date) -> NutritionSummary:
        meals = self.get_meals_by_date(day)
        summary = NutritionSummary.from_meals(meals)

        logger.info(
            "Nutrition summary calculated",
            extra={
                "date": day.isoformat(),
                "total_meals": summary.total_meals,
                "total_calories": summary.total_calories,
            },
        )
        return summary

    # ------------------------------------------------------------
    # Paginated filter engine
    # ------------------------------------------------------------

    def find_meals_in_range(self, start_date: date, end_date: date) -> List[Meal]:
        """Meals of every day in [start_date, end_date].

        Days are fetched one by one and concatenated, so the result is date
        ascending with repository order kept within a day. An inverted range
        yields no meals.

        Raises:
            ValidationError: DATE_RANGE_TOO_LONG if the range spans more
                than MAX_RANGE_DAYS days
        """
        span = (end_date - start_date).days + 1
        if span > MAX_RANGE_DAYS:
            raise ValidationError(
                ErrorKind.DATE_RANGE_TOO_LONG,
                f"Date range spans {span} days, at most {MAX_RANGE_DAYS} allowed",
            )

        meals: List[Meal] = []
        for offset in range(span):
            meals.extend(self._repository.find_by_date(start_date + timedelta(days=offset)))
        return meals

    def get_meals(
        self, page_request: PageRequest, meal_filter: Optional[MealFilter] = None
    ) -> Page[Meal]:
        """
        Filter meals and return one page of the result.

        Candidates come from the filter's date range when both ends are set,
        otherwise from today only. Out-of-range pages are empty, never errors.

        Args:
            page_request: Validated page window
            meal_filter: Criteria (None means no constraint)

        Returns:
            Page with the sliced content and pre-pagination totals
        """
        criteria = meal_filter or MealFilter()

        if criteria.has_date_range():
            candidates = self.find_meals_in_range(
                criteria.start_date,  # type: ignore[arg-type]
                criteria.end_date,  # type: ignore[arg-type]
            )
        else:
            candidates = self.get_today_meals()

        matching = [meal for meal in candidates if criteria.matches(meal)]
        page = Page.from_items(matching, page_request)

        logger.info(
            "Meal search executed",
            extra={
                "candidates": len(candidates),
                "total_matches": page.total_elements,
                "returned_count": len(page.content),
                "page": page_request.page,
                "size": page_request.size,
            },
        )

        return page

    def _filter_day(self, day: date, predicate: Callable[[Meal], bool]) -> List[Meal]:
        return [meal for meal in self._repository.find_by_date(day) if predicate(meal)]
