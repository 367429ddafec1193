"""Unit tests for MealDomainService."""

import logging
from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from domain.meal.core.exceptions.domain_errors import MealFilterError, MealNotFoundError
from domain.meal.core.value_objects.dining_time import DiningTime
from domain.meal.core.value_objects.meal_id import MealId
from domain.meal.services.meal_filter import MealFilter
from domain.meal.services.meal_service import MAX_RANGE_DAYS, MealDomainService
from domain.shared.errors import ErrorKind, ValidationError
from domain.shared.pagination import PageRequest

TODAY = date(2024, 1, 15)
YESTERDAY = TODAY - timedelta(days=1)


class TestLookups:
    """Test get_meal_by_id and get_meal_detail."""

    def test_get_meal_by_id(self, meal_service, save_meal):
        """Test stored meals are found by id."""
        meal = save_meal()

        assert meal_service.get_meal_by_id(meal.id) == meal

    def test_get_unknown_meal(self, meal_service):
        """Test unknown ids raise MEAL_NOT_FOUND."""
        with pytest.raises(MealNotFoundError) as exc_info:
            meal_service.get_meal_by_id(MealId(404))

        assert exc_info.value.kind == ErrorKind.MEAL_NOT_FOUND

    def test_meal_detail_matches_place_ignoring_case(self, meal_service, save_meal):
        """Test place equality is case-insensitive."""
        save_meal(place="Faculty Cafeteria")
        wanted = save_meal(place="Student Cafeteria")

        found = meal_service.get_meal_detail(TODAY, DiningTime.LUNCH, "student cafeteria")

        assert found == wanted

    def test_meal_detail_returns_first_match(self, meal_service, save_meal):
        """Test the first meal in repository order wins."""
        first = save_meal(place="Student Cafeteria", calories=500)
        save_meal(place="STUDENT CAFETERIA", calories=900)

        found = meal_service.get_meal_detail(TODAY, DiningTime.LUNCH, "Student Cafeteria")

        assert found == first

    def test_meal_detail_requires_exact_place(self, meal_service, save_meal):
        """Test substrings do not satisfy a detail lookup."""
        save_meal(place="Student Cafeteria")

        with pytest.raises(MealFilterError) as exc_info:
            meal_service.get_meal_detail(TODAY, DiningTime.LUNCH, "Student")

        assert exc_info.value.kind == ErrorKind.MEAL_FILTER

    def test_meal_detail_other_slot(self, meal_service, save_meal):
        """Test the dining time must match too."""
        save_meal(dining_time=DiningTime.DINNER)

        with pytest.raises(MealFilterError):
            meal_service.get_meal_detail(TODAY, DiningTime.LUNCH, "Student Cafeteria")

    def test_meal_detail_does_not_trim_place(self, meal_service, save_meal):
        """Test surrounding whitespace is part of the compared place."""
        save_meal(place="Student Cafeteria")

        with pytest.raises(MealFilterError):
            meal_service.get_meal_detail(TODAY, DiningTime.LUNCH, " Student Cafeteria ")


class TestDateScopedQueries:
    """Test per-day listing and classification."""

    def test_get_meals_by_date(self, meal_service, save_meal):
        """Test only meals of that date are returned."""
        today_meal = save_meal()
        save_meal(meal_date=YESTERDAY)

        assert meal_service.get_meals_by_date(TODAY) == [today_meal]

    def test_get_today_meals_uses_clock(self, meal_service, save_meal):
        """Test today comes from the injected clock."""
        today_meal = save_meal()
        save_meal(meal_date=YESTERDAY)

        assert meal_service.get_today_meals() == [today_meal]

    def test_get_meals_by_date_and_dining_time(self, meal_service, save_meal):
        """Test slot filtering."""
        save_meal(dining_time=DiningTime.BREAKFAST)
        dinner = save_meal(dining_time=DiningTime.DINNER)

        result = meal_service.get_meals_by_date_and_dining_time(TODAY, DiningTime.DINNER)

        assert result == [dinner]

    def test_get_meals_by_place_is_substring(self, meal_service, save_meal):
        """Test place filter matches substrings ignoring case."""
        student = save_meal(place="Student Cafeteria")
        save_meal(place="Faculty Lounge")

        assert meal_service.get_meals_by_place(TODAY, "STUDENT") == [student]

    def test_get_low_calorie_meals(self, meal_service, save_meal):
        """Test the < 500 kcal meal rule."""
        light = save_meal(calories=450)
        save_meal(calories=500)
        save_meal(calories=800)

        assert meal_service.get_low_calorie_meals(TODAY) == [light]

    def test_get_vegetarian_meals(self, meal_service, save_meal):
        """Test menu keyword classification."""
        veggie = save_meal(menu=("rice", "mapo tofu"))
        save_meal(menu=("pork cutlet",))

        assert meal_service.get_vegetarian_meals(TODAY) == [veggie]

    def test_list_meals_defaults_to_today(self, meal_service, save_meal):
        """Test list_meals without arguments lists today."""
        today_meal = save_meal()
        save_meal(meal_date=YESTERDAY)

        assert meal_service.list_meals() == [today_meal]

    def test_list_meals_dining_time_wins_over_place(self, meal_service, save_meal):
        """Test place is ignored when a dining time is given."""
        lunch = save_meal(dining_time=DiningTime.LUNCH, place="Faculty Lounge")
        save_meal(dining_time=DiningTime.DINNER, place="Student Cafeteria")

        result = meal_service.list_meals(dining_time=DiningTime.LUNCH, place="Student")

        assert result == [lunch]

    def test_list_meals_by_place(self, meal_service, save_meal):
        """Test place filter when no dining time is given."""
        save_meal(meal_date=YESTERDAY, place="Faculty Lounge")
        student = save_meal(meal_date=YESTERDAY, place="Student Cafeteria")

        assert meal_service.list_meals(day=YESTERDAY, place="student") == [student]

    def test_nutrition_summary(self, meal_service, save_meal, caplog):
        """Test summary over a day's meals is logged."""
        save_meal(calories=400, price=4000)
        save_meal(calories=600, price=5000)

        with caplog.at_level(logging.INFO, logger="domain.meal.services.meal_service"):
            summary = meal_service.get_meal_nutrition_summary(TODAY)

        assert summary.total_meals == 2
        assert summary.total_calories == 1000
        assert summary.average_price == 4500
        assert "Nutrition summary calculated" in caplog.text

    def test_empty_day(self, meal_service):
        """Test an empty day produces empty results, never errors."""
        assert meal_service.get_meals_by_date(TODAY) == []
        assert meal_service.get_meal_nutrition_summary(TODAY).total_meals == 0


class TestPaginatedSearch:
    """Test get_meals filter engine."""

    def test_range_is_date_ascending(self, meal_service, save_meal):
        """Test three days with one meal each come back in date order."""
        day3 = save_meal(meal_date=TODAY + timedelta(days=2))
        day1 = save_meal(meal_date=TODAY)
        day2 = save_meal(meal_date=TODAY + timedelta(days=1))

        page = meal_service.get_meals(
            PageRequest(page=0, size=10),
            MealFilter(start_date=TODAY, end_date=TODAY + timedelta(days=2)),
        )

        assert page.content == [day1, day2, day3]
        assert page.total_elements == 3

    def test_range_keeps_repository_order_within_a_day(self, meal_service, save_meal):
        """Test per-day order is the repository's native order."""
        first = save_meal(dining_time=DiningTime.DINNER)
        second = save_meal(dining_time=DiningTime.BREAKFAST)

        page = meal_service.get_meals(
            PageRequest(), MealFilter(start_date=TODAY, end_date=TODAY)
        )

        assert page.content == [first, second]

    def test_without_range_searches_today_only(self, meal_service, save_meal):
        """Test absent range means today."""
        today_meal = save_meal()
        save_meal(meal_date=YESTERDAY)

        page = meal_service.get_meals(PageRequest())

        assert page.content == [today_meal]

    def test_half_range_means_today(self, meal_service, save_meal):
        """Test a range with only one end falls back to today."""
        today_meal = save_meal()
        save_meal(meal_date=YESTERDAY)

        page = meal_service.get_meals(PageRequest(), MealFilter(start_date=YESTERDAY))

        assert page.content == [today_meal]

    def test_inverted_range_is_empty(self, meal_service, save_meal):
        """Test start after end yields no meals."""
        save_meal()

        page = meal_service.get_meals(
            PageRequest(), MealFilter(start_date=TODAY, end_date=YESTERDAY)
        )

        assert page.content == []
        assert page.total_pages == 1

    def test_filters_then_paginates(self, meal_service, save_meal):
        """Test totals are counted after filtering, before slicing."""
        for kcal in (300, 400, 500, 600, 700, 800, 900):
            save_meal(calories=kcal)

        page = meal_service.get_meals(
            PageRequest(page=1, size=2), MealFilter(min_calories=400, max_calories=800)
        )

        assert [m.calories.value for m in page.content] == [600, 700]
        assert page.total_elements == 5
        assert page.total_pages == 3
        assert page.first is False
        assert page.last is False

    def test_out_of_range_page(self, meal_service, save_meal):
        """Test pages past the end are empty, not errors."""
        save_meal()

        page = meal_service.get_meals(PageRequest(page=5, size=10))

        assert page.content == []
        assert page.total_elements == 1
        assert page.last is True

    def test_range_fetches_each_day(self, clock):
        """Test the range is resolved with one find_by_date per day."""
        repository = MagicMock()
        repository.find_by_date.return_value = []
        service = MealDomainService(repository, clock)

        service.get_meals(
            PageRequest(), MealFilter(start_date=TODAY, end_date=TODAY + timedelta(days=2))
        )

        called_days = [c.args[0] for c in repository.find_by_date.call_args_list]
        assert called_days == [TODAY, TODAY + timedelta(days=1), TODAY + timedelta(days=2)]

    def test_range_ending_on_last_representable_day(self, clock):
        """Test a range ending on date.max is walked without overflow."""
        repository = MagicMock()
        repository.find_by_date.return_value = []
        service = MealDomainService(repository, clock)

        meals = service.find_meals_in_range(date.max - timedelta(days=1), date.max)

        called_days = [c.args[0] for c in repository.find_by_date.call_args_list]
        assert called_days == [date.max - timedelta(days=1), date.max]
        assert meals == []

    def test_range_longer_than_limit_is_rejected(self, clock):
        """Test overlong ranges fail before touching the repository."""
        repository = MagicMock()
        service = MealDomainService(repository, clock)

        with pytest.raises(ValidationError) as exc_info:
            service.get_meals(
                PageRequest(),
                MealFilter(start_date=TODAY, end_date=TODAY + timedelta(days=MAX_RANGE_DAYS)),
            )

        assert exc_info.value.kind == ErrorKind.DATE_RANGE_TOO_LONG
        repository.find_by_date.assert_not_called()

    def test_range_at_limit_is_accepted(self, clock):
        """Test a range of exactly MAX_RANGE_DAYS days is searched."""
        repository = MagicMock()
        repository.find_by_date.return_value = []
        service = MealDomainService(repository, clock)

        service.find_meals_in_range(TODAY, TODAY + timedelta(days=MAX_RANGE_DAYS - 1))

        assert repository.find_by_date.call_count == MAX_RANGE_DAYS

    def test_invalid_page_request(self):
        """Test page request validation happens before any query."""
        with pytest.raises(ValidationError) as exc_info:
            PageRequest(page=0, size=0)

        assert exc_info.value.kind == ErrorKind.INVALID_PAGE_SIZE

    def test_logs_search(self, meal_service, save_meal, caplog):
        """Test every search is logged with counts."""
        save_meal()

        with caplog.at_level(logging.INFO, logger="domain.meal.services.meal_service"):
            meal_service.get_meals(PageRequest())

        assert "Meal search executed" in caplog.text
