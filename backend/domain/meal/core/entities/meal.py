"""Meal aggregate root - one cafeteria meal served at a place and dining time."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from domain.meal.core.value_objects.calories import Calories
from domain.meal.core.value_objects.dining_time import DiningTime
from domain.meal.core.value_objects.meal_id import MealId
from domain.meal.core.value_objects.menu import Menu
from domain.shared.errors import ErrorKind, ValidationError
from domain.shared.ports.clock import IClock
from domain.shared.value_objects.money import Money

# Meals can be published at most one week ahead.
MAX_DAYS_AHEAD = 7

HIGH_PRICE_THRESHOLD = Money.of(6000)
LOW_CALORIE_LIMIT = 500

WEEKEND = (5, 6)  # Saturday, Sunday


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Meal:
    """
    Aggregate Root: a meal served on a date, at a dining time, in a place.

    Example:
        Meal = "Lunch at Student Cafeteria, 2024-01-15"
        ├─ price = 5000KRW
        ├─ calories = 650kcal
        └─ menu = rice, kimchi stew, herbed greens

    Invariants:
    - place is never blank (checked on every construction)
    - date is at most 7 days ahead of the clock's today (checked once,
      by Meal.create; rehydrated meals are not re-checked)

    Identity: MealId assigned by persistence (None before the first save)
    Mutability: immutable; derived predicates hold no state
    """

    id: Optional[MealId]
    date: date
    dining_time: DiningTime
    place: str
    price: Money
    calories: Calories
    menu: Menu
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not self.place or not self.place.strip():
            raise ValidationError(ErrorKind.BLANK_PLACE, "Place must not be blank")

    @staticmethod
    def create(
        meal_date: date,
        dining_time: DiningTime,
        place: str,
        price: Money,
        calories: Calories,
        menu: Menu,
        clock: IClock,
    ) -> "Meal":
        """
        Factory method for a meal that has not been persisted yet.

        Args:
            meal_date: Serving date
            dining_time: Breakfast, lunch or dinner
            place: Cafeteria name (non-blank)
            price: Price of the meal
            calories: Energy of the meal
            menu: Dishes served
            clock: Source of "today" for the publication horizon

        Raises:
            ValidationError: FUTURE_DATE_TOO_FAR if meal_date is more than
                7 days after today, BLANK_PLACE if place is blank
        """
        horizon = clock.today() + timedelta(days=MAX_DAYS_AHEAD)
        if meal_date > horizon:
            raise ValidationError(
                ErrorKind.FUTURE_DATE_TOO_FAR,
                f"Meals can only be registered up to {MAX_DAYS_AHEAD} days ahead: "
                f"{meal_date.isoformat()} > {horizon.isoformat()}",
            )

        now = clock.now()
        return Meal(
            id=None,
            date=meal_date,
            dining_time=dining_time,
            place=place,
            price=price,
            calories=calories,
            menu=menu,
            created_at=now,
            updated_at=now,
        )

    def with_id(self, meal_id: MealId) -> "Meal":
        """Copy carrying the identifier assigned by persistence."""
        return replace(self, id=meal_id)

    def is_today(self, clock: IClock) -> bool:
        return self.date == clock.today()

    def is_weekend(self) -> bool:
        return self.date.weekday() in WEEKEND

    def is_high_priced(self) -> bool:
        """Price above 6000 in the meal's currency."""
        return self.price.is_greater_than(Money.of(HIGH_PRICE_THRESHOLD.amount, self.price.currency))

    def is_low_calorie(self) -> bool:
        """Under 500 kcal (aggregate rule, distinct from Calories.is_low_calorie)."""
        return self.calories.value < LOW_CALORIE_LIMIT

    def can_be_favorited(self) -> bool:
        # Every meal can be favorited.
        return True
