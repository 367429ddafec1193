"""Meal filter criteria for the paginated meal search."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from domain.meal.core.entities.meal import Meal
from domain.meal.core.value_objects.dining_time import DiningTime
from domain.shared.errors import ErrorKind, ValidationError

PriceBound = Union[Decimal, int, str]


@dataclass(frozen=True)
class MealFilter:
    """
    Optional, AND-combined meal predicates.

    An unset criterion imposes no constraint. Blank ``place`` / ``menu_keyword``
    count as unset, and a date range only applies when both ends are given.

    Attributes:
        start_date: First day of the range (inclusive)
        end_date: Last day of the range (inclusive)
        dining_time: Exact dining time
        place: Case-insensitive substring of the place
        min_price: Inclusive lower price bound (meal currency assumed)
        max_price: Inclusive upper price bound
        min_calories: Inclusive lower calorie bound
        max_calories: Inclusive upper calorie bound
        menu_keyword: Case-insensitive substring of any menu item

    Example:
        >>> criteria = MealFilter(min_price=4500, max_price=5500)
        >>> criteria.has_price_range()
        True
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    dining_time: Optional[DiningTime] = None
    place: Optional[str] = None
    min_price: Optional[PriceBound] = None
    max_price: Optional[PriceBound] = None
    min_calories: Optional[int] = None
    max_calories: Optional[int] = None
    menu_keyword: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("min_price", "max_price"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _to_price_bound(name, value))

    def has_date_range(self) -> bool:
        return self.start_date is not None and self.end_date is not None

    def has_dining_time(self) -> bool:
        return self.dining_time is not None

    def has_place(self) -> bool:
        return bool(self.place and self.place.strip())

    def has_price_range(self) -> bool:
        return self.min_price is not None or self.max_price is not None

    def has_calories_range(self) -> bool:
        return self.min_calories is not None or self.max_calories is not None

    def has_menu_keyword(self) -> bool:
        return bool(self.menu_keyword and self.menu_keyword.strip())

    def matches(self, meal: Meal) -> bool:
        """True if the meal satisfies every set criterion.

        Criteria are checked in a fixed order: dining time, place, price,
        calories, menu keyword.
        """
        if self.has_dining_time() and meal.dining_time != self.dining_time:
            return False

        if self.has_place() and not _contains_ignore_case(meal.place, self.place or ""):
            return False

        if self.min_price is not None and meal.price.amount < self.min_price:
            return False
        if self.max_price is not None and meal.price.amount > self.max_price:
            return False

        if self.min_calories is not None and meal.calories.value < self.min_calories:
            return False
        if self.max_calories is not None and meal.calories.value > self.max_calories:
            return False

        if self.has_menu_keyword() and not meal.menu.contains_keyword(self.menu_keyword or ""):
            return False

        return True


def _contains_ignore_case(text: str, needle: str) -> bool:
    return needle.lower() in text.lower()


def _to_price_bound(name: str, value: PriceBound) -> Decimal:
    """Coerce a price bound to a finite Decimal.

    Raises:
        ValidationError: INVALID_PRICE_BOUND for unparsable, NaN or infinite values
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError(
            ErrorKind.INVALID_PRICE_BOUND, f"{name} is not a number: {value!r}", cause=e
        ) from e

    if not amount.is_finite():
        raise ValidationError(ErrorKind.INVALID_PRICE_BOUND, f"{name} must be finite: {value!r}")
    return amount
