"""Domain exceptions for the Meal bounded context.

All meal exceptions inherit from MealDomainError, which is itself a
DomainError carrying an ErrorKind.
"""

from domain.shared.errors import DomainError, ErrorKind


class MealDomainError(DomainError):
    """Base exception for meal domain.

    Lets the presentation layer catch and map all meal domain errors uniformly.
    """

    pass


class MealNotFoundError(MealDomainError):
    """Raised when a meal is not found by its identifier."""

    def __init__(self, meal_id: str):
        self.meal_id = meal_id
        super().__init__(ErrorKind.MEAL_NOT_FOUND, f"Meal not found: {meal_id}")


class MealFilterError(MealDomainError):
    """Raised when a detail lookup matches no meal.

    Examples:
    - No meal at the requested place for a date / dining time pair
    """

    def __init__(self, message: str):
        super().__init__(ErrorKind.MEAL_FILTER, message)
