"""MealId value object.

Immutable identifier for Meal aggregate root, assigned by persistence.
"""

from dataclasses import dataclass

from domain.shared.errors import ErrorKind, ValidationError


@dataclass(frozen=True)
class MealId:
    """Value object for Meal ID.

    Positive integer. Frozen dataclass ensures immutability and
    provides equality by value.

    Examples:
        >>> MealId(7) == MealId(7)
        True

        >>> MealId(-1)
        Traceback (most recent call last):
        ...
        domain.shared.errors.ValidationError: Meal id must be positive, got -1
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Meal id must be an int, got {type(self.value).__name__}")
        if self.value <= 0:
            raise ValidationError(
                ErrorKind.NON_POSITIVE_ID, f"Meal id must be positive, got {self.value}"
            )

    def __str__(self) -> str:
        """String representation."""
        return str(self.value)

    def __repr__(self) -> str:
        """Developer representation."""
        return f"MealId({self.value})"
