"""Calories value object."""

from dataclasses import dataclass

from domain.shared.errors import ErrorKind, ValidationError

MIN_CALORIES = 0
MAX_CALORIES = 9999

HIGH_CALORIE_THRESHOLD = 800
LOW_CALORIE_THRESHOLD = 300


@dataclass(frozen=True, order=True)
class Calories:
    """Energy of a meal in kcal.

    Integer in [0, 9999]. Arithmetic returns a new Calories and therefore
    re-runs the range check.

    Note:
        ``is_low_calorie`` here uses <= 300 kcal. Meal.is_low_calorie uses
        a separate < 500 kcal rule; the two are different business rules.

    Examples:
        >>> Calories(650) + Calories(100)
        Calories(value=750)

        >>> Calories(800).is_high_calorie()
        True

        >>> Calories(100) - Calories(200)
        Traceback (most recent call last):
        ...
        domain.shared.errors.ValidationError: Calories must be between 0 and 9999, got -100
    """

    value: int

    def __post_init__(self) -> None:
        """Validate calorie range."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Calories must be an int, got {type(self.value).__name__}")
        if not MIN_CALORIES <= self.value <= MAX_CALORIES:
            raise ValidationError(
                ErrorKind.OUT_OF_RANGE_CALORIES,
                f"Calories must be between {MIN_CALORIES} and {MAX_CALORIES}, got {self.value}",
            )

    def __add__(self, other: "Calories") -> "Calories":
        return Calories(self.value + other.value)

    def __sub__(self, other: "Calories") -> "Calories":
        return Calories(self.value - other.value)

    def is_high_calorie(self) -> bool:
        return self.value >= HIGH_CALORIE_THRESHOLD

    def is_low_calorie(self) -> bool:
        return self.value <= LOW_CALORIE_THRESHOLD

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.value}kcal"
