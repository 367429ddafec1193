"""DiningTime enumeration."""

from enum import Enum

from domain.shared.errors import ErrorKind, ValidationError


class DiningTime(str, Enum):
    """Meal slot of the day."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_value(cls, value: str) -> "DiningTime":
        """Parse a slot label, ignoring case.

        Raises:
            ValidationError: INVALID_DINING_TIME for unknown labels
        """
        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError) as e:
            raise ValidationError(
                ErrorKind.INVALID_DINING_TIME, f"Invalid dining time: {value}", cause=e
            ) from e


_DISPLAY_NAMES = {
    DiningTime.BREAKFAST: "아침",
    DiningTime.LUNCH: "점심",
    DiningTime.DINNER: "저녁",
}
