"""UserId value object."""

from dataclasses import dataclass

from domain.shared.errors import ErrorKind, ValidationError


@dataclass(frozen=True)
class UserId:
    """User identifier value object.

    Positive integer assigned by persistence on first save. A user that
    has not been persisted yet carries ``id=None`` instead of a UserId.

    Examples:
        >>> UserId(42).value
        42

        >>> UserId(0)
        Traceback (most recent call last):
        ...
        domain.shared.errors.ValidationError: User id must be positive, got 0
    """

    value: int

    def __post_init__(self) -> None:
        """Validate id is a positive integer."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"User id must be an int, got {type(self.value).__name__}")
        if self.value <= 0:
            raise ValidationError(
                ErrorKind.NON_POSITIVE_ID, f"User id must be positive, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)
