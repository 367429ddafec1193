"""Email value object."""

import re
from dataclasses import dataclass

from domain.shared.errors import ErrorKind, ValidationError

_EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@([A-Za-z0-9.-]+\.[A-Za-z]{2,})$")


@dataclass(frozen=True, order=True)
class Email:
    """Email address value object.

    Immutable, compared and ordered by the underlying string.

    Examples:
        >>> Email("student@koreatech.ac.kr").value
        'student@koreatech.ac.kr'

        >>> Email("missing-at.example.com")
        Traceback (most recent call last):
        ...
        domain.shared.errors.ValidationError: Invalid email format: missing-at.example.com
    """

    value: str

    def __post_init__(self) -> None:
        """Validate address format."""
        if not isinstance(self.value, str) or not _EMAIL_PATTERN.fullmatch(self.value):
            raise ValidationError(
                ErrorKind.INVALID_EMAIL_FORMAT,
                f"Invalid email format: {self.value}",
            )

    @property
    def domain(self) -> str:
        """Part after the '@'."""
        return self.value.split("@", 1)[1]

    def __str__(self) -> str:
        return self.value
