"""HashedPassword value object."""

from dataclasses import dataclass, field

from domain.shared.errors import ErrorKind, ValidationError


@dataclass(frozen=True)
class HashedPassword:
    """Opaque password hash produced by the password hashing port.

    The domain never handles raw passwords past the hashing step. The hash
    is excluded from repr so it does not end up in logs.
    """

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(
                ErrorKind.BLANK_IDENTIFIER, "Hashed password must not be blank"
            )

    def __str__(self) -> str:
        return "********"
