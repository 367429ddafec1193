"""User entity - aggregate root."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

from domain.shared.errors import ErrorKind, ValidationError
from domain.shared.value_objects.email import Email
from domain.user.core.value_objects.hashed_password import HashedPassword
from domain.user.core.value_objects.user_id import UserId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    """User aggregate root.

    Represents a registered student or employee.

    Invariants:
    - name is never blank
    - student_employee_id is never blank
    - id is None until the repository assigns one

    State changes never mutate an instance: update_name / update_password
    return a new User with updated_at advanced.

    Examples:
        >>> user = User.create(
        ...     Email("kim@koreatech.ac.kr"),
        ...     HashedPassword("$2b$12$..."),
        ...     name="Kim",
        ...     student_employee_id="2020136000",
        ... )
        >>> user.id is None
        True

        >>> renamed = user.update_name("Kim Minsu")
        >>> renamed.name, user.name
        ('Kim Minsu', 'Kim')
    """

    id: Optional[UserId]
    email: Email
    password: HashedPassword
    name: str
    student_employee_id: str
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        """Validate invariants."""
        _require_name(self.name)

        if not self.student_employee_id or not self.student_employee_id.strip():
            raise ValidationError(
                ErrorKind.BLANK_IDENTIFIER, "Student/employee id must not be blank"
            )

    @staticmethod
    def create(
        email: Email,
        password: HashedPassword,
        name: str,
        student_employee_id: str,
        created_at: Optional[datetime] = None,
    ) -> "User":
        """Factory method for a user that has not been persisted yet.

        Args:
            email: Validated email
            password: Already hashed password
            name: Display name (non-blank)
            student_employee_id: Student or employee number (non-blank)
            created_at: Creation timestamp (defaults to now, UTC)

        Returns:
            New User with id=None

        Raises:
            ValidationError: BLANK_NAME or BLANK_IDENTIFIER
        """
        now = created_at or _utcnow()
        return User(
            id=None,
            email=email,
            password=password,
            name=name,
            student_employee_id=student_employee_id,
            created_at=now,
            updated_at=now,
        )

    def with_id(self, user_id: UserId) -> "User":
        """Copy carrying the identifier assigned by persistence."""
        return replace(self, id=user_id)

    def update_name(self, new_name: str, updated_at: Optional[datetime] = None) -> "User":
        """Return a renamed copy.

        Raises:
            ValidationError: BLANK_NAME if new_name is blank
        """
        _require_name(new_name)
        return replace(self, name=new_name, updated_at=updated_at or _utcnow())

    def update_password(
        self, new_password: HashedPassword, updated_at: Optional[datetime] = None
    ) -> "User":
        """Return a copy with a new password hash."""
        return replace(self, password=new_password, updated_at=updated_at or _utcnow())

    def is_active(self) -> bool:
        # No deactivation flow exists; every registered user is active.
        return True

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


def _require_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError(ErrorKind.BLANK_NAME, "Name must not be blank")
