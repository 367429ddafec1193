"""User domain service.

Registration, authentication, lookup and rename. Each operation is a single
load -> validate -> persist -> return step; transaction boundaries belong to
the caller.
"""

import logging
from datetime import datetime
from typing import Optional

from domain.shared.ports.clock import IClock
from domain.shared.value_objects.email import Email
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from domain.user.core.ports.password_hasher import IPasswordHasher
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.hashed_password import HashedPassword
from domain.user.core.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class UserDomainService:
    """Business rules around the User aggregate.

    Example:
        >>> service = UserDomainService(repository, password_hasher)
        >>> user = service.create_user(
        ...     Email("kim@koreatech.ac.kr"), "secret", "Kim", "2020136000"
        ... )
        >>> service.authenticate_user(Email("kim@koreatech.ac.kr"), "secret") == user
        True
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        clock: Optional[IClock] = None,
    ):
        """
        Initialize service.

        Args:
            user_repository: User repository port
            password_hasher: Password hashing port
            clock: Optional clock for timestamps (defaults to UTC now)
        """
        self._repository = user_repository
        self._password_hasher = password_hasher
        self._clock = clock

    def create_user(
        self,
        email: Email,
        raw_password: str,
        name: str,
        student_employee_id: str,
    ) -> User:
        """Register a new user.

        Returns:
            Stored user with its assigned id

        Raises:
            DuplicateEmailError: If the email is already registered
            ValidationError: If name or student_employee_id is blank
        """
        if self._repository.exists_by_email(email):
            logger.info("Registration rejected, email taken", extra={"email": str(email)})
            raise DuplicateEmailError(str(email))

        hashed = HashedPassword(self._password_hasher.encode(raw_password))
        user = User.create(
            email=email,
            password=hashed,
            name=name,
            student_employee_id=student_employee_id,
            created_at=self._now(),
        )

        saved = self._repository.save(user)

        logger.info(
            "User registered",
            extra={"user_id": str(saved.id), "email": str(saved.email)},
        )
        return saved

    def authenticate_user(self, email: Email, raw_password: str) -> User:
        """Check credentials.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password (same error)
        """
        user = self._repository.find_by_email(email)

        if user is None or not self._password_hasher.matches(raw_password, user.password.value):
            logger.warning("Authentication failed", extra={"email": str(email)})
            raise InvalidCredentialsError()

        return user

    def get_user_by_id(self, user_id: UserId) -> User:
        """Load a user.

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = self._repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    def update_user_name(self, user_id: UserId, new_name: str) -> User:
        """Rename a user and persist the new instance.

        Raises:
            UserNotFoundError: If no user has this id
            ValidationError: BLANK_NAME if new_name is blank
        """
        user = self.get_user_by_id(user_id)
        updated = user.update_name(new_name, updated_at=self._now())
        saved = self._repository.save(updated)

        logger.info("User renamed", extra={"user_id": str(user_id)})
        return saved

    def _now(self) -> Optional[datetime]:
        return self._clock.now() if self._clock is not None else None
