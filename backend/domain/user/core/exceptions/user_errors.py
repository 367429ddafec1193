"""User domain exceptions."""

from domain.shared.errors import DomainError, ErrorKind


class UserDomainError(DomainError):
    """Base exception for User domain errors."""

    pass


class DuplicateEmailError(UserDomainError):
    """Email is already registered."""

    def __init__(self, email: str):
        """Initialize with the conflicting email.

        Args:
            email: Email that is already taken
        """
        self.email = email
        super().__init__(ErrorKind.DUPLICATE_EMAIL, f"Email already in use: {email}")


class InvalidCredentialsError(UserDomainError):
    """Email or password is wrong.

    Raised for an unknown email and for a wrong password alike, with the
    same message, so callers cannot tell which check failed.
    """

    def __init__(self) -> None:
        super().__init__(ErrorKind.INVALID_CREDENTIALS, "Invalid email or password")


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User id that was not found
        """
        self.identifier = identifier
        super().__init__(ErrorKind.USER_NOT_FOUND, f"User not found: {identifier}")
