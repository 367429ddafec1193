from .user_errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UserDomainError,
    UserNotFoundError,
)

__all__ = [
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "UserDomainError",
    "UserNotFoundError",
]
