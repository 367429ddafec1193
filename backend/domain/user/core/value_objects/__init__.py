"""User value objects."""

from .hashed_password import HashedPassword
from .user_id import UserId

__all__ = [
    "HashedPassword",
    "UserId",
]
