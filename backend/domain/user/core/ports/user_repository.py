"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.shared.value_objects.email import Email
from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations.
    Implementations translate between storage records and User aggregates
    and own no domain state themselves.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     def save(self, user: User) -> User:
        ...         # Upsert into MongoDB, assign id on first insert
        ...         ...
    """

    @abstractmethod
    def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User entity to persist

        Returns:
            Stored user. A user saved with id=None comes back with a newly
            assigned UserId; a persisted user overwrites the stored record.
        """
        pass

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by identifier.

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_email(self, email: Email) -> Optional[User]:
        """Find user by email.

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def exists_by_email(self, email: Email) -> bool:
        """Check whether an email is already registered.

        Note:
            Check-then-insert is only race-free when the storage also enforces
            a unique constraint on email (the Mongo adapter creates one).
        """
        pass

    @abstractmethod
    def delete(self, user: User) -> None:
        """Delete a persisted user. Unknown users are ignored."""
        pass
