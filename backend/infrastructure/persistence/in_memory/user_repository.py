"""In-memory user repository implementation.

Provides an in-memory implementation of the IUserRepository port for tests
and local development. Users are immutable, so stored instances are shared
without copying.
"""

import threading
from typing import Dict, List, Optional

from domain.shared.value_objects.email import Email
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import DuplicateEmailError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId


class InMemoryUserRepository(IUserRepository):
    """
    In-memory implementation of IUserRepository port.

    Ids are assigned sequentially from 1. Email uniqueness is enforced on
    save, the same way the unique index does it in MongoDB.

    Thread safety: saves are serialized by a lock (resolvers run in worker threads)
    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> repository = InMemoryUserRepository()
        >>> saved = repository.save(User.create(email, password, "Kim", "2020136000"))
        >>> saved.id
        UserId(value=1)
    """

    def __init__(self) -> None:
        """Initialize repository with empty storage."""
        self._storage: Dict[int, User] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def save(self, user: User) -> User:
        """
        Insert or overwrite a user.

        Raises:
            DuplicateEmailError: If another user already owns the email
        """
        with self._lock:
            owner = self._find_owner(user.email)
            if owner is not None and owner.id != user.id:
                raise DuplicateEmailError(str(user.email))

            if user.id is None:
                self._last_id += 1
                user = user.with_id(UserId(self._last_id))
            else:
                self._last_id = max(self._last_id, user.id.value)

            self._storage[user.id.value] = user  # type: ignore[union-attr]
        return user

    def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._storage.get(user_id.value)

    def find_by_email(self, email: Email) -> Optional[User]:
        return self._find_owner(email)

    def exists_by_email(self, email: Email) -> bool:
        return self._find_owner(email) is not None

    def delete(self, user: User) -> None:
        if user.id is not None:
            self._storage.pop(user.id.value, None)

    def find_all(self) -> List[User]:
        """All users in id order."""
        return list(self._storage.values())

    def clear(self) -> None:
        """Clear all users (for testing)."""
        self._storage.clear()
        self._last_id = 0

    def count(self) -> int:
        """Count total users (for testing)."""
        return len(self._storage)

    def _find_owner(self, email: Email) -> Optional[User]:
        for user in self._storage.values():
            if user.email == email:
                return user
        return None
