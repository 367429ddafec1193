"""MongoDB User Repository implementation."""

from typing import Any, Dict, Optional

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from domain.shared.value_objects.email import Email
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import DuplicateEmailError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.hashed_password import HashedPassword
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """MongoDB implementation of User repository.

    Document Schema:
    {
        "_id": 1,                        # UserId (counters sequence)
        "email": "kim@koreatech.ac.kr",  # unique index
        "password": "$2b$12$...",
        "name": "Kim",
        "student_employee_id": "2020136000",
        "created_at": ISODate(...),
        "updated_at": ISODate(...)
    }

    The unique email index is the last line of defence against concurrent
    registrations of the same address; a violation surfaces as
    DuplicateEmailError.

    Examples:
        >>> repo = MongoUserRepository(database)
        >>> saved = repo.save(User.create(email, password, "Kim", "2020136000"))
        >>> repo.find_by_email(email) == saved
        True
    """

    @property
    def collection_name(self) -> str:
        return "users"

    def ensure_indexes(self) -> None:
        self._collection.create_index([("email", ASCENDING)], unique=True)

    def to_document(self, entity: User) -> Dict[str, Any]:
        user = entity
        if user.id is None:
            raise ValueError("Cannot map a user without id")

        return {
            "_id": user.id.value,
            "email": user.email.value,
            "password": user.password.value,
            "name": user.name,
            "student_employee_id": user.student_employee_id,
            "created_at": user.created_at,
            "updated_at": user.updated_at,
        }

    def from_document(self, doc: Dict[str, Any]) -> User:
        try:
            return User(
                id=UserId(int(doc["_id"])),
                email=Email(doc["email"]),
                password=HashedPassword(doc["password"]),
                name=doc["name"],
                student_employee_id=doc["student_employee_id"],
                created_at=self.ensure_utc(doc["created_at"]),
                updated_at=self.ensure_utc(doc["updated_at"]),
            )
        except KeyError as e:
            raise ValueError(f"User document {doc.get('_id')} is missing field {e}") from e

    def save(self, user: User) -> User:
        """Insert or overwrite a user.

        Raises:
            DuplicateEmailError: If the unique email index rejects the write
        """
        if user.id is None:
            user = user.with_id(UserId(self._next_id()))

        try:
            self._replace_one(self.to_document(user))
        except DuplicateKeyError as e:
            raise DuplicateEmailError(str(user.email)) from e

        return user

    def find_by_id(self, user_id: UserId) -> Optional[User]:
        doc = self._find_one({"_id": user_id.value})
        return self.from_document(doc) if doc else None

    def find_by_email(self, email: Email) -> Optional[User]:
        doc = self._find_one({"email": email.value})
        return self.from_document(doc) if doc else None

    def exists_by_email(self, email: Email) -> bool:
        return self._count({"email": email.value}, limit=1) > 0

    def delete(self, user: User) -> None:
        if user.id is not None:
            self._delete_one({"_id": user.id.value})
