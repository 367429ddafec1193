"""GraphQL types for the user context."""

from datetime import datetime

import strawberry

from domain.user.core.entities.user import User


@strawberry.type
class UserType:
    """Registered student or employee. The password hash is never exposed.

    Examples:
        query {
          me {
            id
            email
            name
            studentEmployeeId
          }
        }
    """

    id: int
    email: str
    name: str
    student_employee_id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


@strawberry.type
class AuthPayload:
    """Result of a successful login."""

    token: str
    user: UserType


@strawberry.input
class RegisterInput:
    email: str
    password: str
    name: str
    student_employee_id: str


def map_user_to_graphql(user: User) -> UserType:
    """Map domain User entity to GraphQL User type."""
    if user.id is None:
        raise ValueError("Only persisted users can be exposed")

    return UserType(
        id=user.id.value,
        email=user.email.value,
        name=user.name,
        student_employee_id=user.student_employee_id,
        is_active=user.is_active(),
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
