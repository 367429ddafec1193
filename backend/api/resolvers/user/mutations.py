"""User domain GraphQL mutations."""

import asyncio

import strawberry
from strawberry.types import Info

from api.resolvers.user.auth import jwt_service, require_user_id, user_service
from api.types_user import AuthPayload, RegisterInput, UserType, map_user_to_graphql
from domain.shared.value_objects.email import Email


@strawberry.type
class UserMutations:
    """User domain mutations.

    Examples:
        mutation {
          register(input: {
            email: "kim@koreatech.ac.kr"
            password: "secret"
            name: "Kim"
            studentEmployeeId: "2020136000"
          }) { id email }
        }

        mutation {
          login(email: "kim@koreatech.ac.kr", password: "secret") {
            token
            user { id name }
          }
        }
    """

    @strawberry.mutation
    async def register(self, info: Info, input: RegisterInput) -> UserType:
        """Create an account.

        Password hashing runs in a worker thread, off the event loop.

        Raises:
            ValidationError: Malformed email, blank name or identifier
            DuplicateEmailError: If the email is already registered
        """
        user = await asyncio.to_thread(
            user_service(info).create_user,
            email=Email(input.email),
            raw_password=input.password,
            name=input.name,
            student_employee_id=input.student_employee_id,
        )
        return map_user_to_graphql(user)

    @strawberry.mutation
    async def login(self, info: Info, email: str, password: str) -> AuthPayload:
        """Exchange credentials for an access token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        user = await asyncio.to_thread(
            user_service(info).authenticate_user, Email(email), password
        )
        token = jwt_service(info).create_access_token(user.id)  # type: ignore[arg-type]
        return AuthPayload(token=token, user=map_user_to_graphql(user))

    @strawberry.mutation
    async def update_name(self, info: Info, name: str) -> UserType:
        """Rename the authenticated user."""
        user_id = require_user_id(info)
        user = await asyncio.to_thread(user_service(info).update_user_name, user_id, name)
        return map_user_to_graphql(user)
