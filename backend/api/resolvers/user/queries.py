"""User domain GraphQL queries."""

import asyncio

import strawberry
from strawberry.types import Info

from api.resolvers.user.auth import require_user_id, user_service
from api.types_user import UserType, map_user_to_graphql


@strawberry.type
class UserQueries:
    """User domain queries.

    Examples:
        query {
          me { id email name }
        }
    """

    @strawberry.field
    async def me(self, info: Info) -> UserType:
        """The authenticated user.

        Raises:
            AuthenticationRequiredError: Without a valid Bearer token
            UserNotFoundError: If the token's user no longer exists
        """
        user_id = require_user_id(info)
        user = await asyncio.to_thread(user_service(info).get_user_by_id, user_id)
        return map_user_to_graphql(user)
