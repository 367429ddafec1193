"""GraphQL context factory for dependency injection.

Provides all required dependencies for GraphQL resolvers:
- Domain services (users, meals)
- JWT service (token issue/verification)
- The authenticated user id, decoded from the Authorization header
"""

import logging
from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from domain.meal.services.meal_service import MealDomainService
from domain.user.core.value_objects.user_id import UserId
from domain.user.services.user_service import UserDomainService
from infrastructure.security.jwt_service import InvalidAccessTokenError, JwtService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    This context is injected into all GraphQL resolvers via the
    `info` parameter. Resolvers access dependencies using
    `info.context.get("service_name")`.

    Attributes:
        user_service: User registration/authentication service
        meal_service: Meal query service
        jwt_service: Access token service
        current_user_id: Authenticated user (None for anonymous requests)
    """

    def __init__(
        self,
        user_service: UserDomainService,
        meal_service: MealDomainService,
        jwt_service: JwtService,
        current_user_id: Optional[UserId] = None,
        request: Optional[Request] = None,
    ) -> None:
        """Initialize GraphQL context with all dependencies."""
        super().__init__()
        self.user_service = user_service
        self.meal_service = meal_service
        self.jwt_service = jwt_service
        self.current_user_id = current_user_id
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Example:
            >>> meal_service = info.context.get("meal_service")
        """
        return getattr(self, key, None)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Token part of an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


def create_context(
    user_service: UserDomainService,
    meal_service: MealDomainService,
    jwt_service: JwtService,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context, authenticating the request if it carries a token.

    An invalid or expired token leaves the request anonymous; protected
    fields then fail with UNAUTHENTICATED.
    """
    current_user_id: Optional[UserId] = None

    token = extract_bearer_token(request.headers.get("Authorization") if request else None)
    if token:
        try:
            current_user_id = jwt_service.extract_user_id(token)
        except InvalidAccessTokenError as e:
            logger.info("Ignoring invalid access token", extra={"reason": str(e)})

    return GraphQLContext(
        user_service=user_service,
        meal_service=meal_service,
        jwt_service=jwt_service,
        current_user_id=current_user_id,
        request=request,
    )
