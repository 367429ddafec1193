"""Fixtures for executing the GraphQL schema in-process."""

from typing import Any, Callable, Dict, Optional

import pytest

from api.context import GraphQLContext
from api.schema import create_schema
from domain.user.core.value_objects.user_id import UserId
from infrastructure.security.jwt_service import JwtService

TEST_SECRET = "test-secret-" + "k" * 64


@pytest.fixture(scope="session")
def schema():
    return create_schema()


@pytest.fixture
def jwt_service() -> JwtService:
    return JwtService(secret=TEST_SECRET)


@pytest.fixture
def execute(schema, user_service, meal_service, jwt_service) -> Callable[..., Any]:
    """Run a GraphQL document (awaitable), optionally as an authenticated user."""

    async def _execute(
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        user_id: Optional[UserId] = None,
    ):
        context = GraphQLContext(
            user_service=user_service,
            meal_service=meal_service,
            jwt_service=jwt_service,
            current_user_id=user_id,
        )
        return await schema.execute(query, variable_values=variables, context_value=context)

    return _execute
