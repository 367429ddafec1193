"""GraphQL schema factory.

Usage:
    from api.schema import create_schema
    schema = create_schema()
"""

import strawberry
from strawberry.tools import merge_types

from api.errors import DomainErrorExtension
from api.resolvers.meal.queries import MealQueries
from api.resolvers.user.mutations import UserMutations
from api.resolvers.user.queries import UserQueries

Query = merge_types("Query", (MealQueries, UserQueries))
Mutation = merge_types("Mutation", (UserMutations,))


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with the meal and user resolvers."""
    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
        extensions=[DomainErrorExtension],
    )
