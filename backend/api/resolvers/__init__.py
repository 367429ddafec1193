"""GraphQL resolvers grouped by bounded context."""
