"""GraphQL presentation layer (strawberry on FastAPI)."""
