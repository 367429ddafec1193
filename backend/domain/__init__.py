"""Domain layer.

Business rules for the user identity and meal information contexts,
independent of GraphQL presentation and of persistence technology.
"""
