"""Mapping of domain failures to GraphQL error extensions.

Resolvers let domain errors propagate. DomainErrorExtension rewrites every
resulting GraphQL error so clients receive a stable ``code`` (the error
kind) and an HTTP-like ``status`` in ``extensions``.
"""

import logging
from typing import Any, Dict, Iterator, Optional

from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from domain.shared.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)

UNAUTHENTICATED = "UNAUTHENTICATED"

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.USER_NOT_FOUND: 404,
    ErrorKind.MEAL_NOT_FOUND: 404,
    ErrorKind.DUPLICATE_EMAIL: 409,
}
DEFAULT_STATUS = 400


class AuthenticationRequiredError(Exception):
    """A protected field was resolved without a valid access token."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


def status_for(kind: ErrorKind) -> int:
    """Transport status of a domain error kind (400 unless listed)."""
    return STATUS_BY_KIND.get(kind, DEFAULT_STATUS)


def error_extensions(error: BaseException) -> Optional[Dict[str, Any]]:
    """Extensions for a resolver exception, or None if it is not ours to map."""
    if isinstance(error, DomainError):
        return {"code": error.kind.value, "status": status_for(error.kind)}
    if isinstance(error, AuthenticationRequiredError):
        return {"code": UNAUTHENTICATED, "status": 401}
    return None


class DomainErrorExtension(SchemaExtension):
    """Adds ``code``/``status`` to errors raised by domain rules.

    Example response:
        {
          "data": null,
          "errors": [{
            "message": "Email already in use: kim@koreatech.ac.kr",
            "path": ["register"],
            "extensions": {"code": "DUPLICATE_EMAIL", "status": 409}
          }]
        }
    """

    def on_operation(self) -> Iterator[None]:
        yield

        result = self.execution_context.result
        if not result or not getattr(result, "errors", None):
            return

        for error in result.errors:
            self._annotate(error)

    def _annotate(self, error: GraphQLError) -> None:
        original = error.original_error
        if original is None:
            return

        extensions = error_extensions(original)
        if extensions is None:
            return

        logger.warning(
            "GraphQL request failed",
            extra={"code": extensions["code"], "status": extensions["status"], "path": error.path},
        )
        error.extensions = {**(error.extensions or {}), **extensions}
