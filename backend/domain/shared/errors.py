"""
Domain exceptions.

Closed error taxonomy shared by the user and meal bounded contexts.
Every domain error carries an ErrorKind so callers (the GraphQL layer)
can match exhaustively on ``error.kind`` instead of on class names.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Every failure the domain layer can raise."""

    # Validation subkinds
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    EMPTY_CURRENCY = "EMPTY_CURRENCY"
    CURRENCY_MISMATCH = "CURRENCY_MISMATCH"
    OUT_OF_RANGE_CALORIES = "OUT_OF_RANGE_CALORIES"
    EMPTY_MENU = "EMPTY_MENU"
    BLANK_MENU_ITEM = "BLANK_MENU_ITEM"
    BLANK_NAME = "BLANK_NAME"
    BLANK_IDENTIFIER = "BLANK_IDENTIFIER"
    NON_POSITIVE_ID = "NON_POSITIVE_ID"
    FUTURE_DATE_TOO_FAR = "FUTURE_DATE_TOO_FAR"
    BLANK_PLACE = "BLANK_PLACE"
    INVALID_PAGE = "INVALID_PAGE"
    INVALID_PAGE_SIZE = "INVALID_PAGE_SIZE"
    INVALID_DINING_TIME = "INVALID_DINING_TIME"
    INVALID_PRICE_BOUND = "INVALID_PRICE_BOUND"
    DATE_RANGE_TOO_LONG = "DATE_RANGE_TOO_LONG"

    # Business rule failures
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    MEAL_NOT_FOUND = "MEAL_NOT_FOUND"
    MEAL_FILTER = "MEAL_FILTER"

    @property
    def is_validation(self) -> bool:
        """True for the construction/mutation-time validation subkinds."""
        return self in _VALIDATION_KINDS


_VALIDATION_KINDS = frozenset(
    {
        ErrorKind.INVALID_EMAIL_FORMAT,
        ErrorKind.NEGATIVE_AMOUNT,
        ErrorKind.EMPTY_CURRENCY,
        ErrorKind.CURRENCY_MISMATCH,
        ErrorKind.OUT_OF_RANGE_CALORIES,
        ErrorKind.EMPTY_MENU,
        ErrorKind.BLANK_MENU_ITEM,
        ErrorKind.BLANK_NAME,
        ErrorKind.BLANK_IDENTIFIER,
        ErrorKind.NON_POSITIVE_ID,
        ErrorKind.FUTURE_DATE_TOO_FAR,
        ErrorKind.BLANK_PLACE,
        ErrorKind.INVALID_PAGE,
        ErrorKind.INVALID_PAGE_SIZE,
        ErrorKind.INVALID_DINING_TIME,
        ErrorKind.INVALID_PRICE_BOUND,
        ErrorKind.DATE_RANGE_TOO_LONG,
    }
)


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Attributes:
        kind: Closed error kind
        message: Human readable message
        cause: Optional underlying exception (also chained as __cause__)

    Example:
        >>> try:
        ...     Email("not-an-email")
        ... except DomainError as e:
        ...     e.kind
        <ErrorKind.INVALID_EMAIL_FORMAT: 'INVALID_EMAIL_FORMAT'>
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value}, message={self.message!r})"


# ═══════════════════════════════════════════════════════════
# VALIDATION
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError, ValueError):
    """
    Invariant violated at construction or mutation time.

    Subclasses ValueError so value objects keep the usual
    ``pytest.raises(ValueError)`` / ``except ValueError`` contract.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        if not kind.is_validation:
            raise TypeError(f"{kind.value} is not a validation error kind")
        super().__init__(kind, message, cause)
