"""Value objects shared by the user and meal contexts."""

from .email import Email
from .money import DEFAULT_CURRENCY, Money

__all__ = [
    "DEFAULT_CURRENCY",
    "Email",
    "Money",
]
