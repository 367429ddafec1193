"""Bcrypt password hashing adapter.

Implements the IPasswordHasher port (structural typing, no inheritance).
Each encode call salts independently, so the same password never yields the
same hash twice. Cost factor is logarithmic: each +1 doubles the work.
"""

import logging

import bcrypt

from infrastructure.config import get_bcrypt_cost_factor

logger = logging.getLogger(__name__)

MIN_COST_FACTOR = 4
MAX_COST_FACTOR = 20


class BcryptPasswordHasher:
    """Bcrypt password hasher.

    Usage:
        >>> hasher = BcryptPasswordHasher(cost_factor=4)
        >>> encoded = hasher.encode("SecurePass123!")
        >>> hasher.matches("SecurePass123!", encoded)
        True
        >>> hasher.matches("WrongPassword", encoded)
        False
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize hasher.

        Args:
            cost_factor: Bcrypt rounds (4-20). 4 is only sensible in tests.

        Raises:
            ValueError: If cost_factor is outside 4-20
        """
        if cost_factor < MIN_COST_FACTOR:
            raise ValueError(f"Cost factor must be at least {MIN_COST_FACTOR}")
        if cost_factor > MAX_COST_FACTOR:
            raise ValueError(f"Cost factor above {MAX_COST_FACTOR} is impractically slow")

        self._cost_factor = cost_factor

    @classmethod
    def from_env(cls) -> "BcryptPasswordHasher":
        """Build from BCRYPT_COST_FACTOR (default 12)."""
        return cls(cost_factor=get_bcrypt_cost_factor())

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def encode(self, raw_password: str) -> str:
        """Hash a plaintext password ($2b$<cost>$..., 60 characters)."""
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(raw_password.encode("utf-8"), salt).decode("utf-8")

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        """Constant-time check of a plaintext password against a hash.

        Malformed hashes do not match; they never raise.
        """
        try:
            return bcrypt.checkpw(raw_password.encode("utf-8"), encoded_password.encode("utf-8"))
        except (ValueError, AttributeError):
            logger.warning("Stored password hash is not a bcrypt hash")
            return False
