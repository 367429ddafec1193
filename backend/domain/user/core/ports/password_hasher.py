"""Password hashing port."""

from typing import Protocol


class IPasswordHasher(Protocol):
    """One-way password hashing capability.

    Implemented in infrastructure (bcrypt). Structural typing: any object
    with these two methods satisfies the port.
    """

    def encode(self, raw_password: str) -> str:
        """Hash a raw password."""
        ...

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        """True if raw_password hashes to encoded_password."""
        ...
