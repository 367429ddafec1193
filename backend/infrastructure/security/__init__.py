"""Security adapters: password hashing and access tokens."""

from infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from infrastructure.security.jwt_service import InvalidAccessTokenError, JwtService

__all__ = [
    "BcryptPasswordHasher",
    "InvalidAccessTokenError",
    "JwtService",
]
