"""JWT access token service.

Issues and verifies HMAC-signed access tokens carrying the user id in a
``userId`` claim. Tokens expire a configurable number of days after issue.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import jwt
from jwt.exceptions import ExpiredSignatureError
from jwt.exceptions import InvalidTokenError as JWTError

from domain.user.core.value_objects.user_id import UserId
from infrastructure.config import (
    get_jwt_algorithm,
    get_jwt_expiration_days,
    get_jwt_secret,
)

logger = logging.getLogger(__name__)

USER_ID_CLAIM = "userId"


class InvalidAccessTokenError(Exception):
    """Token is malformed, badly signed, expired or lacks a valid userId."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JwtService:
    """Create and verify access tokens.

    Examples:
        >>> service = JwtService(secret="s" * 64)
        >>> token = service.create_access_token(UserId(1))
        >>> service.extract_user_id(token)
        UserId(value=1)
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS512",
        expiration_days: int = 7,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize service.

        Args:
            secret: HMAC signing secret (non-empty)
            algorithm: HMAC algorithm (HS256/HS384/HS512)
            expiration_days: Token lifetime in days (positive)
            now: Time source for the issue timestamp
        """
        if not secret:
            raise ValueError("JWT secret must not be empty")
        if expiration_days <= 0:
            raise ValueError("Token expiration must be at least one day")

        self._secret = secret
        self._algorithm = algorithm
        self._expiration = timedelta(days=expiration_days)
        self._now = now

    @classmethod
    def from_env(cls) -> "JwtService":
        """Build from JWT_SECRET_KEY, JWT_ALGORITHM and JWT_ACCESS_TOKEN_EXPIRATION_DAYS."""
        return cls(
            secret=get_jwt_secret(),
            algorithm=get_jwt_algorithm(),
            expiration_days=get_jwt_expiration_days(),
        )

    def create_access_token(self, user_id: UserId) -> str:
        issued_at = self._now()
        payload: Dict[str, Any] = {
            USER_ID_CLAIM: user_id.value,
            "iat": issued_at,
            "exp": issued_at + self._expiration,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def extract_user_id(self, token: str) -> UserId:
        """Verify the token and return its user id.

        Raises:
            InvalidAccessTokenError: If the token cannot be trusted
        """
        payload = self._decode(token)

        raw_user_id = payload.get(USER_ID_CLAIM)
        if not isinstance(raw_user_id, int) or isinstance(raw_user_id, bool):
            raise InvalidAccessTokenError(f"Token has no valid '{USER_ID_CLAIM}' claim")

        try:
            return UserId(raw_user_id)
        except ValueError as e:
            raise InvalidAccessTokenError(f"Token has no valid '{USER_ID_CLAIM}' claim") from e

    def is_valid_token(self, token: str) -> bool:
        try:
            self.extract_user_id(token)
        except InvalidAccessTokenError:
            return False
        return True

    def _decode(self, token: Optional[str]) -> Dict[str, Any]:
        if not token:
            raise InvalidAccessTokenError("Token is empty")

        try:
            payload: Dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", USER_ID_CLAIM]},
            )
        except ExpiredSignatureError as e:
            logger.info("Access token expired")
            raise InvalidAccessTokenError("Token has expired") from e
        except JWTError as e:
            logger.warning("Access token rejected", extra={"reason": str(e)})
            raise InvalidAccessTokenError(f"Invalid token: {e}") from e

        return payload
