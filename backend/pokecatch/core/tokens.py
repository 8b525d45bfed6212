"""Token Service — issues and verifies signed, time-limited session tokens.

Invariants:
    - Tokens carry sub (user id), iat and exp; nothing else is trusted
    - Signing and verification use the same secret and algorithm
    - now >= exp means expired (expiry instant itself is already invalid)
    - Tokens are stateless: no store lookup, no revocation before exp

Design Decisions:
    - PyJWT HS256 over a hand-rolled HMAC: standard compact JWS encoding
    - Expiry compared against an injectable clock instead of PyJWT's built-in
      exp check, so tests can verify at exact offsets from issuance
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from pokecatch.core.domain_types import AuthenticatedSubject, UserId
from pokecatch.core.errors import TokenExpiredError, TokenInvalidError

DEFAULT_TTL = timedelta(minutes=60)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issue and verify bearer tokens for authenticated users."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl
        self._clock = clock

    def issue(self, user_id: UserId, now: datetime | None = None) -> str:
        """Sign a token for user_id, valid for the configured TTL."""
        issued_at = now or self._clock()
        payload = {
            "sub": str(user_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str, now: datetime | None = None) -> UserId:
        """Return the subject of a valid token."""
        return self.authenticate(token, now).user_id

    def authenticate(
        self, token: str, now: datetime | None = None,
    ) -> AuthenticatedSubject:
        """Verify token and build the subject the auth gate hands to routes."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "exp"],
                },
            )
        except jwt.InvalidTokenError as e:
            raise TokenInvalidError(f"Invalid token: {e.__class__.__name__}")

        try:
            user_id = UserId(UUID(payload["sub"]))
            expires_at = datetime.fromtimestamp(int(payload["exp"]), timezone.utc)
        except (TypeError, ValueError, AttributeError, OverflowError, OSError):
            raise TokenInvalidError("Invalid token claims")

        current = now or self._clock()
        if current >= expires_at:
            raise TokenExpiredError()
        return AuthenticatedSubject(user_id=user_id, expires_at=expires_at)
