"""Identity tokens: sign claims into a time-limited JWT and verify them back."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import ExpiredSignatureError, JWTError, jwt

# Claims set by the service itself; stripped again on verify
MANAGED_CLAIMS = ("exp", "iat")

# Only signature and expiry are enforced; other registered claims pass through
CLAIM_CHECKS = {
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}


class AuthError(Exception):
    """Raised when a token cannot be accepted."""


class InvalidToken(AuthError):
    pass


class TokenExpired(AuthError):
    pass


class TokenService:
    """Issue and verify HS256 identity tokens with a process-wide secret."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expire_minutes)

    def issue(self, claims: dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """Create a signed token carrying ``claims``.

        Args:
            claims: Arbitrary payload, at minimum an ``email``
            expires_delta: Token lifetime (defaults to the configured lifetime)

        Returns:
            Encoded JWT token string
        """
        if expires_delta is None:
            expires_delta = self.expires_delta

        now = datetime.now(timezone.utc)
        payload = dict(claims)
        payload["iat"] = now
        payload["exp"] = now + expires_delta
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """Validate signature and expiry and return the claims that were issued.

        Raises:
            TokenExpired: If the token's expiry has passed
            InvalidToken: If the signature does not match or the token is malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options=CLAIM_CHECKS,
            )
        except ExpiredSignatureError as e:
            raise TokenExpired("Token has expired") from e
        except JWTError as e:
            raise InvalidToken(f"Could not validate credentials: {e}") from e

        return {k: v for k, v in payload.items() if k not in MANAGED_CLAIMS}
