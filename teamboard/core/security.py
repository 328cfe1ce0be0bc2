from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

import jwt
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mindtrace.core import utcnow
from teamboard.core.config import TeamboardConfig, require_secret
from teamboard.core.exceptions import ConfigurationError, ExpiredToken, MalformedOrForgedToken

DEFAULT_TOKEN_LIFETIME = timedelta(hours=24)


class TokenClaims(BaseModel):
    """Identity claims embedded in a bearer token."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1)
    email: str
    issued_at: int = Field(..., alias="iat")
    expires_at: int = Field(..., alias="exp")


class TokenService:
    """Issues and verifies signed bearer tokens (HS256 JWT by default).

    Verification depends only on the token and the signing key: no I/O and no server-side session state.

    Example:
        ```python
        tokens = TokenService(secret="change-me")
        token = tokens.issue(user_id="665f...", email="a@x.com")
        claims = tokens.verify(token)
        assert claims.user_id == "665f..."
        ```
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret or not secret.strip():
            raise ConfigurationError("A non-empty signing secret is required to issue tokens.")
        self._secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime
        self._clock = clock or utcnow

    @classmethod
    def from_config(cls, config: TeamboardConfig) -> "TokenService":
        """Build a token service from config. Raises ConfigurationError when no secret is configured."""
        cfg = config.TEAMBOARD
        return cls(
            require_secret(config),
            algorithm=cfg.JWT_ALGORITHM,
            lifetime=timedelta(seconds=cfg.JWT_EXPIRES_IN),
        )

    def issue(self, user_id: str, email: str) -> str:
        """Create a signed token for the given user."""
        now = self._clock()
        payload: Dict[str, Any] = {
            "userId": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + self.lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a token, returning its identity claims.

        Raises:
            ExpiredToken: The token's ``exp`` is in the past.
            MalformedOrForgedToken: Bad signature, wrong algorithm or an unparseable payload.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredToken("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise MalformedOrForgedToken("Invalid token") from e

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as e:
            raise MalformedOrForgedToken("Invalid token payload") from e
