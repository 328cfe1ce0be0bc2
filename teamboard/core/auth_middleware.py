"""Authentication middleware for Teamboard.

Validates the bearer token on every protected request and attaches the caller's identity to ``request.state``.
Authentication only: per-resource membership checks live in ``teamboard.services.access``.
"""

from typing import FrozenSet, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response

from mindtrace.core import get_logger
from teamboard.core.exceptions import ExpiredToken, TokenError, Unauthenticated
from teamboard.core.security import TokenService

AUTH_EXEMPT_PATHS: FrozenSet[str] = frozenset(
    {
        "/api/auth/signup",
        "/api/auth/login",
        "/status",
        "/heartbeat",
        "/endpoints",
        "/docs",
        "/redoc",
        "/openapi.json",
    }
)


class AuthMiddleware(BaseHTTPMiddleware):
    """Bearer token authentication with configurable bypass paths.

    On success ``request.state.user_id`` and ``request.state.email`` hold the verified claims. Every failure is
    answered with a 401 JSON body before the request reaches any handler.

    Example:
        ```python
        tokens = TokenService.from_config(get_teamboard_config())
        app.add_middleware(AuthMiddleware, token_service=tokens)
        ```
    """

    def __init__(
        self,
        app,
        token_service: TokenService,
        enabled: bool = True,
        exempt_paths: Optional[FrozenSet[str]] = None,
    ):
        super().__init__(app)
        self.token_service = token_service
        self.enabled = enabled
        self.exempt_paths = exempt_paths if exempt_paths is not None else AUTH_EXEMPT_PATHS
        self.logger = get_logger("teamboard.auth_middleware", use_structlog=True)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.enabled or request.method == "OPTIONS":
            return await call_next(request)

        path = request.url.path.rstrip("/") or "/"
        if path in self.exempt_paths or path.startswith("/docs/"):
            return await call_next(request)

        auth_header = request.headers.get("Authorization")
        if not auth_header:
            return self._reject(path, "No token provided")

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            return self._reject(path, "Invalid Authorization header format. Expected: Bearer <token>")

        try:
            claims = self.token_service.verify(parts[1])
        except ExpiredToken:
            return self._reject(path, "Token has expired")
        except TokenError:
            return self._reject(path, "Invalid token")

        request.state.user_id = claims.user_id
        request.state.email = claims.email
        return await call_next(request)

    def _reject(self, path: str, reason: str) -> JSONResponse:
        self.logger.info("authentication_rejected", path=path, reason=reason)
        error = Unauthenticated(reason)
        return JSONResponse(
            status_code=error.status_code,
            content={"detail": error.detail, "error": error.code},
            headers={"WWW-Authenticate": "Bearer"},
        )


def current_user_id(request: Request) -> str:
    """FastAPI dependency returning the authenticated caller's user id.

    Raises:
        Unauthenticated: If no middleware attached an identity to the request.
    """
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise Unauthenticated()
    return user_id
