"""Exception types raised by Teamboard.

Every request-level error derives from ``TeamboardError`` and carries the HTTP status code and the machine readable
``code`` the API returns alongside the human readable ``detail``.
"""

from fastapi import status


class TeamboardError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_failure"
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthenticated(TeamboardError):
    """Missing, malformed, forged or expired credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthenticated"
    default_detail = "Not authenticated"


class ValidationFailure(TeamboardError):
    """A required field is missing or malformed, or a uniqueness rule was violated."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_failure"
    default_detail = "Invalid request"


class Forbidden(TeamboardError):
    """The caller is authenticated but does not belong to the owning team."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"
    default_detail = "Not a member of this team"


class NotFound(TeamboardError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_detail = "Not found"


class InternalFailure(TeamboardError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "internal_failure"
    default_detail = "Internal server error"


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing."""


class TokenError(Exception):
    """Base class for bearer token verification failures."""


class ExpiredToken(TokenError):
    """The token's expiry time has passed."""


class MalformedOrForgedToken(TokenError):
    """The token signature does not validate or its payload cannot be parsed."""


__all__ = [
    "ConfigurationError",
    "ExpiredToken",
    "Forbidden",
    "InternalFailure",
    "MalformedOrForgedToken",
    "NotFound",
    "TeamboardError",
    "TokenError",
    "Unauthenticated",
    "ValidationFailure",
]
