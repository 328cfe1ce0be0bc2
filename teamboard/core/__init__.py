from teamboard.core.config import (
    TeamboardConfig,
    TeamboardSettings,
    configure_logging,
    get_teamboard_config,
    require_secret,
    reset_teamboard_config,
)
from teamboard.core.exceptions import (
    ConfigurationError,
    ExpiredToken,
    Forbidden,
    InternalFailure,
    MalformedOrForgedToken,
    NotFound,
    TeamboardError,
    TokenError,
    Unauthenticated,
    ValidationFailure,
)

configure_logging()  # Initialize the default structured logger

from teamboard.core.security import TokenClaims, TokenService  # noqa: E402

__all__ = [
    "ConfigurationError",
    "ExpiredToken",
    "Forbidden",
    "InternalFailure",
    "MalformedOrForgedToken",
    "NotFound",
    "TeamboardConfig",
    "TeamboardError",
    "TeamboardSettings",
    "TokenClaims",
    "TokenError",
    "TokenService",
    "Unauthenticated",
    "ValidationFailure",
    "configure_logging",
    "get_teamboard_config",
    "require_secret",
    "reset_teamboard_config",
]
