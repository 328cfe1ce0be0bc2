"""Configuration for the Teamboard service.

Uses mindtrace.core.Config for environment variable override support. Teamboard settings live in a ``TEAMBOARD``
section next to the ``MINDTRACE_*`` sections; environment variables use the ``TEAMBOARD__`` prefix
(e.g. ``TEAMBOARD__JWT_SECRET=...``, ``TEAMBOARD__MONGO_URI=mongodb://mongo:27017``).
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, SecretStr

from mindtrace.core import Config, setup_logger
from teamboard.core.exceptions import ConfigurationError


class TeamboardSettings(BaseModel):
    """Teamboard service configuration settings."""

    # Service URL (e.g., http://localhost:5000)
    URL: str = "http://localhost:5000"

    # MongoDB connection
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "teamboard"

    # Auth / JWT (JWT_SECRET must be provided)
    AUTH_ENABLED: bool = True
    JWT_SECRET: Optional[SecretStr] = None
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_IN: int = 24 * 60 * 60  # seconds

    # Activity feed
    ACTIVITY_FEED_LIMIT: int = 50

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


class TeamboardConfig(Config):
    """mindtrace Config with a ``TEAMBOARD`` section, overridable through ``TEAMBOARD__<KEY>`` env vars."""

    TEAMBOARD: TeamboardSettings = TeamboardSettings()


# Module-level config cache
_config: Optional[TeamboardConfig] = None


def get_teamboard_config() -> TeamboardConfig:
    """Get the Teamboard configuration singleton.

    Configuration is loaded once and cached. Supports environment variable overrides using the ``TEAMBOARD__``
    prefix.

    Examples:
        ```bash
        export TEAMBOARD__URL=http://0.0.0.0:5000
        export TEAMBOARD__JWT_SECRET=change-me
        ```

        ```python
        config = get_teamboard_config()
        print(config.TEAMBOARD.URL)  # http://0.0.0.0:5000
        ```
    """
    global _config
    if _config is None:
        _config = TeamboardConfig()
    return _config


def reset_teamboard_config() -> None:
    """Reset the config cache. Useful for testing."""
    global _config
    _config = None


def require_secret(config: TeamboardConfig) -> str:
    """Return the JWT signing secret, or raise if it is not configured.

    Raises:
        ConfigurationError: If ``TEAMBOARD__JWT_SECRET`` is unset or blank.
    """
    value = (config.get_secret("TEAMBOARD", "JWT_SECRET") or "").strip()
    if not value:
        raise ConfigurationError(
            "TEAMBOARD__JWT_SECRET is not set. Export a signing secret before starting the service."
        )
    return value


def configure_logging(settings: Optional[TeamboardSettings] = None, **kwargs):
    """Configure the root ``mindtrace`` logger, and structlog with it, from the TEAMBOARD section.

    ``LOG_LEVEL`` sets the stream level; ``DEBUG`` lowers it to DEBUG and swaps the JSON renderer for structlog's
    console renderer. Child loggers obtained afterwards through ``get_logger`` do not reconfigure structlog, so this
    choice holds for the whole process. The root's current ``propagate`` flag is kept.
    """
    settings = settings or TeamboardSettings()
    stream_level = logging.DEBUG if settings.DEBUG else logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(stream_level, int):
        stream_level = logging.INFO
    kwargs.setdefault("propagate", logging.getLogger("mindtrace").propagate)
    return setup_logger(
        "mindtrace",
        stream_level=stream_level,
        use_structlog=True,
        structlog_json=not settings.DEBUG,
        **kwargs,
    )
