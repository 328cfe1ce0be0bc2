"""Teamboard - team collaboration backend.

Users sign up, form teams, organize projects, move tasks through a todo / in-progress / done workflow, comment on
tasks and follow a per-team activity feed. Built on:

- Configuration via mindtrace Config (``TEAMBOARD__*`` env vars)
- A mindtrace Service (FastAPI) behind bearer-token (JWT) authentication
- Async MongoDB storage through motor
- Structured logging through structlog

Example:
    Launch the service:
    ```python
    from teamboard import TeamboardService

    TeamboardService.launch()
    ```

    Talk to a running service:
    ```python
    from teamboard import TeamboardClient

    with TeamboardClient("http://localhost:5000") as client:
        client.signup("Ada", "ada@example.com", "pw123")
        team = client.create_team("Alpha")
    ```

    Via command line:
    ```bash
    TEAMBOARD__JWT_SECRET=change-me python -m teamboard
    ```
"""

from teamboard.client import TeamboardClient, TeamboardClientError
from teamboard.core.config import TeamboardSettings, get_teamboard_config
from teamboard.db import TeamboardDB
from teamboard.teamboard import TeamboardService

__all__ = [
    "TeamboardClient",
    "TeamboardClientError",
    "TeamboardDB",
    "TeamboardService",
    "TeamboardSettings",
    "get_teamboard_config",
]
