"""Activity feed recording.

Writes happen after the primary mutation has been persisted and never fail it: a storage error is logged as a warning
and swallowed.
"""

from typing import List, Optional

from mindtrace.core import Mindtrace, get_logger
from teamboard.models.activity import Activity, ActivityResponse
from teamboard.repositories.activity_repository import ActivityRepository
from teamboard.repositories.user_repository import UserRepository

DEFAULT_FEED_LIMIT = 50


class ActivityRecorder(Mindtrace):
    """Appends activity entries and lists a team's recent feed.

    Example:
        ```python
        recorder = ActivityRecorder(ActivityRepository(db), UserRepository(db))
        await recorder.record("comment_added", user_id, team_id, task_id, "Added a comment on task")
        feed = await recorder.list_recent(team_id)
        ```
    """

    def __init__(
        self,
        activities: ActivityRepository,
        users: UserRepository,
        feed_limit: int = DEFAULT_FEED_LIMIT,
    ):
        super().__init__()
        self.logger = get_logger(self.unique_name, use_structlog=True)
        self.activities = activities
        self.users = users
        self.feed_limit = feed_limit

    async def record(
        self,
        action: str,
        user_id: str,
        team_id: str,
        task_id: Optional[str] = None,
        description: str = "",
    ) -> Optional[Activity]:
        """Insert one activity. Returns None (and logs) if the write failed."""
        activity = Activity(action=action, user=user_id, team=team_id, task_id=task_id, description=description)
        try:
            return await self.activities.create(activity)
        except Exception as e:
            self.logger.warning(
                "activity_record_failed",
                action=action,
                team_id=team_id,
                task_id=task_id,
                error=str(e),
            )
            return None

    async def list_recent(self, team_id: str, limit: Optional[int] = None) -> List[ActivityResponse]:
        activities = await self.activities.list_recent(team_id, limit=limit or self.feed_limit)
        users = await self.users.public_by_ids(a.user for a in activities)
        return [ActivityResponse.build(a, users.get(a.user)) for a in activities]
