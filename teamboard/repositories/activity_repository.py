from typing import List

from teamboard.models.activity import Activity
from teamboard.repositories.base_repository import MongoRepository


class ActivityRepository(MongoRepository[Activity]):
    """Activities are append-only: there is no update path."""

    collection = "activities"
    model = Activity

    async def list_recent(self, team_id: str, limit: int = 50) -> List[Activity]:
        """Newest first. Entries sharing a timestamp fall back to insertion order, newest first."""
        return await self.list_by(
            {"team": team_id},
            sort=[("created_at", -1), ("_id", -1)],
            limit=limit,
        )
