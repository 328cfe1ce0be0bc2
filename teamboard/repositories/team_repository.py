from typing import List

from teamboard.models.team import Team
from teamboard.repositories.base_repository import MongoRepository


class TeamRepository(MongoRepository[Team]):
    collection = "teams"
    model = Team

    async def list_for_member(self, user_id: str) -> List[Team]:
        """Teams whose member list contains ``user_id``, in insertion order."""
        return await self.list_by({"members": user_id})
