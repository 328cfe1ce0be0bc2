from typing import List

from teamboard.models.project import Project
from teamboard.repositories.base_repository import MongoRepository


class ProjectRepository(MongoRepository[Project]):
    collection = "projects"
    model = Project

    async def list_by_team(self, team_id: str) -> List[Project]:
        return await self.list_by({"team": team_id})
