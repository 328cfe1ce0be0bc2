from typing import List

from teamboard.models.task import Task
from teamboard.repositories.base_repository import MongoRepository


class TaskRepository(MongoRepository[Task]):
    collection = "tasks"
    model = Task

    async def list_by_project(self, project_id: str) -> List[Task]:
        return await self.list_by({"project": project_id})
