from typing import List

from teamboard.models.comment import Comment
from teamboard.repositories.base_repository import MongoRepository


class CommentRepository(MongoRepository[Comment]):
    collection = "comments"
    model = Comment

    async def list_by_task(self, task_id: str) -> List[Comment]:
        return await self.list_by({"task": task_id})
