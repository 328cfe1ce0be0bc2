from typing import List

from mindtrace.core import Mindtrace, get_logger
from teamboard.core.exceptions import Forbidden, NotFound
from teamboard.models.activity import COMMENT_ADDED
from teamboard.models.comment import Comment, CommentCreateRequest, CommentResponse
from teamboard.repositories.comment_repository import CommentRepository
from teamboard.repositories.user_repository import UserRepository
from teamboard.services.access import AccessPolicy
from teamboard.services.activity_recorder import ActivityRecorder


class CommentService(Mindtrace):
    def __init__(
        self,
        comments: CommentRepository,
        users: UserRepository,
        access: AccessPolicy,
        recorder: ActivityRecorder,
    ):
        super().__init__()
        self.logger = get_logger(self.unique_name, use_structlog=True)
        self.comments = comments
        self.users = users
        self.access = access
        self.recorder = recorder

    async def _populate(self, comments: List[Comment]) -> List[CommentResponse]:
        authors = await self.users.public_by_ids(c.author for c in comments)
        return [CommentResponse.build(c, authors.get(c.author)) for c in comments]

    async def list_comments(self, task_id: str, user_id: str) -> List[CommentResponse]:
        await self.access.require_task(task_id, user_id)
        return await self._populate(await self.comments.list_by_task(task_id))

    async def create_comment(self, payload: CommentCreateRequest, user_id: str) -> CommentResponse:
        """Persist the comment, then record a comment_added activity on the task's team."""
        task, _, team = await self.access.require_task(payload.task, user_id)
        comment = await self.comments.create(Comment(text=payload.text, author=user_id, task=task.id))
        await self.recorder.record(COMMENT_ADDED, user_id, team.id, task.id, "Added a comment on task")
        [response] = await self._populate([comment])
        return response

    async def delete_comment(self, comment_id: str, user_id: str) -> CommentResponse:
        """Only the author or the team leader may delete a comment."""
        comment, _, team = await self.access.require_comment(comment_id, user_id)
        if user_id not in (comment.author, team.leader):
            raise Forbidden("Only the author or the team leader can delete this comment")
        deleted = await self.comments.delete(comment_id)
        if deleted is None:
            raise NotFound("Comment not found")
        [response] = await self._populate([deleted])
        return response
