from typing import List, Optional

from mindtrace.core import Mindtrace, get_logger
from teamboard.core.exceptions import NotFound, ValidationFailure
from teamboard.models.activity import TASK_COMPLETED, TASK_CREATED
from teamboard.models.task import Task, TaskCreateRequest, TaskStatus, TaskUpdateRequest
from teamboard.models.team import Team
from teamboard.repositories.task_repository import TaskRepository
from teamboard.services.access import AccessPolicy
from teamboard.services.activity_recorder import ActivityRecorder


class TaskService(Mindtrace):
    """Task CRUD scoped to the owning team, with task_created / task_completed activity entries."""

    def __init__(self, tasks: TaskRepository, access: AccessPolicy, recorder: ActivityRecorder):
        super().__init__()
        self.logger = get_logger(self.unique_name, use_structlog=True)
        self.tasks = tasks
        self.access = access
        self.recorder = recorder

    @staticmethod
    def _check_assignee(assignee: Optional[str], team: Team) -> None:
        if assignee is not None and not team.has_member(assignee):
            raise ValidationFailure("Assignee must be a member of the project's team")

    async def list_tasks(self, project_id: str, user_id: str) -> List[Task]:
        await self.access.require_project(project_id, user_id)
        return await self.tasks.list_by_project(project_id)

    async def create_task(self, payload: TaskCreateRequest, user_id: str) -> Task:
        project, team = await self.access.require_project(payload.project, user_id)
        self._check_assignee(payload.assignee, team)
        task = await self.tasks.create(
            Task(
                title=payload.title,
                description=payload.description,
                project=project.id,
                assignee=payload.assignee,
                due_date=payload.due_date,
            )
        )
        await self.recorder.record(
            TASK_CREATED, user_id, team.id, task.id, f"Created task \"{task.title}\""
        )
        return task

    async def update_task(self, task_id: str, payload: TaskUpdateRequest, user_id: str) -> Task:
        task, _, team = await self.access.require_task(task_id, user_id)
        changes = payload.changes()
        if "assignee" in changes:
            self._check_assignee(changes["assignee"], team)

        updated = await self.tasks.update(task_id, changes)
        if updated is None:
            raise NotFound("Task not found")

        if task.status != TaskStatus.DONE and updated.status == TaskStatus.DONE:
            await self.recorder.record(
                TASK_COMPLETED, user_id, team.id, updated.id, f"Completed task \"{updated.title}\""
            )
        return updated

    async def delete_task(self, task_id: str, user_id: str) -> Task:
        """Remove the task. Its comments and activity entries are left in place."""
        await self.access.require_task(task_id, user_id)
        deleted = await self.tasks.delete(task_id)
        if deleted is None:
            raise NotFound("Task not found")
        return deleted
