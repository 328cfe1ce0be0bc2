"""TaskSchemas for task-related operations.

Note: ``TaskSchema`` describes an API endpoint; ``Task`` is the board item it operates on.
"""

from typing import List

from pydantic import RootModel

from mindtrace.core import TaskSchema
from teamboard.models import Task, TaskCreateRequest, TaskUpdateRequest

ListTasksSchema = TaskSchema(
    name="teamboard_list_tasks",
    input_schema=None,
    output_schema=RootModel[List[Task]],
)

CreateTaskSchema = TaskSchema(
    name="teamboard_create_task",
    input_schema=TaskCreateRequest,
    output_schema=Task,
)

UpdateTaskSchema = TaskSchema(
    name="teamboard_update_task",
    input_schema=TaskUpdateRequest,
    output_schema=Task,
)

DeleteTaskSchema = TaskSchema(
    name="teamboard_delete_task",
    input_schema=None,
    output_schema=Task,
)

__all__ = [
    "CreateTaskSchema",
    "DeleteTaskSchema",
    "ListTasksSchema",
    "UpdateTaskSchema",
]
