from typing import List

from pydantic import RootModel

from mindtrace.core import TaskSchema
from teamboard.models import Project, ProjectCreateRequest

ListProjectsSchema = TaskSchema(
    name="teamboard_list_projects",
    input_schema=None,
    output_schema=RootModel[List[Project]],
)

CreateProjectSchema = TaskSchema(
    name="teamboard_create_project",
    input_schema=ProjectCreateRequest,
    output_schema=Project,
)

__all__ = [
    "CreateProjectSchema",
    "ListProjectsSchema",
]
