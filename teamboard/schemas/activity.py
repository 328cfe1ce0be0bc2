from typing import List

from pydantic import RootModel

from mindtrace.core import TaskSchema
from teamboard.models import ActivityResponse

ListActivitySchema = TaskSchema(
    name="teamboard_list_activity",
    input_schema=None,
    output_schema=RootModel[List[ActivityResponse]],
)

__all__ = ["ListActivitySchema"]
