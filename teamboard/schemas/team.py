from typing import List

from pydantic import RootModel

from mindtrace.core import TaskSchema
from teamboard.models import Team, TeamCreateRequest

ListTeamsSchema = TaskSchema(
    name="teamboard_list_teams",
    input_schema=None,
    output_schema=RootModel[List[Team]],
)

CreateTeamSchema = TaskSchema(
    name="teamboard_create_team",
    input_schema=TeamCreateRequest,
    output_schema=Team,
)

__all__ = [
    "CreateTeamSchema",
    "ListTeamsSchema",
]
