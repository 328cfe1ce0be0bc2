from typing import List

from mindtrace.core import Mindtrace, get_logger
from teamboard.models.team import Team, TeamCreateRequest
from teamboard.repositories.team_repository import TeamRepository


class TeamService(Mindtrace):
    def __init__(self, teams: TeamRepository):
        super().__init__()
        self.logger = get_logger(self.unique_name, use_structlog=True)
        self.teams = teams

    async def list_teams(self, user_id: str) -> List[Team]:
        return await self.teams.list_for_member(user_id)

    async def create_team(self, payload: TeamCreateRequest, user_id: str) -> Team:
        """The creator becomes leader and sole initial member."""
        team = Team(name=payload.name, description=payload.description, leader=user_id, members=[user_id])
        return await self.teams.create(team)
