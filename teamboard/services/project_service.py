from typing import List

from mindtrace.core import Mindtrace, get_logger
from teamboard.models.project import Project, ProjectCreateRequest
from teamboard.repositories.project_repository import ProjectRepository
from teamboard.services.access import AccessPolicy


class ProjectService(Mindtrace):
    def __init__(self, projects: ProjectRepository, access: AccessPolicy):
        super().__init__()
        self.logger = get_logger(self.unique_name, use_structlog=True)
        self.projects = projects
        self.access = access

    async def list_projects(self, team_id: str, user_id: str) -> List[Project]:
        await self.access.require_team(team_id, user_id)
        return await self.projects.list_by_team(team_id)

    async def create_project(self, payload: ProjectCreateRequest, user_id: str) -> Project:
        team = await self.access.require_team(payload.team, user_id)
        project = Project(name=payload.name, description=payload.description, team=team.id)
        return await self.projects.create(project)
