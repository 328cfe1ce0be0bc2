"""Ownership checks.

Every entity below a team resolves to that team through its parent references:
Project -> Team, Task -> Project -> Team, Comment -> Task -> Project -> Team.
A missing link raises ``NotFound``; a caller outside the team's member list raises ``Forbidden``.
"""

from typing import Tuple

from teamboard.core.exceptions import Forbidden, NotFound
from teamboard.models import Comment, Project, Task, Team
from teamboard.repositories import CommentRepository, ProjectRepository, TaskRepository, TeamRepository


class AccessPolicy:
    def __init__(
        self,
        teams: TeamRepository,
        projects: ProjectRepository,
        tasks: TaskRepository,
        comments: CommentRepository,
    ):
        self.teams = teams
        self.projects = projects
        self.tasks = tasks
        self.comments = comments

    async def require_team(self, team_id: str, user_id: str) -> Team:
        team = await self.teams.get_by_id(team_id)
        if team is None:
            raise NotFound("Team not found")
        if not team.has_member(user_id):
            raise Forbidden()
        return team

    async def require_project(self, project_id: str, user_id: str) -> Tuple[Project, Team]:
        project = await self.projects.get_by_id(project_id)
        if project is None:
            raise NotFound("Project not found")
        team = await self.require_team(project.team, user_id)
        return project, team

    async def require_task(self, task_id: str, user_id: str) -> Tuple[Task, Project, Team]:
        task = await self.tasks.get_by_id(task_id)
        if task is None:
            raise NotFound("Task not found")
        project, team = await self.require_project(task.project, user_id)
        return task, project, team

    async def require_comment(self, comment_id: str, user_id: str) -> Tuple[Comment, Task, Team]:
        comment = await self.comments.get_by_id(comment_id)
        if comment is None:
            raise NotFound("Comment not found")
        task, _, team = await self.require_task(comment.task, user_id)
        return comment, task, team
