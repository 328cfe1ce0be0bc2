from teamboard.services.access import AccessPolicy
from teamboard.services.activity_recorder import ActivityRecorder
from teamboard.services.auth_service import AuthService
from teamboard.services.comment_service import CommentService
from teamboard.services.project_service import ProjectService
from teamboard.services.task_service import TaskService
from teamboard.services.team_service import TeamService

__all__ = [
    "AccessPolicy",
    "ActivityRecorder",
    "AuthService",
    "CommentService",
    "ProjectService",
    "TaskService",
    "TeamService",
]
