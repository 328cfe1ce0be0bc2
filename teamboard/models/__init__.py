from teamboard.models.activity import (
    COMMENT_ADDED,
    TASK_COMPLETED,
    TASK_CREATED,
    Activity,
    ActivityResponse,
)
from teamboard.models.base import ApiModel, DocumentModel, utcnow
from teamboard.models.comment import Comment, CommentCreateRequest, CommentResponse
from teamboard.models.project import Project, ProjectCreateRequest
from teamboard.models.task import Task, TaskCreateRequest, TaskStatus, TaskUpdateRequest
from teamboard.models.team import Team, TeamCreateRequest
from teamboard.models.user import AuthResponse, LoginPayload, SignupPayload, User, UserPublic

__all__ = [
    "Activity",
    "ActivityResponse",
    "ApiModel",
    "AuthResponse",
    "COMMENT_ADDED",
    "Comment",
    "CommentCreateRequest",
    "CommentResponse",
    "DocumentModel",
    "LoginPayload",
    "Project",
    "ProjectCreateRequest",
    "SignupPayload",
    "TASK_COMPLETED",
    "TASK_CREATED",
    "Task",
    "TaskCreateRequest",
    "TaskStatus",
    "TaskUpdateRequest",
    "Team",
    "TeamCreateRequest",
    "User",
    "UserPublic",
    "utcnow",
]
