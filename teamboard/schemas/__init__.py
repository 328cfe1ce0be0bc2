from teamboard.schemas.activity import ListActivitySchema
from teamboard.schemas.auth import LoginSchema, SignupSchema
from teamboard.schemas.comment import CreateCommentSchema, DeleteCommentSchema, ListCommentsSchema
from teamboard.schemas.project import CreateProjectSchema, ListProjectsSchema
from teamboard.schemas.task import CreateTaskSchema, DeleteTaskSchema, ListTasksSchema, UpdateTaskSchema
from teamboard.schemas.team import CreateTeamSchema, ListTeamsSchema

__all__ = [
    "CreateCommentSchema",
    "CreateProjectSchema",
    "CreateTaskSchema",
    "CreateTeamSchema",
    "DeleteCommentSchema",
    "DeleteTaskSchema",
    "ListActivitySchema",
    "ListCommentsSchema",
    "ListProjectsSchema",
    "ListTasksSchema",
    "ListTeamsSchema",
    "LoginSchema",
    "SignupSchema",
    "UpdateTaskSchema",
]
