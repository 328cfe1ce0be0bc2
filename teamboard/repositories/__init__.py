from teamboard.repositories.activity_repository import ActivityRepository
from teamboard.repositories.base_repository import MongoRepository, to_object_id
from teamboard.repositories.comment_repository import CommentRepository
from teamboard.repositories.project_repository import ProjectRepository
from teamboard.repositories.task_repository import TaskRepository
from teamboard.repositories.team_repository import TeamRepository
from teamboard.repositories.user_repository import UserRepository

__all__ = [
    "ActivityRepository",
    "CommentRepository",
    "MongoRepository",
    "ProjectRepository",
    "TaskRepository",
    "TeamRepository",
    "UserRepository",
    "to_object_id",
]
